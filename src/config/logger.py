# -*- coding: utf-8 -*-
"""
Настройка логирования Quiz API на loguru.

Стандартный logging (uvicorn, SQLAlchemy) перенаправляется в loguru,
поэтому все сообщения выводятся в одном формате.
"""
import logging
import sys

from loguru import logger

from src.config.settings import settings

# Сторонние логгеры, которые не выводятся в консоль
QUIET_LOGGERS = ("httpx", "httpcore", "multipart", "aiosqlite")

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

# Системные сообщения выводятся без пути к файлу
SYSTEM_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>SYSTEM</cyan> | "
    "<level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """Передаёт записи стандартного logging в loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        if record.name.startswith(QUIET_LOGGERS):
            return

        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Ищем кадр, из которого пришёл вызов, минуя модуль logging
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _is_system(record) -> bool:
    return record["extra"].get("system") is True


def setup_logging(level: str = settings.log_level, debug: bool = settings.debug):
    """Пересоздаёт sink'и loguru и включает перехват стандартного logging."""
    level = level.upper()
    logger.remove()

    logger.add(
        sys.stdout,
        format=CONSOLE_FORMAT,
        level=level,
        colorize=True,
        backtrace=debug,
        diagnose=False,
        filter=lambda record: not _is_system(record)
        and (debug or record["level"].name != "DEBUG"),
    )
    logger.add(
        sys.stdout,
        format=SYSTEM_FORMAT,
        level=level,
        colorize=True,
        diagnose=False,
        filter=_is_system,
    )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)


setup_logging()


def configure_logger(prefix: str = "APP"):
    """
    Логгер компонента.

    Args:
        prefix: Имя компонента, попадает в extra["component"]

    Returns:
        loguru.Logger: Общий логгер с привязанным компонентом
    """
    return logger.bind(component=prefix)


def get_system_logger():
    """Логгер системных сообщений (старт, остановка, баннер)."""
    return logger.bind(system=True)
