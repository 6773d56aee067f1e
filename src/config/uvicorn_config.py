# -*- coding: utf-8 -*-
"""
Запуск Quiz API через uvicorn с логами в loguru.
"""

import logging

import uvicorn

from src.config.logger import InterceptHandler
from src.config.settings import settings

# Уровни сторонних логгеров. uvicorn.access приглушён: запросы
# логирует middleware приложения.
THIRD_PARTY_LOG_LEVELS = {
    "uvicorn": logging.INFO,
    "uvicorn.error": logging.INFO,
    "uvicorn.access": logging.WARNING,
    "fastapi": logging.INFO,
    "sqlalchemy.engine": logging.WARNING,
    "sqlalchemy.pool": logging.WARNING,
}


def setup_uvicorn_logging():
    """Перенаправляет логи uvicorn и SQLAlchemy в loguru."""
    for name, level in THIRD_PARTY_LOG_LEVELS.items():
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.propagate = False
        std_logger.setLevel(level)

    if settings.database_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)


def get_uvicorn_config() -> dict:
    """Аргументы uvicorn.run для текущих настроек."""
    return {
        "app": "src.main:app",
        "host": settings.app_host,
        "port": settings.app_port,
        "reload": settings.debug,
        "log_config": None,
        "access_log": False,
    }


def run():
    """Точка входа `quiz-api`."""
    setup_uvicorn_logging()
    uvicorn.run(**get_uvicorn_config())
