# -*- coding: utf-8 -*-
"""
Сводка о запуске Quiz API: версия, окружение, адрес API и база данных.
"""

import platform
import sys

from sqlalchemy.engine import make_url

from src.config.logger import get_system_logger
from src.config.settings import settings

system_logger = get_system_logger()


def get_database_label(database_url: str = settings.database_url) -> str:
    """URL базы данных со скрытым паролем."""
    return make_url(database_url).render_as_string(hide_password=True)


def get_startup_lines() -> list[str]:
    python_version = ".".join(str(part) for part in sys.version_info[:3])
    return [
        f"Quiz API v{settings.app_version}",
        f"Python {python_version} на {platform.system()} {platform.machine()}",
        f"API: http://{settings.app_host}:{settings.app_port}/api/v1",
        f"База данных: {get_database_label()}",
        f"Конфигурация: {settings.get_config_source()}",
    ]


def print_startup_banner():
    """Выводит сводку о запуске в системный лог."""
    for line in get_startup_lines():
        system_logger.info(line)
