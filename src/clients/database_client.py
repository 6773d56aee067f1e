# -*- coding: utf-8 -*-
"""
Клиент для работы с базой данных (PostgreSQL в проде, SQLite локально).
"""
from sqlalchemy.ext.asyncio import (AsyncEngine, AsyncSession,
                                    async_sessionmaker, create_async_engine)

from src.config.settings import settings
from src.domain.models import Base


def create_engine_from_url(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Создаёт асинхронный движок для указанного URL.

    Для SQLite пул не проверяет соединения, для остальных СУБД включаем
    pre-ping и переподключение раз в час.
    """
    if database_url.startswith("sqlite"):
        return create_async_engine(database_url, echo=echo)
    return create_async_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,  # Проверяем соединение перед использованием
        pool_recycle=3600,  # Переподключаемся каждый час
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Создаёт фабрику асинхронных сессий для движка."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Объекты остаются доступными после коммита
    )


# Движок и фабрика сессий приложения
async_engine = create_engine_from_url(settings.database_url, settings.database_echo)
AsyncSessionLocal = create_session_factory(async_engine)


async def init_db(engine: AsyncEngine = async_engine) -> None:
    """
    Инициализирует базу данных, создавая все определенные таблицы.

    Raises:
        SQLAlchemyError: Ошибки при создании таблиц
        OperationalError: Ошибки подключения к базе данных
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
