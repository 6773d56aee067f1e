# -*- coding: utf-8 -*-
"""
Общие фикстуры для тестирования
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from src.clients.database_client import create_session_factory
from src.domain.models import Base
from src.main import create_app
from src.repository.questions import SqlAlchemyQuestionRepository

# Тестовая база данных в памяти
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_engine():
    """Создать тестовый движок БД."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    # Создаем таблицы
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Удаляем таблицы
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    """Фабрика сессий тестовой БД."""
    return create_session_factory(test_engine)


@pytest.fixture
def repository(session_factory):
    """Репозиторий вопросов поверх тестовой БД."""
    return SqlAlchemyQuestionRepository(session_factory)


@pytest.fixture
def app(repository):
    """Приложение, связанное с тестовым репозиторием."""
    return create_app(repository, init_database=False)


@pytest.fixture
async def async_client(app):
    """Создать асинхронный тестовый клиент для API."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
