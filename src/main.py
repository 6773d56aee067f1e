# -*- coding: utf-8 -*-
"""
Точка входа FastAPI-приложения Quiz API.
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.v1.questions import QuestionController, build_router
from src.clients.database_client import AsyncSessionLocal, init_db
from src.config.logger import configure_logger
from src.config.settings import settings
from src.config.uvicorn_config import setup_uvicorn_logging
from src.repository.questions import (QuestionRepository,
                                      SqlAlchemyQuestionRepository)
from src.utils.startup_banner import print_startup_banner

logger = configure_logger()


def create_app(
    repository: Optional[QuestionRepository] = None, init_database: bool = True
) -> FastAPI:
    """
    Собирает приложение и связывает контроллер с репозиторием.

    Args:
        repository: Репозиторий вопросов, по умолчанию SQLAlchemy поверх
            настроенной базы данных
        init_database: Создавать ли таблицы при старте

    Returns:
        FastAPI: Готовое приложение
    """
    app = FastAPI(
        title="Quiz API",
        description="API вопросов викторины",
        version=settings.app_version,
        docs_url="/api/v1/docs",
        redoc_url="/api/v1/redoc",
        openapi_url="/api/v1/openapi.json",
        openapi_tags=[
            {"name": "❓ Вопросы", "description": "CRUD операции для вопросов"},
        ],
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins(),
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.get_cors_methods(),
        allow_headers=settings.get_cors_headers(),
    )

    # Middleware для логирования всех запросов
    @app.middleware("http")
    async def log_all_requests(request, call_next):
        is_api = request.url.path.startswith("/api/")
        if is_api:
            logger.info(f"🌐 API запрос: {request.method} {request.url.path}")

        try:
            response = await call_next(request)
        except Exception:
            if is_api:
                logger.exception(
                    f"💥 Критическая ошибка API: {request.method} {request.url.path}"
                )
            raise

        if is_api:
            if response.status_code >= 400:
                logger.warning(
                    f"❌ API ошибка: {request.method} {request.url.path} → {response.status_code}"
                )
            else:
                logger.info(
                    f"✅ API ответ: {request.method} {request.url.path} → {response.status_code}"
                )
        return response

    if repository is None:
        repository = SqlAlchemyQuestionRepository(AsyncSessionLocal)

    controller = QuestionController(repository)
    app.include_router(build_router(controller), prefix="/api/v1/questions")

    @app.on_event("startup")
    async def startup_event():
        setup_uvicorn_logging()
        print_startup_banner()

        if init_database:
            logger.info("🔧 Инициализация базы данных...")
            await init_db()
            logger.info("✅ База данных готова")

    @app.on_event("shutdown")
    async def shutdown_event():
        """Обработчик завершения приложения"""
        logger.info("🛑 Завершение работы Quiz API")

    @app.get("/api/v1")
    async def api_root():
        """Корневой эндпоинт API."""
        return {"message": "Quiz API работает", "version": app.version}

    @app.get("/api/v1/health")
    async def api_health():
        """Проверка живости приложения."""
        return {"status": "ok"}

    return app


app = create_app()
