# -*- coding: utf-8 -*-
"""
QuizApi/src/api/v1/questions/controller.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Контроллер вопросов: проверка входных данных, вызов сценария
использования и преобразование результата в HTTP ответ.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from loguru import logger
from starlette import status

from src.domain.uploads import ImageUpload
from src.repository.questions import QuestionRepository
from src.service.questions import (AddQuestion, DeleteQuestion,
                                   GetAllQuestions, GetQuestion,
                                   GetQuestionsByTopic, UpdateQuestion)
from src.utils.exceptions import ErrorCode, error_code, error_message
from src.utils.image_url import generate_img_url

from .shared.validators import (DestroyValidator, IndexValidator,
                                ShowValidator, StoreValidator,
                                UpdateValidator)

UseCaseFactory = Callable[[QuestionRepository], Any]


@dataclass(frozen=True)
class QuestionUseCases:
    """Фабрики сценариев использования, каждая принимает репозиторий."""

    get_all: UseCaseFactory = GetAllQuestions
    get_by_topic: UseCaseFactory = GetQuestionsByTopic
    get_one: UseCaseFactory = GetQuestion
    add: UseCaseFactory = AddQuestion
    update: UseCaseFactory = UpdateQuestion
    delete: UseCaseFactory = DeleteQuestion


def json_response(content: Any, status_code: int) -> JSONResponse:
    return JSONResponse(content=jsonable_encoder(content), status_code=status_code)


def bad_request_response(message: str) -> JSONResponse:
    logger.warning(f"Некорректный запрос: {message}")
    return json_response({"message": message}, status.HTTP_400_BAD_REQUEST)


def error_response(error: Exception, not_found_allowed: bool = False) -> JSONResponse:
    """Ответ на ошибку сценария.

    404 только для обработчиков, работающих с существующим вопросом
    (not_found_allowed), все остальные ошибки дают 500.
    """
    message = error_message(error)
    if not_found_allowed and error_code(error) is ErrorCode.NOT_FOUND:
        logger.warning(f"Вопрос не найден: {error!r}")
        return json_response({"message": message}, status.HTTP_404_NOT_FOUND)

    logger.opt(exception=error).error(f"Ошибка обработки запроса: {message}")
    return json_response({"message": message}, status.HTTP_500_INTERNAL_SERVER_ERROR)


class QuestionController:
    """Обработчики эндпоинтов вопросов.

    Репозиторий и фабрики сценариев передаются при создании приложения,
    сам контроллер не хранит состояния между запросами.
    """

    def __init__(
        self,
        repository: QuestionRepository,
        use_cases: Optional[QuestionUseCases] = None,
    ):
        self.repository = repository
        self.use_cases = use_cases or QuestionUseCases()

    async def index(self, topic: Optional[str] = None) -> JSONResponse:
        """Список вопросов, при указании темы только вопросы этой темы."""
        result = IndexValidator.validate({"topic": topic})
        if not result.is_valid:
            return bad_request_response(result.message)

        try:
            if topic:
                questions = await self.use_cases.get_by_topic(
                    self.repository
                ).execute(topic)
            else:
                questions = await self.use_cases.get_all(self.repository).execute()
            return json_response(questions, status.HTTP_200_OK)
        except Exception as e:
            return error_response(e)

    async def show(self, question_id: str) -> JSONResponse:
        """Один вопрос по ID."""
        result = ShowValidator.validate({"id": question_id})
        if not result.is_valid:
            return bad_request_response(result.message)

        try:
            question = await self.use_cases.get_one(self.repository).execute(
                question_id
            )
            return json_response(question, status.HTTP_200_OK)
        except Exception as e:
            return error_response(e, not_found_allowed=True)

    async def store(
        self, json_payload: Optional[str], img_file: Optional[ImageUpload] = None
    ) -> JSONResponse:
        """Создание вопроса из поля json и необязательного изображения."""
        result = StoreValidator.validate({"imgFile": img_file, "json": json_payload})
        if not result.is_valid:
            return bad_request_response(result.message)

        fields = result.payload.model_dump()
        try:
            use_case = self.use_cases.add(self.repository)
            if img_file is not None:
                fields["img_url"] = generate_img_url(fields["topic"], img_file.filename)
                question_id = await use_case.execute(fields, img_file)
            else:
                question_id = await use_case.execute(fields)

            return json_response(
                {"message": f"Question created with id: {question_id}"},
                status.HTTP_201_CREATED,
            )
        except Exception as e:
            return error_response(e)

    async def update(
        self,
        question_id: str,
        json_payload: Optional[str],
        img_file: Optional[ImageUpload] = None,
    ) -> JSONResponse:
        """Полная замена содержимого вопроса."""
        result = UpdateValidator.validate(
            {"imgFile": img_file, "json": json_payload, "id": question_id}
        )
        if not result.is_valid:
            return bad_request_response(result.message)

        fields = {"id": question_id, **result.payload.model_dump()}
        try:
            use_case = self.use_cases.update(self.repository)
            if img_file is not None:
                fields["img_url"] = generate_img_url(fields["topic"], img_file.filename)
                update_time = await use_case.execute(fields, img_file)
            else:
                update_time = await use_case.execute(fields)

            return json_response({"updateTime": update_time}, status.HTTP_200_OK)
        except Exception as e:
            return error_response(e, not_found_allowed=True)

    async def destroy(self, question_id: str) -> JSONResponse:
        """Удаление вопроса по ID."""
        result = DestroyValidator.validate({"id": question_id})
        if not result.is_valid:
            return bad_request_response(result.message)

        try:
            delete_time = await self.use_cases.delete(self.repository).execute(
                question_id
            )
            return json_response({"deleteTime": delete_time}, status.HTTP_200_OK)
        except Exception as e:
            return error_response(e, not_found_allowed=True)
