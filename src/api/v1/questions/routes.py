# -*- coding: utf-8 -*-
"""
QuizApi/src/api/v1/questions/routes.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Роутер вопросов, привязанный к экземпляру контроллера.

Параметры объявлены необязательными: проверку выполняют валидаторы
контроллера, чтобы ошибки ввода всегда возвращались как 400 {"message"}.
"""

from typing import List, Optional

from fastapi import APIRouter, File, Form, Query, UploadFile

from src.domain.uploads import ImageUpload

from .controller import QuestionController
from .shared.schemas import (DeleteTimeResponse, MessageResponse,
                             QuestionReadSchema, UpdateTimeResponse)

ERROR_RESPONSES = {
    400: {"model": MessageResponse, "description": "Некорректные входные данные"},
    500: {"model": MessageResponse, "description": "Внутренняя ошибка"},
}
NOT_FOUND_RESPONSE = {
    404: {"model": MessageResponse, "description": "Вопрос не найден"},
}


async def read_image_upload(img_file: Optional[UploadFile]) -> Optional[ImageUpload]:
    """Читает загруженный файл целиком. Пустое поле файла считается отсутствующим."""
    if img_file is None:
        return None
    content = await img_file.read()
    if not img_file.filename and not content:
        return None
    return ImageUpload(
        filename=img_file.filename or "",
        content_type=img_file.content_type or "application/octet-stream",
        content=content,
    )


def build_router(controller: QuestionController) -> APIRouter:
    """Создаёт роутер с эндпоинтами CRUD для вопросов."""
    router = APIRouter(tags=["❓ Вопросы"])

    @router.get(
        "",
        summary="Список вопросов",
        responses={200: {"model": List[QuestionReadSchema]}, **ERROR_RESPONSES},
    )
    async def index(
        topic: Optional[str] = Query(None, description="Тема вопросов"),
    ):
        """
        Получить все вопросы или только вопросы указанной темы.

        - **topic**: тема (Makanan, Ikon, Wisata и т.д.), необязательно
        """
        return await controller.index(topic)

    @router.get(
        "/{question_id}",
        summary="Получить вопрос",
        responses={
            200: {"model": QuestionReadSchema},
            **ERROR_RESPONSES,
            **NOT_FOUND_RESPONSE,
        },
    )
    async def show(question_id: str):
        """Получить вопрос по ID."""
        return await controller.show(question_id)

    @router.post(
        "",
        summary="Создать вопрос",
        status_code=201,
        responses={201: {"model": MessageResponse}, **ERROR_RESPONSES},
    )
    async def store(
        json_payload: Optional[str] = Form(
            None, alias="json", description="JSON с полями вопроса"
        ),
        imgFile: Optional[UploadFile] = File(None, description="Изображение"),
    ):
        """
        Создать вопрос.

        - **json**: строка JSON с полями question, answer, choices, topic
        - **imgFile**: изображение к вопросу (необязательно)
        """
        image = await read_image_upload(imgFile)
        return await controller.store(json_payload, image)

    @router.put(
        "/{question_id}",
        summary="Обновить вопрос",
        responses={
            200: {"model": UpdateTimeResponse},
            **ERROR_RESPONSES,
            **NOT_FOUND_RESPONSE,
        },
    )
    async def update(
        question_id: str,
        json_payload: Optional[str] = Form(
            None, alias="json", description="JSON с полями вопроса"
        ),
        imgFile: Optional[UploadFile] = File(None, description="Новое изображение"),
    ):
        """
        Полностью заменить содержимое вопроса.

        - **question_id**: ID вопроса
        - **json**: строка JSON с полями question, answer, choices, topic
        - **imgFile**: новое изображение (необязательно, без него остаётся прежнее)
        """
        image = await read_image_upload(imgFile)
        return await controller.update(question_id, json_payload, image)

    @router.delete(
        "/{question_id}",
        summary="Удалить вопрос",
        responses={
            200: {"model": DeleteTimeResponse},
            **ERROR_RESPONSES,
            **NOT_FOUND_RESPONSE,
        },
    )
    async def destroy(question_id: str):
        """Удалить вопрос вместе с изображением."""
        return await controller.destroy(question_id)

    return router
