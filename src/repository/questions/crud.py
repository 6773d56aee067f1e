# -*- coding: utf-8 -*-
"""
QuizApi/src/repository/questions/crud.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
CRUD операции для работы с вопросами через SQLAlchemy.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.config.logger import configure_logger
from src.domain.models import Question, QuestionImage, utcnow
from src.domain.uploads import ImageUpload
from src.repository.base import (create_item, delete_item, get_item,
                                 list_items, update_item)

from .base import QuestionRecord, QuestionRepository

logger = configure_logger(prefix="QUESTION_REPOSITORY")

# Поля вопроса, которые можно задать при создании и обновлении
CONTENT_FIELDS = ("question", "answer", "choices", "topic")


def serialize_question(question: Question) -> QuestionRecord:
    """Преобразует ORM объект в словарь для ответа API."""
    return {
        "id": question.id,
        "question": question.question,
        "answer": question.answer,
        "choices": list(question.choices or []),
        "topic": question.topic,
        "imgUrl": question.img_url,
        "createdAt": question.created_at.isoformat() if question.created_at else None,
        "updatedAt": question.updated_at.isoformat() if question.updated_at else None,
    }


def _content(fields: Dict[str, Any]) -> Dict[str, Any]:
    return {key: fields[key] for key in CONTENT_FIELDS}


def _build_image(img_url: str, image: ImageUpload) -> QuestionImage:
    return QuestionImage(
        img_url=img_url,
        filename=image.filename,
        content_type=image.content_type,
        content=image.content,
    )


def _replace_image(question: Question, img_url: str, image: ImageUpload) -> None:
    """Заменяет изображение вопроса, изображение должно быть уже загружено."""
    if question.image is None:
        question.image = _build_image(img_url, image)
        return
    question.image.img_url = img_url
    question.image.filename = image.filename
    question.image.content_type = image.content_type
    question.image.content = image.content


class SqlAlchemyQuestionRepository(QuestionRepository):
    """Репозиторий вопросов поверх асинхронной сессии SQLAlchemy.

    Каждый вызов открывает собственную сессию и фиксирует изменения
    одним коммитом.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def list_all(self) -> List[QuestionRecord]:
        logger.debug("Получение списка всех вопросов")
        async with self._session_factory() as session:
            questions = await list_items(
                session, Question, order_by=Question.created_at
            )
            return [serialize_question(q) for q in questions]

    async def list_by_topic(self, topic: str) -> List[QuestionRecord]:
        logger.debug(f"Получение вопросов темы {topic}")
        async with self._session_factory() as session:
            questions = await list_items(
                session, Question, order_by=Question.created_at, topic=topic
            )
            return [serialize_question(q) for q in questions]

    async def get(self, question_id: str) -> QuestionRecord:
        logger.debug(f"Получение вопроса с ID: {question_id}")
        async with self._session_factory() as session:
            question = await get_item(session, Question, question_id)
            return serialize_question(question)

    async def add(
        self, fields: Dict[str, Any], image: Optional[ImageUpload] = None
    ) -> str:
        img_url = fields.get("img_url")
        values = {**_content(fields), "img_url": img_url}
        if image is not None and img_url:
            values["image"] = _build_image(img_url, image)

        async with self._session_factory() as session:
            question = await create_item(session, Question, **values)
            await session.commit()
            logger.info(f"Создан вопрос {question.id} (тема {question.topic})")
            return question.id

    async def update(
        self,
        question_id: str,
        fields: Dict[str, Any],
        image: Optional[ImageUpload] = None,
    ) -> datetime:
        updated_at = utcnow()
        changes = {**_content(fields), "updated_at": updated_at}
        # img_url в полях означает, что запрос пришёл с изображением.
        # Без него прежние imgUrl и файл сохраняются.
        replace_image = "img_url" in fields
        img_url = fields.get("img_url")
        if replace_image:
            changes["img_url"] = img_url

        async with self._session_factory() as session:
            question = await update_item(session, Question, question_id, **changes)
            if replace_image:
                await session.refresh(question, attribute_names=["image"])
                if image is not None and img_url:
                    _replace_image(question, img_url, image)
                else:
                    # Тема без пути хранения: прежнее изображение удаляется
                    question.image = None
            await session.commit()
            logger.info(f"Обновлён вопрос {question_id}")
            return updated_at

    async def delete(self, question_id: str) -> datetime:
        async with self._session_factory() as session:
            question = await get_item(session, Question, question_id)
            # Загружаем изображение, чтобы каскад удалил его вместе с вопросом
            await session.refresh(question, attribute_names=["image"])
            await delete_item(session, Question, question_id)
            await session.commit()
            deleted_at = utcnow()
            logger.info(f"Удалён вопрос {question_id}")
            return deleted_at
