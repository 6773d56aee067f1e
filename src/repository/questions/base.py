# -*- coding: utf-8 -*-
"""
QuizApi/src/repository/questions/base.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Абстрактный репозиторий вопросов, от которого зависят сценарии использования.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, List, Optional

from src.domain.uploads import ImageUpload

# Вопрос в виде, готовом к сериализации в JSON
QuestionRecord = Dict[str, Any]


class QuestionRepository(ABC):
    """Хранилище вопросов викторины.

    Все методы, принимающие ``question_id``, выбрасывают
    :class:`~src.utils.exceptions.NotFoundError`, если вопроса нет.
    """

    @abstractmethod
    async def list_all(self) -> List[QuestionRecord]:
        """Все вопросы в порядке создания."""

    @abstractmethod
    async def list_by_topic(self, topic: str) -> List[QuestionRecord]:
        """Вопросы одной темы в порядке создания."""

    @abstractmethod
    async def get(self, question_id: str) -> QuestionRecord:
        """Один вопрос по ID."""

    @abstractmethod
    async def add(
        self, fields: Dict[str, Any], image: Optional[ImageUpload] = None
    ) -> str:
        """Создаёт вопрос и возвращает его ID."""

    @abstractmethod
    async def update(
        self,
        question_id: str,
        fields: Dict[str, Any],
        image: Optional[ImageUpload] = None,
    ) -> datetime:
        """Полностью заменяет поля вопроса и возвращает время обновления.

        Ключ img_url в fields означает загрузку нового изображения: при
        пустом значении прежнее изображение удаляется. Без ключа imgUrl
        и файл остаются прежними.
        """

    @abstractmethod
    async def delete(self, question_id: str) -> datetime:
        """Удаляет вопрос вместе с изображением и возвращает время удаления."""
