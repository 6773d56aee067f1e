# -*- coding: utf-8 -*-
"""
QuizApi/src/service/questions/create.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Сценарий создания вопроса.
"""

from typing import Any, Dict, Optional

from loguru import logger

from src.domain.uploads import ImageUpload

from .base import QuestionUseCase


class AddQuestion(QuestionUseCase):
    """Создать вопрос, при необходимости сохранив изображение."""

    async def execute(
        self, fields: Dict[str, Any], image: Optional[ImageUpload] = None
    ) -> str:
        """
        Создать вопрос.

        Args:
            fields: question, answer, choices, topic и, если есть изображение, img_url
            image: Загруженное изображение

        Returns:
            ID созданного вопроса
        """
        # Изображение без пути хранения (неизвестная тема) не сохраняется
        if image is not None and not fields.get("img_url"):
            logger.warning(
                f"Изображение {image.filename} отброшено: тема {fields.get('topic')} "
                "не поддерживает изображения"
            )
            image = None

        question_id = await self.repository.add(fields, image)
        logger.info(f"✅ Вопрос создан: id={question_id}")
        return question_id
