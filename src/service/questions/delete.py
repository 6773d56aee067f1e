# -*- coding: utf-8 -*-
"""
QuizApi/src/service/questions/delete.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Сценарий удаления вопроса.
"""

from datetime import datetime

from loguru import logger

from .base import QuestionUseCase


class DeleteQuestion(QuestionUseCase):
    """Удалить вопрос вместе с изображением."""

    async def execute(self, question_id: str) -> datetime:
        delete_time = await self.repository.delete(question_id)
        logger.info(f"🗑️ Вопрос {question_id} удалён")
        return delete_time
