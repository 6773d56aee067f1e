# -*- coding: utf-8 -*-
"""
QuizApi/src/service/questions/read.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Сценарии чтения вопросов.
"""

from typing import List

from loguru import logger

from src.repository.questions import QuestionRecord

from .base import QuestionUseCase


class GetAllQuestions(QuestionUseCase):
    """Получить все вопросы."""

    async def execute(self) -> List[QuestionRecord]:
        questions = await self.repository.list_all()
        logger.debug(f"Получено вопросов: {len(questions)}")
        return questions


class GetQuestionsByTopic(QuestionUseCase):
    """Получить вопросы одной темы."""

    async def execute(self, topic: str) -> List[QuestionRecord]:
        questions = await self.repository.list_by_topic(topic)
        logger.debug(f"Получено вопросов темы {topic}: {len(questions)}")
        return questions


class GetQuestion(QuestionUseCase):
    """Получить вопрос по ID.

    Raises:
        NotFoundError: Если вопроса с таким ID нет
    """

    async def execute(self, question_id: str) -> QuestionRecord:
        return await self.repository.get(question_id)
