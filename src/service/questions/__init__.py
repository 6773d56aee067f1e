# -*- coding: utf-8 -*-
"""
QuizApi/src/service/questions/__init__.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Сценарии использования для вопросов викторины.
"""

from .base import QuestionUseCase
from .create import AddQuestion
from .delete import DeleteQuestion
from .read import GetAllQuestions, GetQuestion, GetQuestionsByTopic
from .update import UpdateQuestion

__all__ = [
    "QuestionUseCase",
    # Чтение
    "GetAllQuestions",
    "GetQuestionsByTopic",
    "GetQuestion",
    # Создание
    "AddQuestion",
    # Обновление
    "UpdateQuestion",
    # Удаление
    "DeleteQuestion",
]
