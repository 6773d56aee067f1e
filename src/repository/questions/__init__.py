# -*- coding: utf-8 -*-
"""
QuizApi/src/repository/questions/__init__.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Репозиторий для работы с вопросами.
"""

from .base import QuestionRecord, QuestionRepository
from .crud import SqlAlchemyQuestionRepository, serialize_question

__all__ = [
    "QuestionRecord",
    "QuestionRepository",
    "SqlAlchemyQuestionRepository",
    "serialize_question",
]
