# -*- coding: utf-8 -*-
"""
QuizApi/src/api/v1/questions/__init__.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
API вопросов викторины.
"""

from .controller import QuestionController, QuestionUseCases
from .routes import build_router

__all__ = ["QuestionController", "QuestionUseCases", "build_router"]
