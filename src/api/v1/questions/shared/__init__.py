# -*- coding: utf-8 -*-
"""
QuizApi/src/api/v1/questions/shared/__init__.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Общие компоненты для работы с вопросами.
"""

from .schemas import (DeleteTimeResponse, MessageResponse,
                      QuestionPayloadSchema, QuestionReadSchema,
                      UpdateTimeResponse)
from .validators import (DestroyValidator, IndexValidator, ShowValidator,
                         StoreValidator, UpdateValidator, ValidationResult)

__all__ = [
    # Схемы
    "QuestionPayloadSchema",
    "QuestionReadSchema",
    "MessageResponse",
    "UpdateTimeResponse",
    "DeleteTimeResponse",
    # Валидаторы
    "ValidationResult",
    "IndexValidator",
    "ShowValidator",
    "StoreValidator",
    "UpdateValidator",
    "DestroyValidator",
]
