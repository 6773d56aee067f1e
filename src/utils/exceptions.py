# -*- coding: utf-8 -*-
"""
Этот модуль определяет пользовательские исключения для Quiz API.

Ошибка "не найдено" распознаётся по коду NOT_FOUND либо по точному
тексту сообщения "Not Found", который сценарии могут бросать и без типа.
"""

from enum import Enum

NOT_FOUND_MESSAGE = "Not Found"


class ErrorCode(str, Enum):
    """Перечисление для уникальных кодов ошибок."""

    NOT_FOUND = "NOT_FOUND"
    INTERNAL = "INTERNAL"


class QuestionError(Exception):
    """Базовый класс для ошибок бизнес-операций над вопросами."""

    code: ErrorCode = ErrorCode.INTERNAL

    def __init__(self, message: str):
        """
        Инициализирует QuestionError.

        Args:
            message (str): Сообщение об ошибке, отдаётся клиенту как есть.
        """
        super().__init__(message)
        self.message = message


class NotFoundError(QuestionError):
    """Вызывается, когда вопрос не найден."""

    code = ErrorCode.NOT_FOUND

    def __init__(self, resource_type: str = "Question", resource_id: str | None = None):
        """
        Инициализирует NotFoundError.

        Сообщение клиенту всегда "Not Found", тип и ID ресурса
        сохраняются только для логов.

        Args:
            resource_type (str): Тип ресурса (например, "Question").
            resource_id (str, optional): ID ресурса.
        """
        super().__init__(NOT_FOUND_MESSAGE)
        self.resource_type = resource_type
        self.resource_id = resource_id

    def __repr__(self) -> str:
        return f"NotFoundError({self.resource_type!r}, {self.resource_id!r})"


def error_code(error: Exception) -> ErrorCode:
    """Код ошибки: из QuestionError, либо NOT_FOUND по тексту "Not Found"."""
    if isinstance(error, QuestionError):
        return error.code
    if str(error) == NOT_FOUND_MESSAGE:
        return ErrorCode.NOT_FOUND
    return ErrorCode.INTERNAL


def error_message(error: Exception) -> str:
    if isinstance(error, QuestionError):
        return error.message
    return str(error)
