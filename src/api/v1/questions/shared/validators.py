# -*- coding: utf-8 -*-
"""
QuizApi/src/api/v1/questions/shared/validators.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Валидаторы входных данных эндпоинтов вопросов.

Валидаторы не выбрасывают исключений: результат проверки всегда
возвращается как ValidationResult.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from src.config.settings import settings
from src.domain.uploads import ImageUpload

from .schemas import QuestionPayloadSchema

MAX_ID_LENGTH = 64
MAX_TOPIC_LENGTH = 64

ALLOWED_IMAGE_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp"}


@dataclass(frozen=True)
class ValidationResult:
    """Результат проверки входных данных."""

    is_valid: bool
    message: Optional[str] = None
    payload: Optional[QuestionPayloadSchema] = None

    @classmethod
    def ok(cls, payload: Optional[QuestionPayloadSchema] = None) -> "ValidationResult":
        return cls(is_valid=True, payload=payload)

    @classmethod
    def fail(cls, message: str) -> "ValidationResult":
        return cls(is_valid=False, message=message)


def _format_pydantic_error(exc: PydanticValidationError) -> str:
    """Первое сообщение об ошибке pydantic в виде 'поле: текст'."""
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error.get("loc", ()))
    message = error.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


def _check_id(question_id: Any) -> Optional[str]:
    if not isinstance(question_id, str) or not question_id.strip():
        return "id is required"
    if len(question_id) > MAX_ID_LENGTH:
        return f"id must be at most {MAX_ID_LENGTH} characters"
    if "/" in question_id:
        return "id must not contain '/'"
    return None


def _check_image(img_file: Optional[ImageUpload]) -> Optional[str]:
    if img_file is None:
        return None
    if not img_file.filename:
        return "imgFile must have a filename"
    if img_file.content_type not in ALLOWED_IMAGE_TYPES:
        return f"imgFile has unsupported content type: {img_file.content_type}"
    if img_file.size > settings.max_image_size:
        return f"imgFile must be at most {settings.max_image_size} bytes"
    return None


def _parse_payload(raw_json: Any) -> ValidationResult:
    if raw_json is None or (isinstance(raw_json, str) and not raw_json.strip()):
        return ValidationResult.fail("json is required")
    if not isinstance(raw_json, (str, bytes)):
        return ValidationResult.fail("json must be a string")
    try:
        payload = QuestionPayloadSchema.model_validate_json(raw_json)
    except PydanticValidationError as e:
        return ValidationResult.fail(_format_pydantic_error(e))
    return ValidationResult.ok(payload)


class IndexValidator:
    """Фильтр списка вопросов: необязательная тема."""

    @staticmethod
    def validate(fields: Dict[str, Any]) -> ValidationResult:
        topic = fields.get("topic")
        if topic is None:
            return ValidationResult.ok()
        if not isinstance(topic, str) or not topic.strip():
            return ValidationResult.fail("topic must not be empty")
        if len(topic) > MAX_TOPIC_LENGTH:
            return ValidationResult.fail(
                f"topic must be at most {MAX_TOPIC_LENGTH} characters"
            )
        return ValidationResult.ok()


class ShowValidator:
    """Получение вопроса по ID."""

    @staticmethod
    def validate(fields: Dict[str, Any]) -> ValidationResult:
        error = _check_id(fields.get("id"))
        return ValidationResult.fail(error) if error else ValidationResult.ok()


class DestroyValidator(ShowValidator):
    """Удаление вопроса по ID."""


class StoreValidator:
    """Создание вопроса: поле json и необязательный imgFile.

    Поле json разбирается здесь один раз, результат возвращается в payload.
    """

    @staticmethod
    def validate(fields: Dict[str, Any]) -> ValidationResult:
        error = _check_image(fields.get("imgFile"))
        if error:
            return ValidationResult.fail(error)
        return _parse_payload(fields.get("json"))


class UpdateValidator:
    """Обновление вопроса: правила создания плюс проверка ID."""

    @staticmethod
    def validate(fields: Dict[str, Any]) -> ValidationResult:
        error = _check_id(fields.get("id"))
        if error:
            return ValidationResult.fail(error)
        return StoreValidator.validate(fields)
