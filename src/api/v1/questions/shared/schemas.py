# -*- coding: utf-8 -*-
"""
QuizApi/src/api/v1/questions/shared/schemas.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Pydantic схемы для работы с вопросами.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import (BaseModel, ConfigDict, Field, field_validator,
                      model_validator)


class QuestionPayloadSchema(BaseModel):
    """Содержимое поля ``json`` в multipart-запросе создания и обновления."""

    question: str = Field(min_length=1)
    answer: str = Field(min_length=1)
    choices: List[str] = Field(min_length=2)
    topic: str = Field(min_length=1, max_length=64)

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "question": "Makanan khas Padang yang terbuat dari daging sapi?",
                "answer": "Rendang",
                "choices": ["Rendang", "Gudeg", "Pempek", "Soto"],
                "topic": "Makanan",
            }
        },
    )

    @field_validator("choices")
    @classmethod
    def choices_not_blank(cls, choices: List[str]) -> List[str]:
        if any(not choice for choice in choices):
            raise ValueError("choices must not contain empty values")
        return choices

    @model_validator(mode="after")
    def answer_in_choices(self) -> "QuestionPayloadSchema":
        if self.answer not in self.choices:
            raise ValueError("answer must be one of the choices")
        return self


class QuestionReadSchema(BaseModel):
    """Схема вопроса в ответах API."""

    id: str
    question: str
    answer: str
    choices: List[str]
    topic: str
    img_url: Optional[str] = Field(default=None, alias="imgUrl")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    model_config = ConfigDict(populate_by_name=True)


class MessageResponse(BaseModel):
    """Ответ с текстовым сообщением (успех создания или ошибка)."""

    message: str


class UpdateTimeResponse(BaseModel):
    """Ответ на обновление вопроса."""

    updateTime: datetime


class DeleteTimeResponse(BaseModel):
    """Ответ на удаление вопроса."""

    deleteTime: datetime
