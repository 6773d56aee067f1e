# -*- coding: utf-8 -*-
"""
QuizApi/src/domain/uploads.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Транзитные данные загружаемого изображения вопроса.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ImageUpload:
    """Изображение из multipart-запроса: имя файла, MIME тип и содержимое."""

    filename: str
    content_type: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)
