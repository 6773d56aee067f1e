# -*- coding: utf-8 -*-
"""
Фикстуры и фабрики тестовых данных для вопросов
"""

import json
from typing import Any, Dict, List, Optional

from src.domain.uploads import ImageUpload
from src.repository.questions import QuestionRepository

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


def make_question_fields(
    topic: str = "Makanan",
    question: str = "Makanan khas Padang dari daging sapi?",
    answer: str = "Rendang",
    choices: Optional[List[str]] = None,
    **extra: Any,
) -> Dict[str, Any]:
    """Поля вопроса в том виде, в каком их передаёт контроллер"""
    return {
        "question": question,
        "answer": answer,
        "choices": choices or ["Rendang", "Gudeg", "Pempek", "Soto"],
        "topic": topic,
        **extra,
    }


def make_question_json(**kwargs: Any) -> str:
    """Строка для поля json multipart-запроса"""
    return json.dumps(make_question_fields(**kwargs))


def make_image(filename: str = "cat.png", content: bytes = PNG_BYTES) -> ImageUpload:
    """Загруженное изображение"""
    return ImageUpload(filename=filename, content_type="image/png", content=content)


async def create_test_question(
    repository: QuestionRepository,
    image: Optional[ImageUpload] = None,
    **kwargs: Any,
) -> str:
    """Создать вопрос в репозитории и вернуть его ID"""
    fields = make_question_fields(**kwargs)
    if image is not None:
        fields.setdefault("img_url", f"foods/1700000000000-{image.filename}")
    return await repository.add(fields, image)
