# -*- coding: utf-8 -*-
"""
QuizApi/src/utils/image_url.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Построение путей хранения для изображений вопросов.
"""

import time
from typing import Optional

from src.domain.enums import TOPIC_IMAGE_PREFIXES, QuestionTopic


def current_timestamp_ms() -> int:
    """Миллисекунды с начала эпохи Unix."""
    return time.time_ns() // 1_000_000


def generate_img_url(topic: str, filename: str) -> Optional[str]:
    """
    Построить путь хранения изображения по теме вопроса.

    Путь имеет вид ``<префикс темы><timestamp_ms>-<имя файла>``, например
    ``foods/1700000000000-cat.png``. Два вызова в одну миллисекунду
    с одинаковым именем файла дадут одинаковый путь.

    Args:
        topic: Тема вопроса (Makanan, Ikon, Wisata)
        filename: Исходное имя загруженного файла

    Returns:
        Путь хранения или None, если для темы изображения не предусмотрены
    """
    try:
        prefix = TOPIC_IMAGE_PREFIXES[QuestionTopic(topic)]
    except ValueError:
        return None
    return f"{prefix}{current_timestamp_ms()}-{filename}"
