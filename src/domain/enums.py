# -*- coding: utf-8 -*-
"""
QuizApi/src/domain/enums.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~
Определение классов перечислений для домена викторины.
"""

import enum


class QuestionTopic(str, enum.Enum):
    """Темы вопросов, для которых предусмотрено хранение изображений."""

    MAKANAN = "Makanan"  # Еда
    IKON = "Ikon"  # Иконы и символы
    WISATA = "Wisata"  # Туризм


# Префиксы путей хранения изображений по темам
TOPIC_IMAGE_PREFIXES = {
    QuestionTopic.MAKANAN: "foods/",
    QuestionTopic.IKON: "icons/",
    QuestionTopic.WISATA: "tourisms/",
}
