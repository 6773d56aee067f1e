# -*- coding: utf-8 -*-
"""
QuizApi/src/service/questions/update.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Сценарий обновления вопроса.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from loguru import logger

from src.domain.uploads import ImageUpload

from .base import QuestionUseCase


class UpdateQuestion(QuestionUseCase):
    """Полностью заменить содержимое вопроса.

    Изображение заменяется, только если загружено новое и для темы
    известен путь хранения. Загрузка для темы без пути хранения
    удаляет прежнее изображение.
    """

    async def execute(
        self, fields: Dict[str, Any], image: Optional[ImageUpload] = None
    ) -> datetime:
        question_id = fields["id"]
        if image is not None and not fields.get("img_url"):
            logger.warning(
                f"Изображение {image.filename} для вопроса {question_id} отброшено: "
                f"тема {fields.get('topic')} не поддерживает изображения"
            )
            image = None

        update_time = await self.repository.update(question_id, fields, image)
        logger.info(f"✅ Вопрос {question_id} обновлён")
        return update_time
