# -*- coding: utf-8 -*-
"""
QuizApi/src/service/questions/base.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Базовый класс сценариев использования для вопросов.
"""

from src.repository.questions import QuestionRepository


class QuestionUseCase:
    """Сценарий использования, работающий с репозиторием вопросов.

    Экземпляр создаётся на каждый вызов и не хранит состояние между
    запросами, кроме ссылки на репозиторий.
    """

    def __init__(self, repository: QuestionRepository):
        self.repository = repository
