# -*- coding: utf-8 -*-
"""
QuizApi/src/domain/models.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~
ORM модели SQLAlchemy 2.0 для вопросов викторины и их изображений.
"""

import uuid
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import (JSON, DateTime, ForeignKey, Index, LargeBinary,
                        String, Text)
from sqlalchemy.orm import (DeclarativeBase, Mapped, mapped_column,
                            relationship)


class Base(DeclarativeBase):
    """Базовый класс для всех моделей."""


def utcnow() -> datetime:
    """Текущее время в UTC."""
    return datetime.now(timezone.utc)


def generate_question_id() -> str:
    """Генерирует идентификатор нового вопроса."""
    return uuid.uuid4().hex


class Question(Base):
    """Вопрос викторины с вариантами ответа."""

    __tablename__ = "questions"
    __table_args__ = (Index("ix_questions_topic", "topic"),)

    id: Mapped[str] = mapped_column(
        String(64), primary_key=True, default=generate_question_id
    )
    question: Mapped[str] = mapped_column(Text, nullable=False)
    answer: Mapped[str] = mapped_column(Text, nullable=False)
    choices: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    topic: Mapped[str] = mapped_column(String(64), nullable=False)
    img_url: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    image: Mapped[Optional["QuestionImage"]] = relationship(
        back_populates="question",
        cascade="all, delete-orphan",
        uselist=False,
    )

    def __repr__(self) -> str:
        return f"<Question id={self.id} topic={self.topic}>"


class QuestionImage(Base):
    """Содержимое загруженного изображения вопроса."""

    __tablename__ = "question_images"

    question_id: Mapped[str] = mapped_column(
        ForeignKey("questions.id", ondelete="CASCADE"), primary_key=True
    )
    img_url: Mapped[str] = mapped_column(String(512), nullable=False)
    filename: Mapped[str] = mapped_column(String(255), nullable=False)
    content_type: Mapped[str] = mapped_column(String(100), nullable=False)
    content: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)

    question: Mapped[Question] = relationship(back_populates="image")
