# -*- coding: utf-8 -*-
"""
QuizApi/src/repository/base.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Base repository operations for generic CRUD functionality.

This module provides reusable asynchronous CRUD helpers using SQLAlchemy 2.0
async ORM, with logging. The helpers take an open session and never commit
on their own, so a repository method can group several of them into one
transaction.
"""

from __future__ import annotations

from typing import Any, List, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.logger import configure_logger
from src.domain.models import Base
from src.utils.exceptions import NotFoundError

T = TypeVar("T", bound=Base)

logger = configure_logger(prefix="REPOSITORY")

# ---------------------------------------------------------------------------
# Generic helpers
# ---------------------------------------------------------------------------


async def get_item(session: AsyncSession, model: Type[T], item_id: Any) -> T:
    """Retrieve a single item by ID or raise NotFoundError."""
    item = await session.get(model, item_id)
    if item is None:
        logger.debug(f"{model.__name__} с ID {item_id} не найден")
        raise NotFoundError(resource_type=model.__name__, resource_id=item_id)
    return item


async def create_item(session: AsyncSession, model: Type[T], **kwargs: Any) -> T:
    """Add a new item to the session and flush it to get generated values."""
    instance = model(**kwargs)
    session.add(instance)
    await session.flush()
    return instance


async def update_item(
    session: AsyncSession, model: Type[T], item_id: Any, **kwargs: Any
) -> T:
    """Update attributes of an existing item."""
    instance = await get_item(session, model, item_id)
    for key, value in kwargs.items():
        setattr(instance, key, value)
    await session.flush()
    return instance


async def delete_item(session: AsyncSession, model: Type[T], item_id: Any) -> None:
    """Delete an item from the database."""
    instance = await get_item(session, model, item_id)
    await session.delete(instance)
    await session.flush()


async def list_items(
    session: AsyncSession,
    model: Type[T],
    order_by: Any = None,
    **filters: Any,
) -> List[T]:
    """Retrieve a list of items filtered by the given criteria."""
    stmt = select(model).filter_by(**filters)
    if order_by is not None:
        stmt = stmt.order_by(order_by)

    result = await session.execute(stmt)
    items = result.scalars().all()
    logger.debug(f"Retrieved {len(items)} {model.__name__} items")
    return list(items)
