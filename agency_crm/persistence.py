"""Persistence helpers shared by the services.

Every write goes through ``save`` or ``commit_changes`` so store-level
rejections (unique, foreign key, not-null, oversized values) surface as
``ConstraintViolation`` and the session is rolled back and left usable for the next operation.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from .errors import ConstraintViolation, NotFound
from .models.base import Base, utcnow

log = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


async def fetch(db: AsyncSession, model: type[ModelT], row_id: int) -> ModelT | None:
    return await db.get(model, row_id)


async def require(db: AsyncSession, model: type[ModelT], row_id: int, label: str) -> ModelT:
    """Load a row by id or raise NotFound naming it as ``label``."""
    row = await db.get(model, row_id)
    if row is None:
        log.warning("%s with id %s not found", label, row_id)
        raise NotFound(f"{label} with id {row_id} not found")
    return row


def stamp_new(row: Base) -> None:
    """Give a new row identical created_at/updated_at values."""
    now = utcnow()
    row.created_at = now
    if hasattr(row, "updated_at"):
        row.updated_at = now


def apply_changes(row: Base, changes: dict[str, Any]) -> None:
    """Set only the supplied fields and always advance updated_at."""
    for key, value in changes.items():
        setattr(row, key, value)
    row.updated_at = utcnow()


async def save(db: AsyncSession, row: ModelT) -> ModelT:
    """Insert a new row, commit, and reload it with generated values."""
    stamp_new(row)
    db.add(row)
    await commit_changes(db, row)
    return row


async def commit_changes(db: AsyncSession, row: Base) -> None:
    try:
        await db.commit()
    except (IntegrityError, DataError) as exc:
        await db.rollback()
        log.warning("%s write rejected by the store: %s", type(row).__name__, exc.orig)
        raise ConstraintViolation(f"{type(row).__name__} violates a store constraint: {exc.orig}") from exc
    await db.refresh(row)
