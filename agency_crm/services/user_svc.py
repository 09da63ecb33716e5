"""User service."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.user import User
from ..persistence import save
from ..schemas.user import UserCreate, UserRead
from . import reference_svc

log = logging.getLogger(__name__)


async def create_user(db: AsyncSession, data: UserCreate) -> UserRead:
    await reference_svc.ensure_agency(db, data.agency_id)
    user = await save(db, User(**data.model_dump(), is_active=True))
    log.info("Created user %s in agency %s", user.id, user.agency_id)
    return UserRead.model_validate(user)


async def list_users_by_agency(db: AsyncSession, agency_id: int) -> list[UserRead]:
    stmt = select(User).where(User.agency_id == agency_id).order_by(User.id)
    result = await db.execute(stmt)
    return [UserRead.model_validate(u) for u in result.scalars().all()]
