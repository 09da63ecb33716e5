"""Test user service."""

from __future__ import annotations

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from agency_crm.errors import ConstraintViolation, ReferenceInvalid
from agency_crm.models.enums import UserRole
from agency_crm.schemas.agency import AgencyRead
from agency_crm.schemas.user import UserCreate, UserRead
from agency_crm.services import user_svc


def _user(agency_id: int, clerk_id: str, role: UserRole = UserRole.STAFF) -> UserCreate:
    return UserCreate(
        clerk_id=clerk_id,
        agency_id=agency_id,
        email=f"{clerk_id}@example.com",
        first_name="Sam",
        last_name="Staff",
        role=role,
    )


@pytest.mark.asyncio
async def test_create_user_is_active(db: AsyncSession, agency: AgencyRead):
    user = await user_svc.create_user(db, _user(agency.id, "clerk_1"))
    assert user.is_active is True
    assert user.role == UserRole.STAFF
    assert user.agency_id == agency.id
    assert user.avatar_url is None
    assert user.created_at == user.updated_at


@pytest.mark.asyncio
async def test_clerk_id_unique_across_agencies(
    db: AsyncSession, agency: AgencyRead, other_agency: AgencyRead
):
    await user_svc.create_user(db, _user(agency.id, "shared_clerk"))
    with pytest.raises(ConstraintViolation):
        await user_svc.create_user(db, _user(other_agency.id, "shared_clerk"))


@pytest.mark.asyncio
async def test_create_user_unknown_agency(db: AsyncSession):
    with pytest.raises(ReferenceInvalid, match="Agency with id 42 not found"):
        await user_svc.create_user(db, _user(42, "orphan"))


@pytest.mark.asyncio
async def test_list_users_by_agency(
    db: AsyncSession, agency: AgencyRead, user: UserRead, other_user: UserRead
):
    second = await user_svc.create_user(db, _user(agency.id, "clerk_2", UserRole.CLIENT))

    users = await user_svc.list_users_by_agency(db, agency.id)
    assert [u.id for u in users] == [user.id, second.id]
    assert other_user.id not in {u.id for u in users}

    assert await user_svc.list_users_by_agency(db, 9999) == []
