"""Test model persistence, column defaults and store-level constraints."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy import select, text
from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from agency_crm.errors import ConstraintViolation
from agency_crm.models import Agency, Contact, ContactInteraction, Deal, DealStage, User, UserRole
from agency_crm.models.base import UTCDateTime
from agency_crm.persistence import save
from agency_crm.schemas.agency import AgencyRead
from agency_crm.schemas.contact import ContactRead
from agency_crm.schemas.user import UserRead


@pytest.mark.asyncio
async def test_enums_stored_as_values(db: AsyncSession, user: UserRead):
    row = (await db.execute(text("SELECT role FROM users WHERE id = :id"), {"id": user.id})).one()
    assert row.role == "agency-owner"

    loaded = await db.get(User, user.id)
    assert loaded.role is UserRole.AGENCY_OWNER


@pytest.mark.asyncio
async def test_deal_column_defaults(db: AsyncSession, agency: AgencyRead, user: UserRead, contact: ContactRead):
    deal = Deal(agency_id=agency.id, contact_id=contact.id, title="Raw", created_by=user.id)
    db.add(deal)
    await db.commit()
    await db.refresh(deal)
    assert deal.stage == DealStage.LEAD
    assert deal.probability == 0
    assert deal.created_at is not None


@pytest.mark.asyncio
async def test_foreign_keys_enforced(db: AsyncSession):
    db.add(Contact(agency_id=999, first_name="Dangling", last_name="Ref", created_by=999))
    with pytest.raises(IntegrityError):
        await db.commit()
    await db.rollback()


@pytest.mark.asyncio
async def test_save_translates_integrity_errors(db: AsyncSession, agency: AgencyRead):
    with pytest.raises(ConstraintViolation):
        await save(db, Agency(name="Clone", subdomain=agency.subdomain))

    # Rolled back and still usable
    result = await db.execute(select(Agency))
    assert len(result.scalars().all()) == 1


@pytest.mark.asyncio
async def test_save_stamps_matching_timestamps(db: AsyncSession):
    agency = await save(db, Agency(name="Stamped", subdomain="stamped"))
    assert agency.created_at == agency.updated_at


def test_interaction_has_no_updated_at():
    assert "updated_at" not in ContactInteraction.__table__.columns
    assert "metadata" in ContactInteraction.__table__.columns


def test_model_repr_and_full_name():
    user = User(clerk_id="c_1", first_name="Ada", last_name="Lovelace", role=UserRole.STAFF)
    assert user.full_name == "Ada Lovelace"
    assert "c_1" in repr(user)

    contact = Contact(first_name="Grace", last_name="Hopper")
    assert contact.full_name == "Grace Hopper"
    assert repr(Agency(subdomain="acme")) == "<Agency 'acme'>"


@pytest.mark.asyncio
async def test_save_translates_data_errors(db: AsyncSession):
    rejected = DataError("INSERT INTO agencies ...", {}, Exception("value too long for type character varying(200)"))
    with patch.object(db, "commit", AsyncMock(side_effect=rejected)):
        with pytest.raises(ConstraintViolation, match="value too long"):
            await save(db, Agency(name="x" * 201, subdomain="long"))

    result = await db.execute(select(Agency))
    assert result.scalars().all() == []


@pytest.mark.asyncio
async def test_timestamps_read_back_as_utc(db: AsyncSession, agency: AgencyRead):
    assert agency.created_at.tzinfo is not None
    assert agency.created_at.utcoffset() == timedelta(0)

    db.expire_all()
    loaded = await db.get(Agency, agency.id)
    assert loaded.created_at.utcoffset() == timedelta(0)
    assert loaded.created_at == agency.created_at


def test_utc_datetime_normalizes_offsets():
    column_type = UTCDateTime()
    eastern = datetime(2026, 1, 1, 7, 0, tzinfo=timezone(timedelta(hours=-5)))
    assert column_type.process_bind_param(eastern, None) == datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
    naive = datetime(2026, 1, 1, 12, 0)
    assert column_type.process_result_value(naive, None).tzinfo is timezone.utc
    assert column_type.process_result_value(None, None) is None
