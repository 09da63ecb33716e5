"""Test agency service."""

from __future__ import annotations

import pytest
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from agency_crm.errors import ConstraintViolation, NotFound
from agency_crm.schemas.agency import AgencyCreate, AgencyRead, AgencyUpdate, AgencyUpdateRequest
from agency_crm.services import agency_svc


@pytest.mark.asyncio
async def test_create_agency(db: AsyncSession):
    agency = await agency_svc.create_agency(
        db,
        AgencyCreate(
            name="Acme",
            subdomain="acme",
            primary_color="#FF0000",
            smtp_host="smtp.acme.test",
            smtp_port=587,
        ),
    )
    assert agency.id > 0
    assert agency.name == "Acme"
    assert agency.subdomain == "acme"
    assert agency.primary_color == "#FF0000"
    assert agency.smtp_port == 587
    assert agency.logo_url is None
    assert agency.created_at == agency.updated_at


@pytest.mark.asyncio
async def test_duplicate_subdomain_rejected(db: AsyncSession, agency: AgencyRead):
    with pytest.raises(ConstraintViolation):
        await agency_svc.create_agency(db, AgencyCreate(name="Other", subdomain="acme"))

    # Session stays usable and the original agency is untouched
    agencies = await agency_svc.list_agencies(db)
    assert [a.id for a in agencies] == [agency.id]


@pytest.mark.asyncio
async def test_list_agencies_in_creation_order(db: AsyncSession):
    assert await agency_svc.list_agencies(db) == []
    for sub in ("bravo", "alpha", "charlie"):
        await agency_svc.create_agency(db, AgencyCreate(name=sub, subdomain=sub))

    agencies = await agency_svc.list_agencies(db)
    assert [a.subdomain for a in agencies] == ["bravo", "alpha", "charlie"]


@pytest.mark.asyncio
async def test_get_agency_by_subdomain(db: AsyncSession, agency: AgencyRead):
    found = await agency_svc.get_agency_by_subdomain(db, "acme")
    assert found is not None
    assert found.id == agency.id

    assert await agency_svc.get_agency_by_subdomain(db, "ACME") is None
    assert await agency_svc.get_agency_by_subdomain(db, "missing") is None


@pytest.mark.asyncio
async def test_update_agency_partial(db: AsyncSession, agency: AgencyRead):
    updated = await agency_svc.update_agency(
        db, AgencyUpdate(id=agency.id, logo_url="https://cdn.acme.test/logo.png")
    )
    assert updated.logo_url == "https://cdn.acme.test/logo.png"
    assert updated.name == agency.name
    assert updated.subdomain == agency.subdomain
    assert updated.created_at == agency.created_at
    assert updated.updated_at > agency.updated_at


@pytest.mark.asyncio
async def test_update_agency_null_clears_optional_field(db: AsyncSession):
    agency = await agency_svc.create_agency(
        db, AgencyCreate(name="Branded", subdomain="branded", custom_domain="branded.test")
    )
    updated = await agency_svc.update_agency(db, AgencyUpdate(id=agency.id, custom_domain=None))
    assert updated.custom_domain is None


@pytest.mark.asyncio
async def test_update_missing_agency(db: AsyncSession):
    with pytest.raises(NotFound, match="Agency with id 99 not found"):
        await agency_svc.update_agency(db, AgencyUpdate(id=99, name="Ghost"))


def test_update_request_flattens_updates():
    request = AgencyUpdateRequest.model_validate(
        {"id": 3, "updates": {"name": "Renamed", "smtp_port": 2525}}
    )
    update = request.to_update()
    assert update.id == 3
    assert update.changes() == {"name": "Renamed", "smtp_port": 2525}


def test_update_rejects_subdomain_change():
    with pytest.raises(ValidationError):
        AgencyUpdateRequest.model_validate({"id": 1, "updates": {"subdomain": "new"}})


def test_update_rejects_null_name():
    with pytest.raises(ValidationError):
        AgencyUpdateRequest.model_validate({"id": 1, "updates": {"name": None}})
