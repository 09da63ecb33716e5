"""Agency service - tenant creation, lookup and branding/SMTP updates."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.agency import Agency
from ..persistence import apply_changes, commit_changes, require, save
from ..schemas.agency import AgencyCreate, AgencyRead, AgencyUpdate

log = logging.getLogger(__name__)


async def create_agency(db: AsyncSession, data: AgencyCreate) -> AgencyRead:
    agency = await save(db, Agency(**data.model_dump()))
    log.info("Created agency %s (%s)", agency.id, agency.subdomain)
    return AgencyRead.model_validate(agency)


async def list_agencies(db: AsyncSession) -> list[AgencyRead]:
    result = await db.execute(select(Agency).order_by(Agency.id))
    return [AgencyRead.model_validate(a) for a in result.scalars().all()]


async def get_agency_by_subdomain(db: AsyncSession, subdomain: str) -> AgencyRead | None:
    """Exact (case-sensitive) subdomain lookup."""
    result = await db.execute(select(Agency).where(Agency.subdomain == subdomain))
    agency = result.scalar_one_or_none()
    return AgencyRead.model_validate(agency) if agency else None


async def update_agency(db: AsyncSession, data: AgencyUpdate) -> AgencyRead:
    agency = await require(db, Agency, data.id, "Agency")
    apply_changes(agency, data.changes())
    await commit_changes(db, agency)
    log.info("Updated agency %s", agency.id)
    return AgencyRead.model_validate(agency)
