"""Landing page service - create, list and publish."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.base import utcnow
from ..models.enums import LandingPageStatus
from ..models.landing_page import LandingPage
from ..persistence import commit_changes, require, save
from ..schemas.landing_page import LandingPageCreate, LandingPageRead
from . import reference_svc

log = logging.getLogger(__name__)


async def create_landing_page(db: AsyncSession, data: LandingPageCreate) -> LandingPageRead:
    await reference_svc.ensure_agency(db, data.agency_id)
    await reference_svc.ensure_user_in_agency(db, data.created_by, data.agency_id)
    page = await save(
        db, LandingPage(**data.model_dump(), status=LandingPageStatus.DRAFT, published_at=None)
    )
    log.info("Created landing page %s (%s) in agency %s", page.id, page.slug, page.agency_id)
    return LandingPageRead.model_validate(page)


async def list_landing_pages_by_agency(
    db: AsyncSession, agency_id: int
) -> list[LandingPageRead]:
    stmt = select(LandingPage).where(LandingPage.agency_id == agency_id).order_by(LandingPage.id)
    result = await db.execute(stmt)
    return [LandingPageRead.model_validate(p) for p in result.scalars().all()]


async def publish_landing_page(db: AsyncSession, page_id: int) -> LandingPageRead:
    """Mark a page published.

    Publishing an already-published page is allowed and moves
    published_at forward to now.
    """
    page = await require(db, LandingPage, page_id, "Landing page")
    now = utcnow()
    page.status = LandingPageStatus.PUBLISHED
    page.published_at = now
    page.updated_at = now
    await commit_changes(db, page)
    log.info("Published landing page %s", page.id)
    return LandingPageRead.model_validate(page)
