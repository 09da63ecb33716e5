"""Deal service - pipeline deals with tenant reference checks."""

from __future__ import annotations

import logging

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.contact import Contact
from ..models.deal import Deal
from ..persistence import apply_changes, commit_changes, require, save
from ..schemas.deal import DealCreate, DealRead, DealUpdate
from . import reference_svc

log = logging.getLogger(__name__)


async def create_deal(db: AsyncSession, data: DealCreate) -> DealRead:
    """Create a deal after checking every reference belongs to the agency.

    Checks run in order (agency, contact, creator, assignee) and the first
    failure is raised before anything is written.
    """
    await reference_svc.ensure_agency(db, data.agency_id)
    await reference_svc.ensure_contact_in_agency(db, data.contact_id, data.agency_id)
    await reference_svc.ensure_user_in_agency(db, data.created_by, data.agency_id)
    if data.assigned_to is not None:
        await reference_svc.ensure_user_in_agency(
            db, data.assigned_to, data.agency_id, label="Assigned user"
        )

    deal = await save(db, Deal(**data.model_dump()))
    log.info("Created deal %s for contact %s in agency %s", deal.id, deal.contact_id, deal.agency_id)
    return DealRead.model_validate(deal)


async def list_deals_by_agency(db: AsyncSession, agency_id: int) -> list[DealRead]:
    stmt = select(Deal).where(Deal.agency_id == agency_id).order_by(Deal.id)
    result = await db.execute(stmt)
    return [DealRead.model_validate(d) for d in result.scalars().all()]


async def update_deal(db: AsyncSession, data: DealUpdate) -> DealRead:
    # References are only checked at creation
    deal = await require(db, Deal, data.id, "Deal")
    apply_changes(deal, data.changes())
    await commit_changes(db, deal)
    log.info("Updated deal %s (stage=%s)", deal.id, deal.stage.value)
    return DealRead.model_validate(deal)


async def search_deals(db: AsyncSession, agency_id: int, query: str) -> list[DealRead]:
    """Deals whose title/description or contact name/company contain ``query``.

    Unlike contact search, a blank query returns no deals.
    """
    term = query.strip()
    if not term:
        return []

    stmt = (
        select(Deal)
        .join(Deal.contact)
        .where(
            Deal.agency_id == agency_id,
            or_(
                Deal.title.icontains(term, autoescape=True),
                Deal.description.icontains(term, autoescape=True),
                Contact.first_name.icontains(term, autoescape=True),
                Contact.last_name.icontains(term, autoescape=True),
                Contact.company.icontains(term, autoescape=True),
            ),
        )
        .order_by(Deal.id)
    )
    result = await db.execute(stmt)
    return [DealRead.model_validate(d) for d in result.scalars().all()]
