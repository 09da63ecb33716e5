"""Contact service - CRUD and search, scoped to an agency."""

from __future__ import annotations

import logging

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.contact import Contact
from ..persistence import apply_changes, commit_changes, require, save
from ..schemas.contact import ContactCreate, ContactRead, ContactUpdate
from . import reference_svc

log = logging.getLogger(__name__)


async def create_contact(db: AsyncSession, data: ContactCreate) -> ContactRead:
    """Create a contact; the creator must work for the same agency."""
    await reference_svc.ensure_agency(db, data.agency_id)
    await reference_svc.ensure_user_in_agency(db, data.created_by, data.agency_id)
    contact = await save(db, Contact(**data.model_dump()))
    log.info("Created contact %s in agency %s", contact.id, contact.agency_id)
    return ContactRead.model_validate(contact)


async def list_contacts_by_agency(db: AsyncSession, agency_id: int) -> list[ContactRead]:
    stmt = select(Contact).where(Contact.agency_id == agency_id).order_by(Contact.id)
    result = await db.execute(stmt)
    return [ContactRead.model_validate(c) for c in result.scalars().all()]


async def update_contact(db: AsyncSession, data: ContactUpdate) -> ContactRead:
    contact = await require(db, Contact, data.id, "Contact")
    apply_changes(contact, data.changes())
    await commit_changes(db, contact)
    log.info("Updated contact %s", contact.id)
    return ContactRead.model_validate(contact)


async def search_contacts(db: AsyncSession, agency_id: int, query: str) -> list[ContactRead]:
    """Contacts whose name, email, phone, company or position contain ``query``.

    Matching is a case-insensitive substring test, so an empty query
    matches every contact in the agency.
    """
    stmt = (
        select(Contact)
        .where(
            Contact.agency_id == agency_id,
            or_(
                Contact.first_name.icontains(query, autoescape=True),
                Contact.last_name.icontains(query, autoescape=True),
                Contact.email.icontains(query, autoescape=True),
                Contact.phone.icontains(query, autoescape=True),
                Contact.company.icontains(query, autoescape=True),
                Contact.position.icontains(query, autoescape=True),
            ),
        )
        .order_by(Contact.id)
    )
    result = await db.execute(stmt)
    return [ContactRead.model_validate(c) for c in result.scalars().all()]
