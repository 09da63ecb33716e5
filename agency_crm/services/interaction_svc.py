"""Contact interaction service - append-only timeline."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.interaction import ContactInteraction
from ..persistence import save
from ..schemas.interaction import ContactInteractionCreate, ContactInteractionRead
from . import reference_svc

log = logging.getLogger(__name__)


async def create_contact_interaction(
    db: AsyncSession, data: ContactInteractionCreate
) -> ContactInteractionRead:
    await reference_svc.ensure_agency(db, data.agency_id)
    await reference_svc.ensure_contact_in_agency(db, data.contact_id, data.agency_id)
    await reference_svc.ensure_user_in_agency(db, data.created_by, data.agency_id)

    fields = data.model_dump(exclude={"metadata"})
    interaction = await save(db, ContactInteraction(**fields, metadata_json=data.metadata))
    log.info(
        "Logged %s interaction %s for contact %s",
        interaction.type.value, interaction.id, interaction.contact_id,
    )
    return ContactInteractionRead.model_validate(interaction)


async def list_contact_interactions(
    db: AsyncSession, contact_id: int
) -> list[ContactInteractionRead]:
    """Timeline for a contact, newest first."""
    stmt = (
        select(ContactInteraction)
        .where(ContactInteraction.contact_id == contact_id)
        .order_by(ContactInteraction.created_at.desc(), ContactInteraction.id.desc())
    )
    result = await db.execute(stmt)
    return [ContactInteractionRead.model_validate(i) for i in result.scalars().all()]
