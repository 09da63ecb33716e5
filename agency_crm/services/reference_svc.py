"""Reference checks run before writes that point at other records.

Each check loads the referenced row and confirms it exists and belongs to
the tenant of the write. Foreign keys in the store still back these up;
the checks exist to fail early with a message naming the offending record.
"""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from ..errors import ReferenceInvalid, ReferenceMismatch
from ..models.agency import Agency
from ..models.contact import Contact
from ..models.user import User
from ..persistence import fetch

log = logging.getLogger(__name__)


def _missing(label: str, row_id: int) -> ReferenceInvalid:
    log.warning("%s with id %s not found", label, row_id)
    return ReferenceInvalid(f"{label} with id {row_id} not found")


def _foreign(label: str, row_id: int, agency_id: int) -> ReferenceMismatch:
    log.warning("%s %s does not belong to agency %s", label, row_id, agency_id)
    return ReferenceMismatch(f"{label} {row_id} does not belong to agency {agency_id}")


async def ensure_agency(db: AsyncSession, agency_id: int) -> Agency:
    agency = await fetch(db, Agency, agency_id)
    if agency is None:
        raise _missing("Agency", agency_id)
    return agency


async def ensure_contact_in_agency(
    db: AsyncSession, contact_id: int, agency_id: int
) -> Contact:
    contact = await fetch(db, Contact, contact_id)
    if contact is None:
        raise _missing("Contact", contact_id)
    if contact.agency_id != agency_id:
        raise _foreign("Contact", contact_id, agency_id)
    return contact


async def ensure_user_in_agency(
    db: AsyncSession, user_id: int, agency_id: int, *, label: str = "User"
) -> User:
    """Confirm a user exists and works for ``agency_id``.

    ``label`` names the role the user plays in the write ("User" for the
    creator, "Assigned user" for a deal assignee) so the error says which
    reference was bad.
    """
    user = await fetch(db, User, user_id)
    if user is None:
        raise _missing(label, user_id)
    if user.agency_id != agency_id:
        raise _foreign(label, user_id, agency_id)
    return user
