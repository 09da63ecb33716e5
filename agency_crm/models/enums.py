"""Enum definitions stored as constrained string columns."""

from __future__ import annotations

from enum import Enum

from sqlalchemy import Enum as SAEnum


class UserRole(str, Enum):
    SUPER_ADMIN = "super-admin"
    AGENCY_OWNER = "agency-owner"
    STAFF = "staff"
    CLIENT = "client"


class DealStage(str, Enum):
    """
    Pipeline stage of a deal.

    lead -> qualified -> proposal -> won | lost. No transition table is
    enforced; any stage may be set directly, including moving backwards.
    """
    LEAD = "lead"
    QUALIFIED = "qualified"
    PROPOSAL = "proposal"
    WON = "won"
    LOST = "lost"


class LandingPageStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class InteractionType(str, Enum):
    EMAIL = "email"
    CALL = "call"
    MEETING = "meeting"
    NOTE = "note"
    TASK = "task"


def string_enum(enum_cls: type[Enum], name: str) -> SAEnum:
    """Non-native enum column persisted as the member values."""
    return SAEnum(
        enum_cls,
        name=name,
        native_enum=False,
        create_constraint=True,
        length=32,
        values_callable=lambda members: [m.value for m in members],
    )
