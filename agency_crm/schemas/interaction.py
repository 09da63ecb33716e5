"""Contact interaction (timeline) schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field

from ..models.enums import InteractionType
from .common import Document, PositiveId, Title


class ContactInteractionCreate(BaseModel):
    contact_id: PositiveId
    agency_id: PositiveId
    type: InteractionType
    title: Title
    description: str | None = None
    # None means "no metadata", distinct from an empty document
    metadata: Document | None = None
    created_by: PositiveId


class ContactInteractionRead(BaseModel):
    id: int
    contact_id: int
    agency_id: int
    type: InteractionType
    title: str
    description: str | None
    metadata: Document | None = Field(
        default=None, validation_alias=AliasChoices("metadata_json", "metadata")
    )
    created_by: int
    created_at: datetime

    model_config = {"from_attributes": True}
