"""Landing page schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, Field

from ..models.enums import LandingPageStatus
from .common import Document, Identifier, PositiveId, ShortText, Slug, Title


class LandingPageCreate(BaseModel):
    agency_id: PositiveId
    title: Title
    slug: Slug
    template_id: Identifier
    content: Document = Field(default_factory=dict)
    custom_domain: ShortText | None = None
    meta_title: Annotated[str, Field(max_length=300)] | None = None
    meta_description: Annotated[str, Field(max_length=1000)] | None = None
    created_by: PositiveId


class LandingPageRead(BaseModel):
    id: int
    agency_id: int
    title: str
    slug: str
    template_id: str
    content: Document
    status: LandingPageStatus
    custom_domain: str | None
    meta_title: str | None
    meta_description: str | None
    published_at: datetime | None
    created_by: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class LandingPagePublish(BaseModel):
    id: PositiveId
