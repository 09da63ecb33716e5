"""Contact schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from .common import Document, Label, PartialUpdate, PersonName, Phone, PositiveId


class ContactCreate(BaseModel):
    agency_id: PositiveId
    first_name: PersonName
    last_name: PersonName
    email: EmailStr | None = None
    phone: Phone | None = None
    company: Label | None = None
    position: Label | None = None
    tags: list[str] = Field(default_factory=list)
    custom_fields: Document = Field(default_factory=dict)
    created_by: PositiveId


class ContactUpdate(PartialUpdate):
    non_nullable = ("first_name", "last_name", "tags", "custom_fields")

    id: PositiveId

    first_name: PersonName | None = None
    last_name: PersonName | None = None
    email: EmailStr | None = None
    phone: Phone | None = None
    company: Label | None = None
    position: Label | None = None
    tags: list[str] | None = None
    custom_fields: Document | None = None


class ContactRead(BaseModel):
    id: int
    agency_id: int
    first_name: str
    last_name: str
    email: str | None
    phone: str | None
    company: str | None
    position: str | None
    tags: list[str]
    custom_fields: Document
    created_by: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
