"""User schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, EmailStr

from ..models.enums import UserRole
from .common import ExternalId, PersonName, PositiveId, UrlStr


class UserCreate(BaseModel):
    clerk_id: ExternalId
    agency_id: PositiveId
    email: EmailStr
    first_name: PersonName
    last_name: PersonName
    role: UserRole
    avatar_url: UrlStr | None = None


class UserRead(BaseModel):
    id: int
    clerk_id: str
    agency_id: int
    email: str
    first_name: str
    last_name: str
    role: UserRole
    avatar_url: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
