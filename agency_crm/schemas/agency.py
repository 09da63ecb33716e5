"""Agency schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from .common import (
    DisplayName,
    HexColor,
    PartialUpdate,
    PositiveId,
    Port,
    ShortText,
    Subdomain,
    UrlStr,
)


class AgencyCreate(BaseModel):
    name: DisplayName
    subdomain: Subdomain
    logo_url: UrlStr | None = None
    favicon_url: UrlStr | None = None
    primary_color: HexColor | None = None
    secondary_color: HexColor | None = None
    smtp_host: ShortText | None = None
    smtp_port: Port | None = None
    smtp_username: ShortText | None = None
    smtp_password: ShortText | None = None
    custom_domain: ShortText | None = None


class AgencyChanges(PartialUpdate):
    """Mutable agency fields. Subdomain is not among them."""

    non_nullable = ("name",)

    name: DisplayName | None = None
    logo_url: UrlStr | None = None
    favicon_url: UrlStr | None = None
    primary_color: HexColor | None = None
    secondary_color: HexColor | None = None
    smtp_host: ShortText | None = None
    smtp_port: Port | None = None
    smtp_username: ShortText | None = None
    smtp_password: ShortText | None = None
    custom_domain: ShortText | None = None


class AgencyUpdate(AgencyChanges):
    id: PositiveId


class AgencyUpdateRequest(BaseModel):
    """RPC body for updateAgency: ``{"id": ..., "updates": {...}}``."""

    id: PositiveId
    updates: AgencyChanges

    def to_update(self) -> AgencyUpdate:
        return AgencyUpdate(id=self.id, **self.updates.changes())


class AgencyRead(BaseModel):
    id: int
    name: str
    subdomain: str
    logo_url: str | None
    favicon_url: str | None
    primary_color: str | None
    secondary_color: str | None
    smtp_host: str | None
    smtp_port: int | None
    smtp_username: str | None
    smtp_password: str | None
    custom_domain: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
