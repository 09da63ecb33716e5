"""LandingPage model - publishable marketing pages."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, IdMixin, TimestampMixin, TenantMixin, UTCDateTime
from .enums import LandingPageStatus, string_enum


class LandingPage(IdMixin, TimestampMixin, TenantMixin, Base):
    __tablename__ = "landing_pages"

    title: Mapped[str] = mapped_column(String(300))
    slug: Mapped[str] = mapped_column(String(200), index=True)
    template_id: Mapped[str] = mapped_column(String(100))
    content: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict, nullable=False)
    status: Mapped[LandingPageStatus] = mapped_column(
        string_enum(LandingPageStatus, "landing_page_status"),
        default=LandingPageStatus.DRAFT,
        nullable=False,
    )
    custom_domain: Mapped[str | None] = mapped_column(String(255), default=None)
    meta_title: Mapped[str | None] = mapped_column(String(300), default=None)
    meta_description: Mapped[str | None] = mapped_column(String(1000), default=None)
    published_at: Mapped[datetime | None] = mapped_column(UTCDateTime, default=None)
    created_by: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), nullable=False)

    def __repr__(self) -> str:
        return f"<LandingPage {self.slug!r} status={self.status}>"
