"""Deal model - sales pipeline opportunities tied to a contact."""

from __future__ import annotations

from datetime import date

from sqlalchemy import Date, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, IdMixin, TimestampMixin, TenantMixin
from .enums import DealStage, string_enum


class Deal(IdMixin, TimestampMixin, TenantMixin, Base):
    __tablename__ = "deals"

    contact_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("contacts.id"), index=True, nullable=False
    )
    title: Mapped[str] = mapped_column(String(300))
    description: Mapped[str | None] = mapped_column(Text, default=None)
    # NUMERIC(12, 2) in storage, float to callers
    value: Mapped[float | None] = mapped_column(Numeric(12, 2, asdecimal=False), default=None)
    stage: Mapped[DealStage] = mapped_column(
        string_enum(DealStage, "deal_stage"), default=DealStage.LEAD, nullable=False
    )
    probability: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    expected_close_date: Mapped[date | None] = mapped_column(Date, default=None)
    assigned_to: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("users.id"), default=None
    )
    created_by: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), nullable=False)

    # Relationships
    contact: Mapped["Contact"] = relationship(back_populates="deals")  # noqa: F821

    def __repr__(self) -> str:
        return f"<Deal {self.title!r} stage={self.stage}>"
