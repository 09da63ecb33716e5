"""ContactInteraction model - append-only contact timeline."""

from __future__ import annotations

from typing import Any

from sqlalchemy import JSON, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, IdMixin, CreatedAtMixin, TenantMixin
from .enums import InteractionType, string_enum


class ContactInteraction(IdMixin, CreatedAtMixin, TenantMixin, Base):
    __tablename__ = "contact_interactions"

    contact_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("contacts.id"), index=True, nullable=False
    )
    type: Mapped[InteractionType] = mapped_column(string_enum(InteractionType, "interaction_type"))
    title: Mapped[str] = mapped_column(String(300))
    description: Mapped[str | None] = mapped_column(Text, default=None)
    # "metadata" is reserved on declarative classes; NULL means no metadata at all
    metadata_json: Mapped[dict[str, Any] | None] = mapped_column(
        "metadata", JSON(none_as_null=True), default=None
    )
    created_by: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), nullable=False)

    # Relationships
    contact: Mapped["Contact"] = relationship(back_populates="interactions")  # noqa: F821

    def __repr__(self) -> str:
        return f"<ContactInteraction {self.type} contact={self.contact_id}>"
