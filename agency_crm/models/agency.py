"""Agency model - the tenant root."""

from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, IdMixin, TimestampMixin


class Agency(IdMixin, TimestampMixin, Base):
    __tablename__ = "agencies"

    name: Mapped[str] = mapped_column(String(200))
    # Immutable after creation; no update path touches it
    subdomain: Mapped[str] = mapped_column(String(63), unique=True, index=True)

    # Branding
    logo_url: Mapped[str | None] = mapped_column(String(2048), default=None)
    favicon_url: Mapped[str | None] = mapped_column(String(2048), default=None)
    primary_color: Mapped[str | None] = mapped_column(String(7), default=None)
    secondary_color: Mapped[str | None] = mapped_column(String(7), default=None)

    # SMTP credentials (stored only)
    smtp_host: Mapped[str | None] = mapped_column(String(255), default=None)
    smtp_port: Mapped[int | None] = mapped_column(Integer, default=None)
    smtp_username: Mapped[str | None] = mapped_column(String(255), default=None)
    smtp_password: Mapped[str | None] = mapped_column(String(255), default=None)

    custom_domain: Mapped[str | None] = mapped_column(String(255), default=None)

    # Relationships
    users: Mapped[list["User"]] = relationship(back_populates="agency")  # noqa: F821
    contacts: Mapped[list["Contact"]] = relationship(back_populates="agency")  # noqa: F821

    def __repr__(self) -> str:
        return f"<Agency {self.subdomain!r}>"
