"""User model - agency staff, owners and client accounts."""

from __future__ import annotations

from sqlalchemy import Boolean, Integer, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, IdMixin, TimestampMixin
from .enums import UserRole, string_enum


class User(IdMixin, TimestampMixin, Base):
    __tablename__ = "users"

    # External identity reference, unique across every agency
    clerk_id: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    agency_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("agencies.id"), index=True, nullable=False
    )
    email: Mapped[str] = mapped_column(String(255))
    first_name: Mapped[str] = mapped_column(String(100))
    last_name: Mapped[str] = mapped_column(String(100))
    role: Mapped[UserRole] = mapped_column(string_enum(UserRole, "user_role"))
    avatar_url: Mapped[str | None] = mapped_column(String(2048), default=None)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    # Relationships
    agency: Mapped["Agency"] = relationship(back_populates="users")  # noqa: F821

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __repr__(self) -> str:
        return f"<User {self.clerk_id!r} role={self.role}>"
