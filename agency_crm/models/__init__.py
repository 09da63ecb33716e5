"""Agency CRM models - re-exports all models and Base.metadata."""

from .base import Base, IdMixin, CreatedAtMixin, TimestampMixin, TenantMixin
from .enums import UserRole, DealStage, LandingPageStatus, InteractionType
from .agency import Agency
from .user import User
from .contact import Contact
from .deal import Deal
from .landing_page import LandingPage
from .interaction import ContactInteraction

__all__ = [
    "Base",
    "IdMixin",
    "CreatedAtMixin",
    "TimestampMixin",
    "TenantMixin",
    "UserRole",
    "DealStage",
    "LandingPageStatus",
    "InteractionType",
    "Agency",
    "User",
    "Contact",
    "Deal",
    "LandingPage",
    "ContactInteraction",
]
