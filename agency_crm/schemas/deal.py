"""Deal schemas."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel

from ..models.enums import DealStage
from .common import CalendarDate, Money, PartialUpdate, PositiveId, Probability, Title


class DealCreate(BaseModel):
    agency_id: PositiveId
    contact_id: PositiveId
    title: Title
    description: str | None = None
    value: Money | None = None
    stage: DealStage = DealStage.LEAD
    probability: Probability = 0
    expected_close_date: CalendarDate | None = None
    assigned_to: PositiveId | None = None
    created_by: PositiveId


class DealUpdate(PartialUpdate):
    """Stage and probability are independent; neither is derived from the other."""

    non_nullable = ("title", "stage", "probability")

    id: PositiveId

    title: Title | None = None
    description: str | None = None
    value: Money | None = None
    stage: DealStage | None = None
    probability: Probability | None = None
    expected_close_date: CalendarDate | None = None
    assigned_to: PositiveId | None = None


class DealRead(BaseModel):
    id: int
    agency_id: int
    contact_id: int
    title: str
    description: str | None
    value: float | None
    stage: DealStage
    probability: int
    expected_close_date: date | None
    assigned_to: int | None
    created_by: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
