"""Shared field types and the partial-update base model."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, Any, ClassVar

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    Field,
    HttpUrl,
    TypeAdapter,
    ValidationError,
    model_validator,
)

_http_url = TypeAdapter(HttpUrl)


def _check_url(value: str) -> str:
    try:
        _http_url.validate_python(value)
    except ValidationError as exc:
        raise ValueError("must be a valid URL") from exc
    return value


def _calendar_date(value: Any) -> Any:
    # Keep the calendar day only; time-of-day and offset are dropped
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and len(value.strip()) > 10:
        return datetime.fromisoformat(value.strip().replace("Z", "+00:00")).date()
    return value


# String lengths mirror the column sizes in models/
PersonName = Annotated[str, Field(min_length=1, max_length=100)]
Title = Annotated[str, Field(min_length=1, max_length=300)]
Label = Annotated[str, Field(max_length=200)]
ShortText = Annotated[str, Field(max_length=255)]
Phone = Annotated[str, Field(max_length=50)]
DisplayName = Annotated[str, Field(min_length=1, max_length=200)]
Identifier = Annotated[str, Field(min_length=1, max_length=100)]
ExternalId = Annotated[str, Field(min_length=1, max_length=255)]

PositiveId = Annotated[int, Field(gt=0)]
Slug = Annotated[str, Field(min_length=1, max_length=200, pattern=r"^[a-z0-9-]+$")]
Subdomain = Annotated[str, Field(min_length=1, max_length=63, pattern=r"^[a-z0-9-]+$")]
HexColor = Annotated[str, Field(pattern=r"^#[0-9A-Fa-f]{6}$")]
UrlStr = Annotated[str, Field(max_length=2048), AfterValidator(_check_url)]
Port = Annotated[int, Field(ge=1, le=65535)]
Probability = Annotated[int, Field(ge=0, le=100)]
# NUMERIC(12, 2): at most 10 whole digits and whole cents
Money = Annotated[Decimal, Field(gt=0, max_digits=12, decimal_places=2)]
CalendarDate = Annotated[date, BeforeValidator(_calendar_date)]
Document = dict[str, Any]


class PartialUpdate(BaseModel):
    """Update input where only the fields actually sent are applied.

    Absent fields are left alone; fields sent as null clear the column,
    except those listed in ``non_nullable``.
    """

    model_config = {"extra": "forbid"}

    non_nullable: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_null_required(self):
        for name in self.non_nullable:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True, exclude={"id"})
