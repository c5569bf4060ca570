from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, model_validator


class InclusionIn(BaseModel):
    included: list[str] = Field(default_factory=list)
    excluded: list[str] = Field(default_factory=list)
    # accepted for the admin form, not stored (no column)
    booking_information: str = ""
    cancellation_policy: str = ""


class SummaryIn(BaseModel):
    description: str = ""
    activities: list[str] = Field(default_factory=list)
    locations: list[str] = Field(default_factory=list)


class PackageIn(BaseModel):
    """
    Create/update body. Either `name` or the older `title` must be given.
    Image paths are kept as sent (relative, root-relative or absolute URL).
    """
    name: str | None = None
    title: str | None = None
    slug: str = Field(min_length=1)
    country: str = Field(min_length=1)
    days: int = Field(ge=1)
    image: str | None = None
    price: Decimal | None = None
    stars: int | None = Field(default=None, ge=0, le=5)
    description: str | None = None
    # itinerary days / image entries are free-form JSON objects
    itinerary: list[Any] | None = None
    images: list[Any] | None = None
    inclusion: InclusionIn | None = None
    summary: SummaryIn | None = None

    @model_validator(mode="after")
    def _require_name(self) -> "PackageIn":
        if not (self.name or self.title):
            raise ValueError("Missing required fields: name")
        return self
