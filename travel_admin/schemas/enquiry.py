from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

TOUR_PLACEHOLDER = "Select Tour Country"


class EnquiryCreate(BaseModel):
    """Public enquiry form. Field names follow the website form (camelCase)."""
    model_config = ConfigDict(populate_by_name=True)

    tour: str | None = None
    name: str = Field(min_length=1)
    email: EmailStr
    mobile: str | None = None
    living_country: str | None = Field(default=None, alias="livingCountry")
    nationality: str | None = None
    destination: str | None = None
    arrival_date: date | None = Field(default=None, alias="arrivalDate")
    departure_date: date | None = Field(default=None, alias="departureDate")
    adults: int | None = None
    children: int | None = None
    flight_status: str | None = Field(default=None, alias="flightStatus")
    holiday_reason: str | None = Field(default=None, alias="holidayReason")
    message: str | None = None

    @field_validator("tour", "destination")
    @classmethod
    def _drop_placeholder(cls, v: str | None) -> str | None:
        if not v or v == TOUR_PLACEHOLDER:
            return None
        return v

    @field_validator("mobile", "living_country", "nationality", "flight_status", "holiday_reason", "message")
    @classmethod
    def _blank_to_none(cls, v: str | None) -> str | None:
        return v or None

    @field_validator("arrival_date", "departure_date", "adults", "children", mode="before")
    @classmethod
    def _empty_to_none(cls, v):
        return None if v == "" else v


class EnquiryOut(BaseModel):
    id: int
    tour: str | None
    name: str
    email: str
    mobile: str | None
    living_country: str | None
    nationality: str | None
    destination: str | None
    arrival_date: date | None
    departure_date: date | None
    adults: int | None
    children: int | None
    flight_status: str | None
    holiday_reason: str | None
    message: str | None
    status: str
    created_at: datetime | None
    updated_at: datetime | None

    class Config:
        from_attributes = True


class StatusIn(BaseModel):
    status: str = Field(min_length=1)
