import re
from datetime import date, datetime, timezone
from enum import Enum
from typing import Optional, Union

from pydantic import ConfigDict, Field, field_validator, model_validator

from tripdesk.schemas.base import CamelModel

PAYMENT_CONFIRMED = "confirmed"

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
MIN_NAME_LENGTH = 3
MIN_PHONE_LENGTH = 10


class BookingType(str, Enum):
    HOTEL = "hotel"
    FLIGHT = "flight"


def check_contact_name(value: str) -> str:
    value = value.strip()
    if len(value) < MIN_NAME_LENGTH:
        raise ValueError("Name must be at least 3 characters")
    return value


def check_contact_email(value: str) -> str:
    value = value.strip()
    if not EMAIL_PATTERN.match(value):
        raise ValueError("Please enter a valid email address")
    return value


def check_contact_phone(value: str) -> str:
    value = value.strip()
    if len(value) < MIN_PHONE_LENGTH:
        raise ValueError("Please enter a valid phone number")
    return value


class BookingCreate(CamelModel):
    user_id: str
    booking_type: BookingType
    item_id: int
    booking_date: datetime
    start_date: date
    end_date: Optional[date] = None
    number_of_guests: Optional[int] = Field(default=None, ge=1)
    total_price: int = Field(ge=0)
    payment_status: str = PAYMENT_CONFIRMED
    contact_name: str
    contact_email: str
    contact_phone: str

    @field_validator("booking_date")
    @classmethod
    def as_utc(cls, value: datetime) -> datetime:
        # SQLite hands timestamps back without tzinfo; they were stored as UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    @model_validator(mode="after")
    def check_date_range(self):
        if self.end_date is not None and self.end_date <= self.start_date:
            raise ValueError("endDate must be after startDate")
        return self


class Booking(BookingCreate):
    model_config = ConfigDict(frozen=True)

    id: int


class BookingRequest(CamelModel):
    """Body of POST /bookings, as sent by the booking form."""

    booking_type: BookingType
    item_id: int = Field(gt=0)
    start_date: date
    end_date: Optional[date] = None
    number_of_guests: Optional[int] = Field(default=None, ge=1)
    # Name and email fall back to the signed-in identity when omitted
    contact_name: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: str

    # Sent by older clients; the server computes its own values
    user_id: Optional[Union[str, int]] = None
    booking_date: Optional[datetime] = None
    total_price: Optional[int] = None
    payment_status: Optional[str] = None

    @field_validator("contact_name")
    @classmethod
    def validate_name(cls, value: Optional[str]) -> Optional[str]:
        return check_contact_name(value) if value is not None else value

    @field_validator("contact_email")
    @classmethod
    def validate_email(cls, value: Optional[str]) -> Optional[str]:
        return check_contact_email(value) if value is not None else value

    @field_validator("contact_phone")
    @classmethod
    def validate_phone(cls, value: str) -> str:
        return check_contact_phone(value)
