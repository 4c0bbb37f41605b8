from typing import List, Optional

from pydantic import ConfigDict, Field, field_validator

from tripdesk.schemas.base import CamelModel


class DestinationCreate(CamelModel):
    name: str = Field(min_length=1)
    description: str
    image_url: str
    # Stored as numeric or string upstream; always a float once it gets here
    rating: float = Field(ge=0.0, le=5.0)
    review_count: int = Field(ge=0)
    starting_price: int = Field(ge=0)


class Destination(DestinationCreate):
    model_config = ConfigDict(frozen=True)

    id: int


class HotelCreate(CamelModel):
    name: str = Field(min_length=1)
    description: str
    location: str
    image_url: str
    # Hotels are rated out of 10, destinations out of 5
    rating: float = Field(ge=0.0, le=10.0)
    price_per_night: int = Field(ge=0)
    badge: Optional[str] = None
    amenities: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)

    @field_validator("badge")
    @classmethod
    def blank_badge_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value


class Hotel(HotelCreate):
    model_config = ConfigDict(frozen=True)

    id: int


class FlightCreate(CamelModel):
    airline: str = Field(min_length=1)
    airline_logo: str
    status: str
    departure_code: str = Field(min_length=3, max_length=3)
    departure_city: str
    arrival_code: str = Field(min_length=3, max_length=3)
    arrival_city: str
    duration: str
    stops: int = Field(ge=0)
    price: int = Field(ge=0)
    departure_time: str
    arrival_time: str
    date: str


class Flight(FlightCreate):
    model_config = ConfigDict(frozen=True)

    id: int


class UserCreate(CamelModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None


class User(UserCreate):
    model_config = ConfigDict(frozen=True)

    id: int


class UserPublic(CamelModel):
    id: int
    username: str
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
