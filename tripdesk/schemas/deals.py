from datetime import date
from enum import Enum
from typing import List

from pydantic import Field

from tripdesk.schemas.base import CamelModel
from tripdesk.schemas.catalog import Flight, Hotel


class DealType(str, Enum):
    DISCOUNT = "DISCOUNT"
    PACKAGE = "PACKAGE"
    CASHBACK = "CASHBACK"


class DealTab(str, Enum):
    ALL = "all"
    DISCOUNT = "discount"
    PACKAGE = "package"
    CASHBACK = "cashback"


class Deal(CamelModel):
    type: DealType
    value: int  # percent
    expiry: date


class HotelDeal(CamelModel):
    hotel: Hotel
    deal: Deal


class FlightDeal(CamelModel):
    flight: Flight
    deal: Deal


class DealsResponse(CamelModel):
    hotels: List[HotelDeal] = Field(default_factory=list)
    flights: List[FlightDeal] = Field(default_factory=list)
