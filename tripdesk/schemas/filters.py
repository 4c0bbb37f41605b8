from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class HotelSort(str, Enum):
    POPULARITY = "popularity"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    RATING = "rating"


class FlightSort(str, Enum):
    DEPARTURE = "departure"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    DURATION = "duration"


class DestinationCategory(str, Enum):
    ALL = "all"
    POPULAR = "popular"
    BUDGET = "budget"
    LUXURY = "luxury"


class PriceRange(BaseModel):
    """Inclusive bounds. low > high is allowed and matches nothing."""

    low: int = 0
    high: Optional[int] = None

    def contains(self, price: int) -> bool:
        if price < self.low:
            return False
        return self.high is None or price <= self.high


class HotelFilter(BaseModel):
    search_text: str = ""
    price_range: Optional[PriceRange] = None
    amenities: List[str] = Field(default_factory=list)
    min_rating: Optional[float] = None
    sort_by: HotelSort = HotelSort.POPULARITY


class FlightFilter(BaseModel):
    origin: str = ""
    destination: str = ""
    airlines: List[str] = Field(default_factory=list)
    price_range: Optional[PriceRange] = None
    departure_date: Optional[date] = None
    sort_by: FlightSort = FlightSort.DEPARTURE


class DestinationFilter(BaseModel):
    search_text: str = ""
    category: DestinationCategory = DestinationCategory.ALL
