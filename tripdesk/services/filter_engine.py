import logging
import re
from datetime import date
from typing import List, Optional

from dateutil import parser as date_parser

from tripdesk.schemas.catalog import Destination, Flight, Hotel
from tripdesk.schemas.filters import (
    DestinationCategory,
    DestinationFilter,
    FlightFilter,
    FlightSort,
    HotelFilter,
    HotelSort,
)

logger = logging.getLogger(__name__)

POPULAR_MIN_RATING = 4.7
LUXURY_MIN_PRICE = 3000

DURATION_PATTERN = re.compile(r"^\s*(?:(\d+)\s*h)?\s*(?:(\d+)\s*m)?\s*$", re.IGNORECASE)


def parse_duration(duration: str) -> Optional[int]:
    """Minutes in an "XhYm" string such as "2h 40m", "45m" or "3h". None if malformed."""
    match = DURATION_PATTERN.match(duration or "")
    if not match or not any(match.groups()):
        return None
    hours, minutes = match.groups()
    return int(hours or 0) * 60 + int(minutes or 0)


def parse_flight_date(value: str) -> Optional[date]:
    try:
        return date_parser.parse(value).date()
    except (ValueError, OverflowError):
        return None


def _contains(haystack: str, needle: str) -> bool:
    return needle.lower() in haystack.lower()


def filter_hotels(hotels: List[Hotel], hotel_filter: HotelFilter) -> List[Hotel]:
    filtered = list(hotels)

    if hotel_filter.search_text:
        query = hotel_filter.search_text
        filtered = [h for h in filtered if _contains(h.name, query) or _contains(h.location, query)]

    if hotel_filter.price_range is not None:
        filtered = [h for h in filtered if hotel_filter.price_range.contains(h.price_per_night)]

    if hotel_filter.amenities:
        required = set(hotel_filter.amenities)
        filtered = [h for h in filtered if required.issubset(h.amenities)]

    if hotel_filter.min_rating is not None:
        filtered = [h for h in filtered if h.rating >= hotel_filter.min_rating]

    sort_by = hotel_filter.sort_by
    if sort_by == HotelSort.PRICE_LOW:
        filtered.sort(key=lambda h: h.price_per_night)
    elif sort_by == HotelSort.PRICE_HIGH:
        filtered.sort(key=lambda h: h.price_per_night, reverse=True)
    elif sort_by == HotelSort.RATING:
        filtered.sort(key=lambda h: h.rating, reverse=True)
    # popularity: keep stored order

    return filtered


def filter_flights(flights: List[Flight], flight_filter: FlightFilter) -> List[Flight]:
    filtered = list(flights)

    if flight_filter.origin:
        origin = flight_filter.origin
        filtered = [
            f for f in filtered
            if _contains(f.departure_city, origin) or _contains(f.departure_code, origin)
        ]

    if flight_filter.destination:
        destination = flight_filter.destination
        filtered = [
            f for f in filtered
            if _contains(f.arrival_city, destination) or _contains(f.arrival_code, destination)
        ]

    if flight_filter.airlines:
        allowed = set(flight_filter.airlines)
        filtered = [f for f in filtered if f.airline in allowed]

    if flight_filter.price_range is not None:
        filtered = [f for f in filtered if flight_filter.price_range.contains(f.price)]

    if flight_filter.departure_date is not None:
        # Flights with an unreadable date can never match a requested day
        filtered = [f for f in filtered if parse_flight_date(f.date) == flight_filter.departure_date]

    sort_by = flight_filter.sort_by
    if sort_by == FlightSort.PRICE_LOW:
        filtered.sort(key=lambda f: f.price)
    elif sort_by == FlightSort.PRICE_HIGH:
        filtered.sort(key=lambda f: f.price, reverse=True)
    elif sort_by == FlightSort.DURATION:
        filtered.sort(key=_duration_sort_key)
    # departure: keep stored order

    return filtered


def _duration_sort_key(flight: Flight):
    minutes = parse_duration(flight.duration)
    if minutes is None:
        logger.warning(f"Unparsable duration {flight.duration!r} on flight {flight.id}; sorting it last")
        return (1, 0)
    return (0, minutes)


def filter_destinations(destinations: List[Destination], destination_filter: DestinationFilter) -> List[Destination]:
    filtered = list(destinations)

    if destination_filter.search_text:
        query = destination_filter.search_text
        filtered = [d for d in filtered if _contains(d.name, query) or _contains(d.description, query)]

    category = destination_filter.category
    if category == DestinationCategory.POPULAR:
        filtered = [d for d in filtered if d.rating >= POPULAR_MIN_RATING]
    elif category == DestinationCategory.BUDGET:
        filtered = [d for d in filtered if d.starting_price < LUXURY_MIN_PRICE]
    elif category == DestinationCategory.LUXURY:
        filtered = [d for d in filtered if d.starting_price >= LUXURY_MIN_PRICE]

    return filtered
