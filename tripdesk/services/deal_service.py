import random
from datetime import date, timedelta
from typing import List, Optional

from tripdesk.schemas.booking import BookingType
from tripdesk.schemas.catalog import Flight, Hotel
from tripdesk.schemas.deals import Deal, DealsResponse, DealTab, DealType, FlightDeal, HotelDeal

# (second deal type, lowest %, highest %, longest expiry in days)
DEAL_RULES = {
    BookingType.HOTEL: (DealType.PACKAGE, 10, 39, 15),
    BookingType.FLIGHT: (DealType.CASHBACK, 5, 24, 11),
}


def deal_for(kind: BookingType, item_id: int, today: date) -> Optional[Deal]:
    """Deal for one listing on one day, seeded by (kind, item_id, today)."""
    rng = random.Random(f"{kind.value}:{item_id}:{today.isoformat()}")
    if rng.random() < 0.5:
        return None

    other_type, low, high, max_days = DEAL_RULES[kind]
    deal_type = DealType.DISCOUNT if rng.random() < 0.5 else other_type
    return Deal(
        type=deal_type,
        value=rng.randint(low, high),
        expiry=today + timedelta(days=rng.randint(1, max_days)),
    )


def _tab_allows(tab: DealTab, deal: Deal) -> bool:
    if tab == DealTab.ALL:
        return True
    return deal.type.value.lower() == tab.value


def list_deals(hotels: List[Hotel], flights: List[Flight], tab: DealTab, today: date) -> DealsResponse:
    hotel_deals = []
    for hotel in hotels:
        deal = deal_for(BookingType.HOTEL, hotel.id, today)
        if deal and _tab_allows(tab, deal):
            hotel_deals.append(HotelDeal(hotel=hotel, deal=deal))

    flight_deals = []
    for flight in flights:
        deal = deal_for(BookingType.FLIGHT, flight.id, today)
        if deal and _tab_allows(tab, deal):
            flight_deals.append(FlightDeal(flight=flight, deal=deal))

    return DealsResponse(hotels=hotel_deals, flights=flight_deals)
