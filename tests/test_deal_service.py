from datetime import date, timedelta

from tripdesk.schemas.booking import BookingType
from tripdesk.schemas.deals import DealTab, DealType
from tripdesk.services.deal_service import deal_for, list_deals

TODAY = date(2024, 1, 1)


def test_deal_is_stable_for_same_item_and_day():
    for item_id in range(1, 30):
        assert deal_for(BookingType.HOTEL, item_id, TODAY) == deal_for(BookingType.HOTEL, item_id, TODAY)


def test_hotel_deals_stay_in_range():
    deals = [deal_for(BookingType.HOTEL, item_id, TODAY) for item_id in range(1, 200)]
    offered = [d for d in deals if d is not None]

    assert 0 < len(offered) < len(deals)
    for deal in offered:
        assert deal.type in (DealType.DISCOUNT, DealType.PACKAGE)
        assert 10 <= deal.value <= 39
        assert TODAY + timedelta(days=1) <= deal.expiry <= TODAY + timedelta(days=15)


def test_flight_deals_stay_in_range():
    offered = [d for d in (deal_for(BookingType.FLIGHT, i, TODAY) for i in range(1, 200)) if d]

    assert offered
    for deal in offered:
        assert deal.type in (DealType.DISCOUNT, DealType.CASHBACK)
        assert 5 <= deal.value <= 24
        assert deal.expiry <= TODAY + timedelta(days=11)


def test_tabs_narrow_by_deal_type(repository):
    hotels, flights = repository.list_hotels(), repository.list_flights()
    everything = list_deals(hotels, flights, DealTab.ALL, TODAY)
    discounts = list_deals(hotels, flights, DealTab.DISCOUNT, TODAY)
    packages = list_deals(hotels, flights, DealTab.PACKAGE, TODAY)
    cashback = list_deals(hotels, flights, DealTab.CASHBACK, TODAY)

    assert all(d.deal.type == DealType.DISCOUNT for d in discounts.hotels + discounts.flights)
    assert packages.flights == []
    assert cashback.hotels == []
    assert len(discounts.hotels) + len(packages.hotels) == len(everything.hotels)
    assert len(discounts.flights) + len(cashback.flights) == len(everything.flights)
