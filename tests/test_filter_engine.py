from datetime import date

import pytest

from tripdesk.schemas.catalog import Flight, Hotel
from tripdesk.schemas.filters import (
    DestinationCategory,
    DestinationFilter,
    FlightFilter,
    FlightSort,
    HotelFilter,
    HotelSort,
    PriceRange,
)
from tripdesk.services.filter_engine import (
    filter_destinations,
    filter_flights,
    filter_hotels,
    parse_duration,
)


def make_hotel(hotel_id, price, rating=9.0, amenities=("Wi-Fi",), name=None):
    return Hotel(
        id=hotel_id,
        name=name or f"Hotel {hotel_id}",
        description="",
        location="Somewhere",
        image_url="",
        rating=rating,
        price_per_night=price,
        amenities=list(amenities),
        tags=[],
    )


def make_flight(flight_id, duration="1h 00m", price=5000, flight_date="2023-07-15"):
    return Flight(
        id=flight_id,
        airline="Test Air",
        airline_logo="",
        status="On Time",
        departure_code="DEL",
        departure_city="New Delhi",
        arrival_code="BOM",
        arrival_city="Mumbai",
        duration=duration,
        stops=0,
        price=price,
        departure_time="09:00",
        arrival_time="11:00",
        date=flight_date,
    )


def ids(records):
    return [r.id for r in records]


# Hotels

def test_hotel_filters_are_conjunctive(repository):
    hotel_filter = HotelFilter(
        price_range=PriceRange(low=15000, high=25000),
        amenities=["Spa", "Gym"],
    )
    result = filter_hotels(repository.list_hotels(), hotel_filter)

    assert ids(result) == [3]
    for hotel in result:
        assert 15000 <= hotel.price_per_night <= 25000
        assert {"Spa", "Gym"} <= set(hotel.amenities)


def test_price_range_is_inclusive(repository):
    result = filter_hotels(repository.list_hotels(), HotelFilter(price_range=PriceRange(low=15999, high=18999)))
    assert ids(result) == [3, 6]


def test_inverted_price_range_matches_nothing(repository):
    result = filter_hotels(repository.list_hotels(), HotelFilter(price_range=PriceRange(low=30000, high=10000)))
    assert result == []


def test_search_text_matches_name_or_location(repository):
    assert ids(filter_hotels(repository.list_hotels(), HotelFilter(search_text="PALACE"))) == [1, 3, 4]
    assert ids(filter_hotels(repository.list_hotels(), HotelFilter(search_text="kerala"))) == [6]


def test_min_rating_floor(repository):
    result = filter_hotels(repository.list_hotels(), HotelFilter(min_rating=9.2))
    assert ids(result) == [1, 2, 4]


def test_hotel_sort_orders(repository):
    hotels = repository.list_hotels()
    assert ids(filter_hotels(hotels, HotelFilter(sort_by=HotelSort.POPULARITY))) == [1, 2, 3, 4, 5, 6]
    assert ids(filter_hotels(hotels, HotelFilter(sort_by=HotelSort.PRICE_LOW))) == [6, 3, 5, 1, 4, 2]
    assert ids(filter_hotels(hotels, HotelFilter(sort_by=HotelSort.PRICE_HIGH))) == [2, 4, 1, 5, 3, 6]
    assert ids(filter_hotels(hotels, HotelFilter(sort_by=HotelSort.RATING))) == [2, 4, 1, 5, 3, 6]


def test_equal_prices_keep_input_order():
    hotels = [make_hotel(7, 5000), make_hotel(3, 4000), make_hotel(9, 5000), make_hotel(1, 4000)]
    assert ids(filter_hotels(hotels, HotelFilter(sort_by=HotelSort.PRICE_LOW))) == [3, 1, 7, 9]
    assert ids(filter_hotels(hotels, HotelFilter(sort_by=HotelSort.PRICE_HIGH))) == [7, 9, 3, 1]


def test_equal_ratings_keep_input_order():
    hotels = [make_hotel(1, 100, rating=8.0), make_hotel(2, 100, rating=9.0), make_hotel(3, 100, rating=8.0)]
    assert ids(filter_hotels(hotels, HotelFilter(sort_by=HotelSort.RATING))) == [2, 1, 3]


def test_filtering_does_not_touch_input(repository):
    hotels = repository.list_hotels()
    before = ids(hotels)
    filter_hotels(hotels, HotelFilter(sort_by=HotelSort.PRICE_LOW))
    assert ids(hotels) == before


def test_empty_collections_give_empty_results():
    assert filter_hotels([], HotelFilter(search_text="x", sort_by=HotelSort.RATING)) == []
    assert filter_flights([], FlightFilter(sort_by=FlightSort.DURATION)) == []
    assert filter_destinations([], DestinationFilter(category=DestinationCategory.POPULAR)) == []


# Flights

@pytest.mark.parametrize("text, minutes", [
    ("1h 55m", 115),
    ("2h40m", 160),
    ("3h", 180),
    ("45m", 45),
    (" 0h 05m ", 5),
    ("about two hours", None),
    ("", None),
    ("h m", None),
])
def test_parse_duration(text, minutes):
    assert parse_duration(text) == minutes


def test_from_and_to_match_city_or_code(repository):
    flights = repository.list_flights()
    assert ids(filter_flights(flights, FlightFilter(origin="del"))) == [1, 4]
    assert ids(filter_flights(flights, FlightFilter(destination="Mumbai"))) == [1, 5]
    assert ids(filter_flights(flights, FlightFilter(origin="new delhi", destination="blr"))) == [4]


def test_airline_allow_set(repository):
    flights = repository.list_flights()
    assert ids(filter_flights(flights, FlightFilter(airlines=["IndiGo", "GoAir"]))) == [2, 6]
    # Exact airline names; "Air India" does not pull in "Air India Express"
    assert ids(filter_flights(flights, FlightFilter(airlines=["Air India"]))) == [1]
    assert ids(filter_flights(flights, FlightFilter(airlines=[]))) == [1, 2, 3, 4, 5, 6]


def test_flight_price_range(repository):
    result = filter_flights(repository.list_flights(), FlightFilter(price_range=PriceRange(low=4249, high=4499)))
    assert ids(result) == [1, 5]


def test_flight_sort_orders(repository):
    flights = repository.list_flights()
    assert ids(filter_flights(flights, FlightFilter(sort_by=FlightSort.DEPARTURE))) == [1, 2, 3, 4, 5, 6]
    assert ids(filter_flights(flights, FlightFilter(sort_by=FlightSort.PRICE_LOW))) == [3, 6, 1, 5, 2, 4]
    assert ids(filter_flights(flights, FlightFilter(sort_by=FlightSort.PRICE_HIGH))) == [4, 2, 5, 1, 6, 3]
    assert ids(filter_flights(flights, FlightFilter(sort_by=FlightSort.DURATION))) == [3, 6, 5, 1, 4, 2]


def test_malformed_duration_sorts_last_without_failing():
    flights = [
        make_flight(1, "2h 00m"),
        make_flight(2, "two hours"),
        make_flight(3, "1h 10m"),
        make_flight(4, "n/a"),
    ]
    assert ids(filter_flights(flights, FlightFilter(sort_by=FlightSort.DURATION))) == [3, 1, 2, 4]


def test_departure_date_filter():
    flights = [
        make_flight(1, flight_date="2023-07-15"),
        make_flight(2, flight_date="15 Jul 2023"),
        make_flight(3, flight_date="2023-07-16"),
        make_flight(4, flight_date="sometime soon"),
    ]
    assert ids(filter_flights(flights, FlightFilter(departure_date=date(2023, 7, 15)))) == [1, 2]


# Destinations

def test_destination_categories(repository):
    destinations = repository.list_destinations()
    assert ids(filter_destinations(destinations, DestinationFilter(category=DestinationCategory.POPULAR))) == [1, 2, 4, 5, 6, 8]
    assert ids(filter_destinations(destinations, DestinationFilter(category=DestinationCategory.BUDGET))) == [1, 4, 7, 8]
    assert ids(filter_destinations(destinations, DestinationFilter(category=DestinationCategory.LUXURY))) == [2, 3, 5, 6]
    assert len(filter_destinations(destinations, DestinationFilter())) == 8


def test_destination_search_and_category_combine(repository):
    destinations = repository.list_destinations()
    assert ids(filter_destinations(destinations, DestinationFilter(search_text="temple"))) == [4, 5, 8]
    both = DestinationFilter(search_text="temple", category=DestinationCategory.BUDGET)
    assert ids(filter_destinations(destinations, both)) == [4, 8]
