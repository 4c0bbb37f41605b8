from typing import Dict, List, Optional

from tripdesk.repositories.base import CatalogRepository
from tripdesk.schemas.booking import Booking, BookingCreate
from tripdesk.schemas.catalog import (
    Destination,
    DestinationCreate,
    Flight,
    FlightCreate,
    Hotel,
    HotelCreate,
    User,
    UserCreate,
)


class InMemoryRepository(CatalogRepository):
    """Dict-backed store for one process. Id counters are not locked."""

    def __init__(self):
        self._destinations: Dict[int, Destination] = {}
        self._hotels: Dict[int, Hotel] = {}
        self._flights: Dict[int, Flight] = {}
        self._users: Dict[int, User] = {}
        self._bookings: Dict[int, Booking] = {}

        self._next_ids = {
            "destinations": 1,
            "hotels": 1,
            "flights": 1,
            "users": 1,
            "bookings": 1,
        }

    def _next_id(self, collection: str) -> int:
        new_id = self._next_ids[collection]
        self._next_ids[collection] = new_id + 1
        return new_id

    # Destinations
    def create_destination(self, record: DestinationCreate) -> Destination:
        destination = Destination(id=self._next_id("destinations"), **record.model_dump())
        self._destinations[destination.id] = destination
        return destination

    def get_destination(self, destination_id: int) -> Optional[Destination]:
        return self._destinations.get(destination_id)

    def list_destinations(self) -> List[Destination]:
        return list(self._destinations.values())

    # Hotels
    def create_hotel(self, record: HotelCreate) -> Hotel:
        hotel = Hotel(id=self._next_id("hotels"), **record.model_dump())
        self._hotels[hotel.id] = hotel
        return hotel

    def get_hotel(self, hotel_id: int) -> Optional[Hotel]:
        return self._hotels.get(hotel_id)

    def list_hotels(self) -> List[Hotel]:
        return list(self._hotels.values())

    # Flights
    def create_flight(self, record: FlightCreate) -> Flight:
        flight = Flight(id=self._next_id("flights"), **record.model_dump())
        self._flights[flight.id] = flight
        return flight

    def get_flight(self, flight_id: int) -> Optional[Flight]:
        return self._flights.get(flight_id)

    def list_flights(self) -> List[Flight]:
        return list(self._flights.values())

    # Users
    def create_user(self, record: UserCreate) -> User:
        user = User(id=self._next_id("users"), **record.model_dump())
        self._users[user.id] = user
        return user

    def get_user(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return next(
            (user for user in self._users.values() if user.username == username),
            None,
        )

    # Bookings
    def create_booking(self, record: BookingCreate) -> Booking:
        booking = Booking(id=self._next_id("bookings"), **record.model_dump())
        self._bookings[booking.id] = booking
        return booking

    def get_booking(self, booking_id: int) -> Optional[Booking]:
        return self._bookings.get(booking_id)

    def list_bookings(self) -> List[Booking]:
        return list(self._bookings.values())

    def list_bookings_for_user(self, user_id: str) -> List[Booking]:
        return [booking for booking in self._bookings.values() if booking.user_id == user_id]

    def count_bookings(self) -> int:
        return len(self._bookings)
