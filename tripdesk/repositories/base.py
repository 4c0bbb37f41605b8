from abc import ABC, abstractmethod
from typing import List, Optional

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


class StoreUnavailable(Exception):
    """The backing store could not be reached. Callers may retry."""


class CatalogRepository(ABC):
    """Append-only keyed storage. Ids start at 1; unknown ids look up as None."""

    # Destinations
    @abstractmethod
    def create_destination(self, record: DestinationCreate) -> Destination: ...

    @abstractmethod
    def get_destination(self, destination_id: int) -> Optional[Destination]: ...

    @abstractmethod
    def list_destinations(self) -> List[Destination]: ...

    # Hotels
    @abstractmethod
    def create_hotel(self, record: HotelCreate) -> Hotel: ...

    @abstractmethod
    def get_hotel(self, hotel_id: int) -> Optional[Hotel]: ...

    @abstractmethod
    def list_hotels(self) -> List[Hotel]: ...

    # Flights
    @abstractmethod
    def create_flight(self, record: FlightCreate) -> Flight: ...

    @abstractmethod
    def get_flight(self, flight_id: int) -> Optional[Flight]: ...

    @abstractmethod
    def list_flights(self) -> List[Flight]: ...

    # Users
    @abstractmethod
    def create_user(self, record: UserCreate) -> User: ...

    @abstractmethod
    def get_user(self, user_id: int) -> Optional[User]: ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[User]: ...

    # Bookings
    @abstractmethod
    def create_booking(self, record: BookingCreate) -> Booking: ...

    @abstractmethod
    def get_booking(self, booking_id: int) -> Optional[Booking]: ...

    @abstractmethod
    def list_bookings(self) -> List[Booking]: ...

    @abstractmethod
    def list_bookings_for_user(self, user_id: str) -> List[Booking]: ...

    def count_bookings(self) -> int:
        return len(self.list_bookings())

    def is_catalog_empty(self) -> bool:
        return not (self.list_destinations() or self.list_hotels() or self.list_flights())
