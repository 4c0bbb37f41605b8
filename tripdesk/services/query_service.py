from typing import List, Optional

from tripdesk.repositories.base import CatalogRepository
from tripdesk.schemas.booking import Booking
from tripdesk.schemas.catalog import Destination, Flight, Hotel, User


class QueryService:
    """Read-only catalog lookups. Missing records come back as None."""

    def __init__(self, repository: CatalogRepository):
        self.repository = repository

    def list_destinations(self) -> List[Destination]:
        return self.repository.list_destinations()

    def get_destination(self, destination_id: int) -> Optional[Destination]:
        return self.repository.get_destination(destination_id)

    def list_hotels(self, category: Optional[str] = None) -> List[Hotel]:
        if category:
            return self.get_hotels_by_category(category)
        return self.repository.list_hotels()

    def get_hotel(self, hotel_id: int) -> Optional[Hotel]:
        return self.repository.get_hotel(hotel_id)

    def get_hotels_by_category(self, category: str) -> List[Hotel]:
        wanted = category.lower()
        return [
            hotel for hotel in self.repository.list_hotels()
            if any(tag.lower() == wanted for tag in hotel.tags)
        ]

    def get_hotels_for_destination(self, destination_id: int) -> Optional[List[Hotel]]:
        """Hotels whose location mentions the destination's name, or None for an unknown destination."""
        destination = self.repository.get_destination(destination_id)
        if destination is None:
            return None
        name = destination.name.lower()
        return [hotel for hotel in self.repository.list_hotels() if name in hotel.location.lower()]

    def list_flights(self) -> List[Flight]:
        return self.repository.list_flights()

    def get_flight(self, flight_id: int) -> Optional[Flight]:
        return self.repository.get_flight(flight_id)

    def get_user(self, user_id: int) -> Optional[User]:
        return self.repository.get_user(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self.repository.get_user_by_username(username)

    def get_booking(self, booking_id: int) -> Optional[Booking]:
        return self.repository.get_booking(booking_id)

    def list_bookings_for_user(self, user_id: str) -> List[Booking]:
        return self.repository.list_bookings_for_user(user_id)
