import logging
from contextlib import contextmanager
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tripdesk.db import crud
from tripdesk.models.booking import BookingModel
from tripdesk.models.catalog import DestinationModel, FlightModel, HotelModel
from tripdesk.models.user import UserModel
from tripdesk.repositories.base import CatalogRepository, StoreUnavailable
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

logger = logging.getLogger(__name__)


class SqlRepository(CatalogRepository):
    """CatalogRepository over a SQLAlchemy session. Ids come from the database."""

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _guard(self, action: str):
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Database error while trying to {action}: {e}")
            raise StoreUnavailable(f"Could not {action}") from e

    # Destinations
    def create_destination(self, record: DestinationCreate) -> Destination:
        with self._guard("create destination"):
            row = crud.create_destination(self.db, record.model_dump())
            return Destination.model_validate(row)

    def get_destination(self, destination_id: int) -> Optional[Destination]:
        with self._guard("load destination"):
            row = crud.get_row(self.db, DestinationModel, destination_id)
            return Destination.model_validate(row) if row else None

    def list_destinations(self) -> List[Destination]:
        with self._guard("list destinations"):
            return [Destination.model_validate(row) for row in crud.list_rows(self.db, DestinationModel)]

    # Hotels
    def create_hotel(self, record: HotelCreate) -> Hotel:
        with self._guard("create hotel"):
            row = crud.create_hotel(self.db, record.model_dump())
            return Hotel.model_validate(row)

    def get_hotel(self, hotel_id: int) -> Optional[Hotel]:
        with self._guard("load hotel"):
            row = crud.get_row(self.db, HotelModel, hotel_id)
            return Hotel.model_validate(row) if row else None

    def list_hotels(self) -> List[Hotel]:
        with self._guard("list hotels"):
            return [Hotel.model_validate(row) for row in crud.list_rows(self.db, HotelModel)]

    # Flights
    def create_flight(self, record: FlightCreate) -> Flight:
        with self._guard("create flight"):
            row = crud.create_flight(self.db, record.model_dump())
            return Flight.model_validate(row)

    def get_flight(self, flight_id: int) -> Optional[Flight]:
        with self._guard("load flight"):
            row = crud.get_row(self.db, FlightModel, flight_id)
            return Flight.model_validate(row) if row else None

    def list_flights(self) -> List[Flight]:
        with self._guard("list flights"):
            return [Flight.model_validate(row) for row in crud.list_rows(self.db, FlightModel)]

    # Users
    def create_user(self, record: UserCreate) -> User:
        with self._guard("create user"):
            row = crud.create_user(self.db, record.model_dump())
            return User.model_validate(row)

    def get_user(self, user_id: int) -> Optional[User]:
        with self._guard("load user"):
            row = crud.get_row(self.db, UserModel, user_id)
            return User.model_validate(row) if row else None

    def get_user_by_username(self, username: str) -> Optional[User]:
        with self._guard("look up user"):
            row = crud.get_user_by_username(self.db, username)
            return User.model_validate(row) if row else None

    # Bookings
    def create_booking(self, record: BookingCreate) -> Booking:
        data = record.model_dump()
        data["booking_type"] = record.booking_type.value
        with self._guard("create booking"):
            row = crud.create_booking(self.db, data)
            return Booking.model_validate(row)

    def get_booking(self, booking_id: int) -> Optional[Booking]:
        with self._guard("load booking"):
            row = crud.get_row(self.db, BookingModel, booking_id)
            return Booking.model_validate(row) if row else None

    def list_bookings(self) -> List[Booking]:
        with self._guard("list bookings"):
            return [Booking.model_validate(row) for row in crud.list_rows(self.db, BookingModel)]

    def list_bookings_for_user(self, user_id: str) -> List[Booking]:
        with self._guard("list bookings"):
            return [Booking.model_validate(row) for row in crud.list_bookings_for_user(self.db, user_id)]

    def count_bookings(self) -> int:
        with self._guard("count bookings"):
            return crud.count_rows(self.db, BookingModel)
