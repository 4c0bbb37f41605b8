import logging
import math
from datetime import date, datetime, timezone
from enum import Enum
from typing import Callable, Optional, Union

from tripdesk.repositories.base import CatalogRepository
from tripdesk.schemas.booking import (
    PAYMENT_CONFIRMED,
    Booking,
    BookingCreate,
    BookingRequest,
    BookingType,
    check_contact_email,
    check_contact_name,
    check_contact_phone,
)
from tripdesk.schemas.catalog import Flight, Hotel
from tripdesk.services.identity_service import Identity
from tripdesk.services.query_service import QueryService

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60


class Unauthenticated(Exception):
    """Booking attempted with nobody signed in."""


class BookingRejected(Exception):
    def __init__(self, reason: str, field: Optional[str] = None):
        super().__init__(reason)
        self.reason = reason
        self.field = field


class ItemNotFound(BookingRejected):
    pass


class InvalidBooking(BookingRejected):
    pass


class BookingState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    REJECTED = "rejected"
    PRICE_COMPUTED = "price_computed"
    PERSISTED = "persisted"


def count_nights(start: Union[date, datetime], end: Union[date, datetime]) -> int:
    """Whole nights between check-in and check-out, rounding part days up."""
    return math.ceil((end - start).total_seconds() / SECONDS_PER_DAY)


class BookingAttempt:
    def __init__(self, request: BookingRequest, identity: Optional[Identity]):
        self.request = request
        self.identity = identity
        self.state = BookingState.IDLE
        self.item: Optional[Union[Hotel, Flight]] = None
        self.total_price: Optional[int] = None
        self.booking: Optional[Booking] = None
        self.reason: Optional[str] = None

    def move_to(self, state: BookingState):
        logger.info(f"Booking attempt {self.request.booking_type.value}/{self.request.item_id}: {self.state.value} -> {state.value}")
        self.state = state

    def reject(self, error: BookingRejected):
        self.reason = error.reason
        self.move_to(BookingState.REJECTED)


class BookingService:
    def __init__(self, repository: CatalogRepository, clock: Optional[Callable[[], datetime]] = None):
        self.repository = repository
        self.query_service = QueryService(repository)
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    def submit(self, request: BookingRequest, identity: Optional[Identity]) -> Booking:
        return self.process(BookingAttempt(request, identity))

    def process(self, attempt: BookingAttempt) -> Booking:
        if attempt.identity is None:
            raise Unauthenticated("Please log in to book hotels or flights.")

        attempt.move_to(BookingState.VALIDATING)
        try:
            attempt.item = self._resolve(attempt.request)
            contact = self._resolve_contact(attempt.request, attempt.identity)
            attempt.total_price = self._price(attempt.request, attempt.item)
        except BookingRejected as e:
            logger.warning(f"Booking rejected: {e.reason}")
            attempt.reject(e)
            raise

        attempt.move_to(BookingState.PRICE_COMPUTED)
        self._warn_on_ignored_fields(attempt)

        request = attempt.request
        record = BookingCreate(
            user_id=attempt.identity.uid,
            booking_type=request.booking_type,
            item_id=request.item_id,
            booking_date=self.clock(),
            start_date=request.start_date,
            end_date=request.end_date,
            number_of_guests=request.number_of_guests or 1,
            total_price=attempt.total_price,
            payment_status=PAYMENT_CONFIRMED,
            **contact,
        )
        attempt.booking = self.repository.create_booking(record)
        attempt.move_to(BookingState.PERSISTED)
        logger.info(f"Booking {attempt.booking.id} stored for user {attempt.booking.user_id}, total {attempt.booking.total_price}")
        return attempt.booking

    def _resolve(self, request: BookingRequest) -> Union[Hotel, Flight]:
        if request.booking_type == BookingType.HOTEL:
            item = self.query_service.get_hotel(request.item_id)
        else:
            item = self.query_service.get_flight(request.item_id)
        if item is None:
            raise ItemNotFound(f"{request.booking_type.value} {request.item_id} not found", field="itemId")
        return item

    def _resolve_contact(self, request: BookingRequest, identity: Identity) -> dict:
        fields = (
            ("contact_name", "contactName", request.contact_name or identity.display_name, check_contact_name),
            ("contact_email", "contactEmail", request.contact_email or identity.email, check_contact_email),
            ("contact_phone", "contactPhone", request.contact_phone, check_contact_phone),
        )
        contact = {}
        for name, wire_name, value, check in fields:
            if not value:
                raise InvalidBooking(f"{wire_name} is required", field=wire_name)
            try:
                contact[name] = check(value)
            except ValueError as e:
                raise InvalidBooking(str(e), field=wire_name) from e
        return contact

    def _price(self, request: BookingRequest, item: Union[Hotel, Flight]) -> int:
        if request.booking_type == BookingType.HOTEL:
            if request.end_date is None:
                raise InvalidBooking("Please select a check-out date", field="endDate")
            nights = count_nights(request.start_date, request.end_date)
            if nights < 1:
                raise InvalidBooking("Check-out date must be after the check-in date", field="endDate")
            return item.price_per_night * nights

        # One-way fare, the same for any number of guests
        if request.end_date is not None:
            raise InvalidBooking("Flight bookings are one-way and take no end date", field="endDate")
        return item.price

    def _warn_on_ignored_fields(self, attempt: BookingAttempt):
        request = attempt.request
        if request.total_price is not None and request.total_price != attempt.total_price:
            logger.warning(f"Client sent totalPrice={request.total_price}, using computed {attempt.total_price}")
        if request.payment_status is not None and request.payment_status != PAYMENT_CONFIRMED:
            logger.warning(f"Client sent paymentStatus={request.payment_status!r}, ignoring")
        if request.user_id is not None and str(request.user_id) != attempt.identity.uid:
            logger.warning(f"Client sent userId={request.user_id}, booking for identity {attempt.identity.uid}")
