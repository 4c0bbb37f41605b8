from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, status

from tripdesk.repositories.base import StoreUnavailable
from tripdesk.routes.deps import get_booking_service, get_current_identity, get_query_service
from tripdesk.schemas.booking import Booking, BookingRequest
from tripdesk.services.booking_service import (
    BookingService,
    InvalidBooking,
    ItemNotFound,
    Unauthenticated,
)
from tripdesk.services.identity_service import Identity
from tripdesk.services.query_service import QueryService
import logging

router = APIRouter()
logger = logging.getLogger(__name__)

LOGIN_REQUIRED = "Please log in to book hotels or flights."

def require_identity(identity: Optional[Identity] = Depends(get_current_identity)) -> Identity:
    if identity is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=LOGIN_REQUIRED)
    return identity

@router.post("/bookings", response_model=Booking, status_code=status.HTTP_201_CREATED)
def create_booking(
    booking_request: BookingRequest = Body(...),
    identity: Identity = Depends(require_identity),
    bookings: BookingService = Depends(get_booking_service),
):
    try:
        return bookings.submit(booking_request, identity)
    except Unauthenticated as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except ItemNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.reason)
    except InvalidBooking as e:
        raise HTTPException(
            status_code=422,
            detail={"field": e.field, "message": e.reason},
        )
    except StoreUnavailable as e:
        logger.error(f"Booking not stored, store unavailable: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="There was an error processing your booking. Please try again.",
        )
    except Exception as e:
        logger.error(f"Unexpected error creating booking: {e}")
        raise HTTPException(status_code=500, detail="Failed to create booking")

@router.get("/bookings", response_model=List[Booking])
def list_my_bookings(identity: Identity = Depends(require_identity), queries: QueryService = Depends(get_query_service)):
    return queries.list_bookings_for_user(identity.uid)

@router.get("/bookings/{booking_id}", response_model=Booking)
def get_booking(
    booking_id: int,
    identity: Identity = Depends(require_identity),
    queries: QueryService = Depends(get_query_service),
):
    booking = queries.get_booking(booking_id)
    # Someone else's booking looks the same as a missing one
    if booking is None or booking.user_id != identity.uid:
        raise HTTPException(status_code=404, detail=f"Booking {booking_id} not found")
    return booking
