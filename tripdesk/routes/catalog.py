from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from tripdesk.routes.deps import get_query_service
from tripdesk.schemas.catalog import Destination, Flight, Hotel
from tripdesk.schemas.filters import (
    DestinationCategory,
    DestinationFilter,
    FlightFilter,
    FlightSort,
    HotelFilter,
    HotelSort,
    PriceRange,
)
from tripdesk.services.filter_engine import filter_destinations, filter_flights, filter_hotels
from tripdesk.services.query_service import QueryService
import logging

router = APIRouter()
logger = logging.getLogger(__name__)

def build_price_range(min_price: Optional[int], max_price: Optional[int]) -> Optional[PriceRange]:
    if min_price is None and max_price is None:
        return None
    return PriceRange(low=min_price or 0, high=max_price)

# Destinations

@router.get("/destinations", response_model=List[Destination])
def list_destinations(queries: QueryService = Depends(get_query_service)):
    return queries.list_destinations()

@router.get("/destinations/search", response_model=List[Destination])
def search_destinations(
    search_text: str = Query("", alias="searchText"),
    category: DestinationCategory = Query(DestinationCategory.ALL),
    queries: QueryService = Depends(get_query_service),
):
    destination_filter = DestinationFilter(search_text=search_text, category=category)
    return filter_destinations(queries.list_destinations(), destination_filter)

@router.get("/destinations/{destination_id}", response_model=Destination)
def get_destination(destination_id: int, queries: QueryService = Depends(get_query_service)):
    destination = queries.get_destination(destination_id)
    if destination is None:
        raise HTTPException(status_code=404, detail=f"Destination {destination_id} not found")
    return destination

@router.get("/destinations/{destination_id}/hotels", response_model=List[Hotel])
def get_destination_hotels(destination_id: int, queries: QueryService = Depends(get_query_service)):
    hotels = queries.get_hotels_for_destination(destination_id)
    if hotels is None:
        raise HTTPException(status_code=404, detail=f"Destination {destination_id} not found")
    return hotels

# Hotels

@router.get("/hotels", response_model=List[Hotel])
def list_hotels(category: Optional[str] = Query(None), queries: QueryService = Depends(get_query_service)):
    return queries.list_hotels(category=category)

@router.get("/hotels/search", response_model=List[Hotel])
def search_hotels(
    search_text: str = Query("", alias="searchText"),
    min_price: Optional[int] = Query(None, alias="minPrice"),
    max_price: Optional[int] = Query(None, alias="maxPrice"),
    amenities: List[str] = Query([]),
    min_rating: Optional[float] = Query(None, alias="minRating"),
    sort_by: HotelSort = Query(HotelSort.POPULARITY, alias="sortBy"),
    queries: QueryService = Depends(get_query_service),
):
    hotel_filter = HotelFilter(
        search_text=search_text,
        price_range=build_price_range(min_price, max_price),
        amenities=amenities,
        min_rating=min_rating,
        sort_by=sort_by,
    )
    return filter_hotels(queries.list_hotels(), hotel_filter)

@router.get("/hotels/{hotel_id}", response_model=Hotel)
def get_hotel(hotel_id: int, queries: QueryService = Depends(get_query_service)):
    hotel = queries.get_hotel(hotel_id)
    if hotel is None:
        logger.warning(f"Hotel {hotel_id} requested but not found")
        raise HTTPException(status_code=404, detail=f"Hotel {hotel_id} not found")
    return hotel

# Flights

@router.get("/flights", response_model=List[Flight])
def list_flights(queries: QueryService = Depends(get_query_service)):
    return queries.list_flights()

@router.get("/flights/search", response_model=List[Flight])
def search_flights(
    origin: str = Query("", alias="from"),
    destination: str = Query("", alias="to"),
    airlines: List[str] = Query([]),
    min_price: Optional[int] = Query(None, alias="minPrice"),
    max_price: Optional[int] = Query(None, alias="maxPrice"),
    departure_date: Optional[date] = Query(None, alias="departureDate"),
    sort_by: FlightSort = Query(FlightSort.DEPARTURE, alias="sortBy"),
    queries: QueryService = Depends(get_query_service),
):
    flight_filter = FlightFilter(
        origin=origin,
        destination=destination,
        airlines=airlines,
        price_range=build_price_range(min_price, max_price),
        departure_date=departure_date,
        sort_by=sort_by,
    )
    return filter_flights(queries.list_flights(), flight_filter)

@router.get("/flights/{flight_id}", response_model=Flight)
def get_flight(flight_id: int, queries: QueryService = Depends(get_query_service)):
    flight = queries.get_flight(flight_id)
    if flight is None:
        logger.warning(f"Flight {flight_id} requested but not found")
        raise HTTPException(status_code=404, detail=f"Flight {flight_id} not found")
    return flight
