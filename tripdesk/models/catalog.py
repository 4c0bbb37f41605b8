from sqlalchemy import Column, Integer, String, Float, JSON

from tripdesk.models.base import Base

class DestinationModel(Base):
    __tablename__ = "destinations"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=False)
    image_url = Column(String, nullable=False)
    rating = Column(Float, nullable=False)
    review_count = Column(Integer, nullable=False)
    starting_price = Column(Integer, nullable=False)

class HotelModel(Base):
    __tablename__ = "hotels"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=False)
    location = Column(String, nullable=False)
    image_url = Column(String, nullable=False)
    rating = Column(Float, nullable=False)
    price_per_night = Column(Integer, nullable=False)
    badge = Column(String)
    amenities = Column(JSON, nullable=False, default=list)
    tags = Column(JSON, nullable=False, default=list)

class FlightModel(Base):
    __tablename__ = "flights"

    id = Column(Integer, primary_key=True, index=True)
    airline = Column(String, nullable=False)
    airline_logo = Column(String, nullable=False)
    status = Column(String, nullable=False)
    departure_code = Column(String(3), nullable=False)
    departure_city = Column(String, nullable=False)
    arrival_code = Column(String(3), nullable=False)
    arrival_city = Column(String, nullable=False)
    duration = Column(String, nullable=False)
    stops = Column(Integer, nullable=False)
    price = Column(Integer, nullable=False)
    departure_time = Column(String, nullable=False)
    arrival_time = Column(String, nullable=False)
    date = Column(String, nullable=False)
