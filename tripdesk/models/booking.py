from sqlalchemy import Column, Integer, String, Date, DateTime
from datetime import datetime, timezone

from tripdesk.models.base import Base

class BookingModel(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    booking_type = Column(String, nullable=False)  # "hotel" or "flight"
    item_id = Column(Integer, nullable=False)
    booking_date = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    start_date = Column(Date, nullable=False)
    end_date = Column(Date)  # null for one-way flights
    number_of_guests = Column(Integer)
    total_price = Column(Integer, nullable=False)
    payment_status = Column(String, default="confirmed")
    contact_name = Column(String, nullable=False)
    contact_email = Column(String, nullable=False)
    contact_phone = Column(String, nullable=False)
