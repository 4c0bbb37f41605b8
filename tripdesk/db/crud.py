from sqlalchemy import func
from sqlalchemy.orm import Session

from tripdesk.models.booking import BookingModel
from tripdesk.models.catalog import DestinationModel, FlightModel, HotelModel
from tripdesk.models.user import UserModel

def create_row(db: Session, model, data: dict):
    row = model(**data)
    db.add(row)
    db.commit()
    db.refresh(row)
    return row

def get_row(db: Session, model, row_id: int):
    return db.get(model, row_id)

def list_rows(db: Session, model):
    return db.query(model).order_by(model.id).all()

def count_rows(db: Session, model) -> int:
    return db.query(func.count(model.id)).scalar()

def create_destination(db: Session, data: dict) -> DestinationModel:
    return create_row(db, DestinationModel, data)

def create_hotel(db: Session, data: dict) -> HotelModel:
    return create_row(db, HotelModel, data)

def create_flight(db: Session, data: dict) -> FlightModel:
    return create_row(db, FlightModel, data)

def create_user(db: Session, data: dict) -> UserModel:
    return create_row(db, UserModel, data)

def create_booking(db: Session, data: dict) -> BookingModel:
    return create_row(db, BookingModel, data)

def get_user_by_username(db: Session, username: str):
    return (
        db.query(UserModel)
        .filter(UserModel.username == username)
        .order_by(UserModel.id)
        .first()
    )

def list_bookings_for_user(db: Session, user_id: str):
    return (
        db.query(BookingModel)
        .filter(BookingModel.user_id == user_id)
        .order_by(BookingModel.id)
        .all()
    )
