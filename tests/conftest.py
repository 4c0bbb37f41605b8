import os
import sys
from datetime import date

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from tripdesk.db.seed import seed_catalog
from tripdesk.main import app
from tripdesk.models.base import Base
from tripdesk.repositories.memory import InMemoryRepository
from tripdesk.repositories.sql import SqlRepository
from tripdesk.routes.deps import get_repository, get_today
from tripdesk.schemas.booking import BookingRequest, BookingType
from tripdesk.services.identity_service import Identity

AUTH_HEADERS = {
    "X-User-Id": "uid-asha",
    "X-User-Email": "asha@example.com",
    "X-User-Name": "Asha Verma",
}


@pytest.fixture
def repository():
    repo = InMemoryRepository()
    seed_catalog(repo)
    return repo


@pytest.fixture
def sql_repository():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    db = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    try:
        yield SqlRepository(db)
    finally:
        db.close()
        engine.dispose()


@pytest.fixture
def tableless_sql_repository():
    # Every query fails because the schema was never created
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    db = sessionmaker(bind=engine)()
    try:
        yield SqlRepository(db)
    finally:
        db.close()
        engine.dispose()


@pytest.fixture
def api_repository(repository):
    app.dependency_overrides[get_repository] = lambda: repository
    app.dependency_overrides[get_today] = lambda: date(2024, 1, 1)
    yield repository
    app.dependency_overrides.clear()


@pytest.fixture
def identity():
    return Identity(uid="uid-asha", email="asha@example.com", display_name="Asha Verma")


def hotel_request(**overrides) -> BookingRequest:
    data = {
        "booking_type": BookingType.HOTEL,
        "item_id": 6,
        "start_date": date(2024, 1, 1),
        "end_date": date(2024, 1, 4),
        "number_of_guests": 2,
        "contact_name": "Asha Verma",
        "contact_email": "asha@example.com",
        "contact_phone": "+91 98765 43210",
    }
    data.update(overrides)
    return BookingRequest(**data)


def flight_request(**overrides) -> BookingRequest:
    data = {
        "booking_type": BookingType.FLIGHT,
        "item_id": 1,
        "start_date": date(2024, 2, 10),
        "contact_name": "Asha Verma",
        "contact_email": "asha@example.com",
        "contact_phone": "+91 98765 43210",
    }
    data.update(overrides)
    return BookingRequest(**data)
