from datetime import date
from typing import Optional

from fastapi import Depends, Header

from tripdesk.config import settings
from tripdesk.db.seed import seed_catalog
from tripdesk.db.session import SessionLocal
from tripdesk.repositories.base import CatalogRepository
from tripdesk.repositories.memory import InMemoryRepository
from tripdesk.repositories.sql import SqlRepository
from tripdesk.services.booking_service import BookingService
from tripdesk.services.identity_service import Identity, identity_from_headers
from tripdesk.services.query_service import QueryService

MEMORY_REPOSITORY = None

def get_memory_repository() -> InMemoryRepository:
    global MEMORY_REPOSITORY
    if MEMORY_REPOSITORY is None:
        MEMORY_REPOSITORY = InMemoryRepository()
        if settings.SEED_CATALOG:
            seed_catalog(MEMORY_REPOSITORY)
    return MEMORY_REPOSITORY

def get_repository():
    if settings.STORAGE_BACKEND == "sql":
        db = SessionLocal()
        try:
            yield SqlRepository(db)
        finally:
            db.close()
    else:
        yield get_memory_repository()

def get_query_service(repository: CatalogRepository = Depends(get_repository)) -> QueryService:
    return QueryService(repository)

def get_booking_service(repository: CatalogRepository = Depends(get_repository)) -> BookingService:
    return BookingService(repository)

def get_current_identity(
    x_user_id: Optional[str] = Header(None),
    x_user_email: Optional[str] = Header(None),
    x_user_name: Optional[str] = Header(None),
) -> Optional[Identity]:
    return identity_from_headers(x_user_id, x_user_email, x_user_name)

def get_today() -> date:
    return date.today()
