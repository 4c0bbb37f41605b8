# tripdesk/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from tripdesk.config import settings
from tripdesk.db.seed import seed_catalog
from tripdesk.db.session import SessionLocal, engine
from tripdesk.models.base import Base
from tripdesk.repositories.base import StoreUnavailable
from tripdesk.repositories.sql import SqlRepository
from tripdesk.routes import booking, catalog, deals, users
from tripdesk.routes.deps import get_memory_repository

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.STORAGE_BACKEND == "sql":
        Base.metadata.create_all(bind=engine)
        if settings.SEED_CATALOG:
            db = SessionLocal()
            try:
                seed_catalog(SqlRepository(db))
            finally:
                db.close()
    else:
        get_memory_repository()
    logger.info(f"TripDesk started with {settings.STORAGE_BACKEND} storage")
    yield


app = FastAPI(
    title="TripDesk",
    version="1.0.0",
    description="Destinations, hotels and flights with filtering and booking",
    lifespan=lifespan,
)

# Mount routes
app.include_router(catalog.router, tags=["Catalog"])
app.include_router(booking.router, tags=["Booking"])
app.include_router(users.router, tags=["Users"])
app.include_router(deals.router, tags=["Deals"])


@app.exception_handler(StoreUnavailable)
async def store_unavailable_handler(request: Request, exc: StoreUnavailable):
    logger.error(f"Store unavailable on {request.url.path}: {exc}")
    return JSONResponse(status_code=503, content={"detail": "Service temporarily unavailable. Please try again."})


@app.get("/")
def root():
    return {"message": "TripDesk is running"}
