import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from hotel_ledger.config import Settings, configure_logging
from hotel_ledger.demo import seed_demo
from hotel_ledger.exceptions.custom import BookingError
from hotel_ledger.exceptions.handlers import (
    booking_error_handler,
    request_validation_error_handler,
)
from hotel_ledger.ledger import BookingLedger
from hotel_ledger.mappers.dates import get_timezone
from hotel_ledger.routers.bookings import router as bookings_router
from hotel_ledger.routers.rooms import router as rooms_router
from hotel_ledger.routers.users import router as users_router
from hotel_ledger.services.booking_engine import BookingEngine
from hotel_ledger.store import EntityStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()
    configure_logging(settings.log_level)

    store = EntityStore()
    ledger = BookingLedger()
    engine = BookingEngine(store, ledger, get_timezone(settings.booking_timezone))

    app.state.store = store
    app.state.ledger = ledger
    app.state.booking_engine = engine

    if settings.seed_demo:
        outcomes = seed_demo(store, engine)
        logger.info("Seeded demo data: %s", "; ".join(outcomes))

    yield


app = FastAPI(title="Hotel Booking Ledger", lifespan=lifespan)

app.add_exception_handler(BookingError, booking_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_error_handler)

app.include_router(rooms_router)
app.include_router(users_router)
app.include_router(bookings_router)
