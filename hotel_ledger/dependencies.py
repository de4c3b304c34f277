from typing import Annotated

from fastapi import Depends, Request

from hotel_ledger.ledger import BookingLedger
from hotel_ledger.services.booking_engine import BookingEngine
from hotel_ledger.store import EntityStore


def get_store(request: Request) -> EntityStore:
    return request.app.state.store


def get_ledger(request: Request) -> BookingLedger:
    return request.app.state.ledger


def get_booking_engine(request: Request) -> BookingEngine:
    return request.app.state.booking_engine


StoreDep = Annotated[EntityStore, Depends(get_store)]
LedgerDep = Annotated[BookingLedger, Depends(get_ledger)]
BookingEngineDep = Annotated[BookingEngine, Depends(get_booking_engine)]
