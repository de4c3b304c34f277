from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from hotel_ledger.dependencies import BookingEngineDep, LedgerDep, StoreDep
from hotel_ledger.mappers.report import build_report
from hotel_ledger.schemas.ledger import Booking
from hotel_ledger.schemas.requests import BookingRequest
from hotel_ledger.schemas.responses import ERROR_RESPONSES

router = APIRouter()


@router.post("/bookings", response_model=Booking, status_code=201, responses=ERROR_RESPONSES)
def book_room(request: BookingRequest, engine: BookingEngineDep) -> Booking:
    return engine.book_room(
        request.user_id, request.room_number, request.check_in, request.check_out,
    )


@router.get("/bookings", response_model=list[Booking])
def list_bookings(ledger: LedgerDep) -> list[Booking]:
    return list(reversed(ledger.all()))


@router.get("/report", response_class=PlainTextResponse)
def report(store: StoreDep, ledger: LedgerDep) -> str:
    return build_report(store, ledger)
