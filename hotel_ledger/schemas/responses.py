from pydantic import BaseModel

from hotel_ledger.exceptions.custom import BookingErrorKind


class ErrorResponse(BaseModel):
    detail: str
    kind: BookingErrorKind


ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid input"},
    402: {"model": ErrorResponse, "description": "Insufficient balance"},
    404: {"model": ErrorResponse, "description": "Room or user not found"},
    409: {"model": ErrorResponse, "description": "Room unavailable"},
}
