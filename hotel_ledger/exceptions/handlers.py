import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .custom import BookingError, BookingErrorKind

logger = logging.getLogger(__name__)

STATUS_BY_KIND: dict[BookingErrorKind, int] = {
    BookingErrorKind.invalid_input: 400,
    BookingErrorKind.not_found: 404,
    BookingErrorKind.room_unavailable: 409,
    BookingErrorKind.insufficient_balance: 402,
}


async def booking_error_handler(_request: Request, exc: BookingError) -> JSONResponse:
    logger.warning("Booking error: %s (kind=%s)", exc.message, exc.kind)
    return JSONResponse(
        status_code=STATUS_BY_KIND[exc.kind],
        content={"detail": exc.message, "kind": exc.kind},
    )


def _describe_validation_error(error: dict) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    message = error.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


async def request_validation_error_handler(
    _request: Request, exc: RequestValidationError,
) -> JSONResponse:
    message = "; ".join(_describe_validation_error(e) for e in exc.errors())
    logger.warning("Request validation error: %s", message)
    return JSONResponse(
        status_code=STATUS_BY_KIND[BookingErrorKind.invalid_input],
        content={"detail": message, "kind": BookingErrorKind.invalid_input},
    )
