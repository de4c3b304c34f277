import logging
from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from hotel_ledger.exceptions.custom import BookingError
from hotel_ledger.ledger import BookingLedger
from hotel_ledger.mappers.dates import nights_between, ranges_overlap, to_calendar_date
from hotel_ledger.schemas.ledger import Booking
from hotel_ledger.store import EntityStore

logger = logging.getLogger(__name__)


class BookingEngine:
    def __init__(
        self, store: EntityStore, ledger: BookingLedger, tz: ZoneInfo | None = None,
    ) -> None:
        self._store = store
        self._ledger = ledger
        self._tz = tz or ZoneInfo("UTC")

    def book_room(
        self,
        user_id: int,
        room_number: int,
        check_in: date | datetime | None,
        check_out: date | datetime | None,
    ) -> Booking:
        """Validate, price, debit the user and record the booking.

        Raises BookingError on the first failed check; nothing is mutated
        unless every check passes.
        """
        try:
            booking = self._book(user_id, room_number, check_in, check_out)
        except BookingError as exc:
            logger.warning(
                "Booking rejected for user %s room %s: %s (%s)",
                user_id, room_number, exc.message, exc.kind,
            )
            raise
        logger.info(
            "Booked room %s for user %s: %s -> %s, total %s",
            booking.room_number, booking.user_id,
            booking.check_in, booking.check_out, booking.total_price,
        )
        return booking

    def _book(
        self,
        user_id: int,
        room_number: int,
        check_in: date | datetime | None,
        check_out: date | datetime | None,
    ) -> Booking:
        if check_in is None:
            raise BookingError.invalid_input("Check-in date is required")
        if check_out is None:
            raise BookingError.invalid_input("Check-out date is required")

        with self._store.lock:
            user = self._store.find_user(user_id)
            if user is None:
                raise BookingError.not_found("User not found")
            room = self._store.find_room(room_number)
            if room is None:
                raise BookingError.not_found("Room not found")

            check_in_date = to_calendar_date(check_in, self._tz)
            check_out_date = to_calendar_date(check_out, self._tz)
            if not check_in_date < check_out_date:
                raise BookingError.invalid_input("Check-in date must be before check-out date")

            self._ensure_available(room_number, check_in_date, check_out_date)

            total_price = nights_between(check_in_date, check_out_date) * room.price_per_night
            if user.balance < total_price:
                raise BookingError.insufficient_balance(
                    "User balance is insufficient for this booking"
                )

            balance_before = user.balance
            user.balance = balance_before - total_price

            booking = Booking(
                room_number=room.room_number,
                room_type=room.room_type,
                price_per_night=room.price_per_night,
                user_id=user.user_id,
                balance_before_booking=balance_before,
                check_in=check_in_date,
                check_out=check_out_date,
                total_price=total_price,
                created_at=datetime.now(timezone.utc),
            )
            self._ledger.append(booking)
            return booking

    def _ensure_available(self, room_number: int, check_in: date, check_out: date) -> None:
        for existing in self._ledger.bookings_for_room(room_number):
            if ranges_overlap(check_in, check_out, existing.check_in, existing.check_out):
                raise BookingError.room_unavailable(
                    "Room is not available for the selected dates"
                )
