from __future__ import annotations

from collections.abc import Iterator

from hotel_ledger.schemas.ledger import Booking


class BookingLedger:
    """Append-only record of bookings, oldest first."""

    def __init__(self) -> None:
        self._bookings: list[Booking] = []
        self._by_room: dict[int, list[Booking]] = {}

    def __len__(self) -> int:
        return len(self._bookings)

    def append(self, booking: Booking) -> None:
        self._bookings.append(booking)
        self._by_room.setdefault(booking.room_number, []).append(booking)

    def bookings_for_room(self, room_number: int) -> Iterator[Booking]:
        """Fresh iterator over one room's bookings; call again to restart."""
        return iter(self._by_room.get(room_number, ()))

    def all(self) -> list[Booking]:
        return list(self._bookings)
