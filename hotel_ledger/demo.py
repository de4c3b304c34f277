"""Replay the reference scenario and print the resulting report.

Run with ``python -m hotel_ledger.demo``.
"""

import sys
from datetime import date

from hotel_ledger.config import Settings, configure_logging
from hotel_ledger.exceptions.custom import BookingError
from hotel_ledger.ledger import BookingLedger
from hotel_ledger.mappers.dates import get_timezone
from hotel_ledger.mappers.report import build_report
from hotel_ledger.schemas.ledger import RoomType
from hotel_ledger.services.booking_engine import BookingEngine
from hotel_ledger.store import EntityStore

# (user_id, room_number, check_in, check_out)
DEMO_ATTEMPTS: list[tuple[int, int, date, date]] = [
    (1, 2, date(2026, 6, 30), date(2026, 7, 7)),
    (1, 2, date(2026, 7, 7), date(2026, 6, 30)),
    (1, 1, date(2026, 7, 7), date(2026, 7, 8)),
    (2, 1, date(2026, 7, 7), date(2026, 7, 9)),
    (2, 3, date(2026, 7, 7), date(2026, 7, 8)),
]


def seed_demo(store: EntityStore, engine: BookingEngine) -> list[str]:
    """Load the demo rooms and users, attempt the demo bookings.

    Returns one outcome line per booking attempt.
    """
    store.upsert_room(1, RoomType.STANDARD, 1000)
    store.upsert_room(2, RoomType.JUNIOR_SUITE, 2000)
    store.upsert_room(3, RoomType.MASTER_SUITE, 3000)

    store.upsert_user(1, 5000)
    store.upsert_user(2, 10000)

    outcomes: list[str] = []
    for user_id, room_number, check_in, check_out in DEMO_ATTEMPTS:
        try:
            engine.book_room(user_id, room_number, check_in, check_out)
            outcomes.append("Booking succeeded")
        except BookingError as exc:
            outcomes.append(f"Booking failed: {exc.message}")

    store.upsert_room(1, RoomType.MASTER_SUITE, 10000)
    return outcomes


def main() -> None:
    settings = Settings()
    configure_logging(settings.log_level, stream=sys.stderr)

    store = EntityStore()
    ledger = BookingLedger()
    engine = BookingEngine(store, ledger, get_timezone(settings.booking_timezone))

    for line in seed_demo(store, engine):
        print(line)
    print(build_report(store, ledger))


if __name__ == "__main__":
    main()
