"""Plain-text listings of rooms, users and bookings, latest first."""

from hotel_ledger.ledger import BookingLedger
from hotel_ledger.schemas.ledger import Booking, Room, User
from hotel_ledger.store import EntityStore


def format_room(room: Room) -> str:
    return f"Room {room.room_number} | {room.room_type} | price {room.price_per_night}"


def format_user(user: User) -> str:
    return f"User {user.user_id} | balance {user.balance}"


def format_booking(booking: Booking) -> str:
    return (
        f"Booking room {booking.room_number} "
        f"({booking.room_type}, price {booking.price_per_night}) "
        f"| user {booking.user_id} (balance at booking {booking.balance_before_booking}) "
        f"| {booking.check_in.isoformat()} -> {booking.check_out.isoformat()} "
        f"| total {booking.total_price}"
    )


def format_rooms(rooms: list[Room]) -> list[str]:
    return [format_room(r) for r in reversed(rooms)]


def format_users(users: list[User]) -> list[str]:
    return [format_user(u) for u in reversed(users)]


def format_bookings(bookings: list[Booking]) -> list[str]:
    return [format_booking(b) for b in reversed(bookings)]


def build_report(store: EntityStore, ledger: BookingLedger) -> str:
    lines = ["Rooms (latest -> oldest):"]
    lines.extend(format_rooms(store.all_rooms()))
    lines.append("Bookings (latest -> oldest):")
    lines.extend(format_bookings(ledger.all()))
    lines.append("Users (latest -> oldest):")
    lines.extend(format_users(store.all_users()))
    return "\n".join(lines)
