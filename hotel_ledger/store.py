from __future__ import annotations

import logging
import threading

from hotel_ledger.exceptions.custom import BookingError
from hotel_ledger.schemas.ledger import Room, RoomType, User

logger = logging.getLogger(__name__)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _parse_room_type(room_type: RoomType | str | None) -> RoomType:
    if room_type is None:
        raise BookingError.invalid_input("Room type is required")
    try:
        return RoomType(room_type)
    except ValueError:
        raise BookingError.invalid_input(f"Unknown room type: {room_type}") from None


class EntityStore:
    """Rooms and users keyed by id, kept in first-insertion order."""

    def __init__(self) -> None:
        self._rooms: dict[int, Room] = {}
        self._users: dict[int, User] = {}
        # Shared with BookingEngine so a booking and an upsert never interleave.
        self.lock = threading.RLock()

    def upsert_room(
        self, room_number: int, room_type: RoomType | str | None, price_per_night: int,
    ) -> Room:
        if not _is_int(room_number) or room_number <= 0:
            raise BookingError.invalid_input("Room number must be positive")
        parsed_type = _parse_room_type(room_type)
        if not _is_int(price_per_night) or price_per_night <= 0:
            raise BookingError.invalid_input("Room price must be positive")

        with self.lock:
            if room := self._rooms.get(room_number):
                room.room_type = parsed_type
                room.price_per_night = price_per_night
                logger.info("Updated room %s (%s, %s/night)", room_number, parsed_type, price_per_night)
                return room
            room = Room(
                room_number=room_number,
                room_type=parsed_type,
                price_per_night=price_per_night,
            )
            self._rooms[room_number] = room
            logger.info("Created room %s (%s, %s/night)", room_number, parsed_type, price_per_night)
            return room

    def upsert_user(self, user_id: int, balance: int) -> User:
        if not _is_int(user_id) or user_id <= 0:
            raise BookingError.invalid_input("User id must be positive")
        if balance is None:
            raise BookingError.invalid_input("User balance is required")
        if not _is_int(balance) or balance < 0:
            raise BookingError.invalid_input("User balance cannot be negative")

        with self.lock:
            if user := self._users.get(user_id):
                user.balance = balance
                logger.info("Updated user %s (balance %s)", user_id, balance)
                return user
            user = User(user_id=user_id, balance=balance)
            self._users[user_id] = user
            logger.info("Created user %s (balance %s)", user_id, balance)
            return user

    def find_room(self, room_number: int) -> Room | None:
        return self._rooms.get(room_number)

    def find_user(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def all_rooms(self) -> list[Room]:
        with self.lock:
            return list(self._rooms.values())

    def all_users(self) -> list[User]:
        with self.lock:
            return list(self._users.values())
