"""Tests for EntityStore upserts and lookups."""

import pytest

from hotel_ledger.exceptions.custom import BookingError, BookingErrorKind
from hotel_ledger.schemas.ledger import RoomType
from hotel_ledger.store import EntityStore


def test_upsert_room_inserts_new_room():
    store = EntityStore()
    room = store.upsert_room(1, RoomType.STANDARD, 1000)

    assert room.room_number == 1
    assert room.room_type == RoomType.STANDARD
    assert room.price_per_night == 1000
    assert store.find_room(1) is room


def test_upsert_room_updates_in_place():
    store = EntityStore()
    original = store.upsert_room(1, RoomType.STANDARD, 1000)
    updated = store.upsert_room(1, RoomType.MASTER_SUITE, 10000)

    assert updated is original
    assert store.find_room(1).room_type == RoomType.MASTER_SUITE
    assert store.find_room(1).price_per_night == 10000
    assert len(store.all_rooms()) == 1


def test_upsert_room_accepts_type_name():
    store = EntityStore()
    room = store.upsert_room(2, "JUNIOR_SUITE", 2000)
    assert room.room_type == RoomType.JUNIOR_SUITE


@pytest.mark.parametrize(
    ("room_number", "room_type", "price", "message"),
    [
        (0, RoomType.STANDARD, 1000, "Room number must be positive"),
        (-3, RoomType.STANDARD, 1000, "Room number must be positive"),
        (1, None, 1000, "Room type is required"),
        (1, "PENTHOUSE", 1000, "Unknown room type: PENTHOUSE"),
        (1, RoomType.STANDARD, 0, "Room price must be positive"),
        (1, RoomType.STANDARD, -5, "Room price must be positive"),
        (1, RoomType.STANDARD, None, "Room price must be positive"),
        (True, RoomType.STANDARD, 1000, "Room number must be positive"),
    ],
)
def test_upsert_room_rejects_invalid_input(room_number, room_type, price, message):
    store = EntityStore()
    with pytest.raises(BookingError) as exc_info:
        store.upsert_room(room_number, room_type, price)

    assert exc_info.value.kind == BookingErrorKind.invalid_input
    assert exc_info.value.message == message
    assert store.all_rooms() == []


def test_rejected_update_keeps_existing_room():
    store = EntityStore()
    store.upsert_room(1, RoomType.STANDARD, 1000)

    with pytest.raises(BookingError):
        store.upsert_room(1, RoomType.MASTER_SUITE, 0)

    assert store.find_room(1).room_type == RoomType.STANDARD
    assert store.find_room(1).price_per_night == 1000


def test_upsert_user_inserts_and_updates():
    store = EntityStore()
    store.upsert_user(1, 5000)
    store.upsert_user(1, 0)

    assert store.find_user(1).balance == 0
    assert len(store.all_users()) == 1


@pytest.mark.parametrize(
    ("user_id", "balance", "message"),
    [
        (0, 100, "User id must be positive"),
        (-1, 100, "User id must be positive"),
        (1, -1, "User balance cannot be negative"),
        (1, None, "User balance is required"),
    ],
)
def test_upsert_user_rejects_invalid_input(user_id, balance, message):
    store = EntityStore()
    with pytest.raises(BookingError) as exc_info:
        store.upsert_user(user_id, balance)

    assert exc_info.value.kind == BookingErrorKind.invalid_input
    assert exc_info.value.message == message


def test_find_missing_returns_none():
    store = EntityStore()
    assert store.find_room(42) is None
    assert store.find_user(42) is None


def test_upsert_is_idempotent():
    once = EntityStore()
    once.upsert_room(1, RoomType.STANDARD, 1000)
    once.upsert_user(1, 5000)

    twice = EntityStore()
    for _ in range(2):
        twice.upsert_room(1, RoomType.STANDARD, 1000)
        twice.upsert_user(1, 5000)

    assert twice.all_rooms() == once.all_rooms()
    assert twice.all_users() == once.all_users()


def test_all_rooms_keeps_first_insertion_order():
    store = EntityStore()
    store.upsert_room(3, RoomType.MASTER_SUITE, 3000)
    store.upsert_room(1, RoomType.STANDARD, 1000)
    store.upsert_room(3, RoomType.STANDARD, 500)

    assert [r.room_number for r in store.all_rooms()] == [3, 1]
