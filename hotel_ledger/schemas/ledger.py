from __future__ import annotations

from datetime import date, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class RoomType(StrEnum):
    STANDARD = "STANDARD"
    JUNIOR_SUITE = "JUNIOR_SUITE"
    MASTER_SUITE = "MASTER_SUITE"


class Room(BaseModel):
    room_number: int
    room_type: RoomType
    price_per_night: int


class User(BaseModel):
    user_id: int
    balance: int


class Booking(BaseModel):
    """Room and user values as they were when the booking was made.

    Frozen: later upserts of the room or user never reach these fields.
    """

    model_config = ConfigDict(frozen=True)

    room_number: int
    room_type: RoomType
    price_per_night: int
    user_id: int
    balance_before_booking: int
    check_in: date
    check_out: date
    total_price: int
    created_at: datetime

    @property
    def nights(self) -> int:
        return (self.check_out - self.check_in).days
