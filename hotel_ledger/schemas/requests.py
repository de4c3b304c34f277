from datetime import date, datetime

from pydantic import BaseModel

# Fields are optional and loosely typed so that missing or unknown values
# reach the store/engine checks instead of failing request parsing.


class RoomUpsertRequest(BaseModel):
    room_type: str | None = None
    price_per_night: int | None = None


class UserUpsertRequest(BaseModel):
    balance: int | None = None


class BookingRequest(BaseModel):
    user_id: int
    room_number: int
    check_in: datetime | date | None = None
    check_out: datetime | date | None = None
