from fastapi import APIRouter

from hotel_ledger.dependencies import StoreDep
from hotel_ledger.schemas.ledger import Room
from hotel_ledger.schemas.requests import RoomUpsertRequest
from hotel_ledger.schemas.responses import ERROR_RESPONSES

router = APIRouter()


@router.put("/rooms/{room_number}", response_model=Room, responses=ERROR_RESPONSES)
def upsert_room(room_number: int, request: RoomUpsertRequest, store: StoreDep) -> Room:
    return store.upsert_room(room_number, request.room_type, request.price_per_night)


@router.get("/rooms", response_model=list[Room])
def list_rooms(store: StoreDep) -> list[Room]:
    """Rooms, most recently created first."""
    return list(reversed(store.all_rooms()))
