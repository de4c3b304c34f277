from fastapi import APIRouter

from hotel_ledger.dependencies import StoreDep
from hotel_ledger.schemas.ledger import User
from hotel_ledger.schemas.requests import UserUpsertRequest
from hotel_ledger.schemas.responses import ERROR_RESPONSES

router = APIRouter()


@router.put("/users/{user_id}", response_model=User, responses=ERROR_RESPONSES)
def upsert_user(user_id: int, request: UserUpsertRequest, store: StoreDep) -> User:
    return store.upsert_user(user_id, request.balance)


@router.get("/users", response_model=list[User])
def list_users(store: StoreDep) -> list[User]:
    return list(reversed(store.all_users()))
