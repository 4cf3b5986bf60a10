"""User directory endpoints."""

from fastapi import APIRouter, Depends

from remitledger.api.deps import get_ledger_service
from remitledger.api.schemas import UserResponse, UserListResponse
from remitledger.services import LedgerService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=UserListResponse)
def list_users(
    ledger: LedgerService = Depends(get_ledger_service),
) -> UserListResponse:
    """List all users."""
    users = ledger.list_users()
    return UserListResponse(
        users=[UserResponse.model_validate(u) for u in users],
        count=len(users),
    )


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: str,
    ledger: LedgerService = Depends(get_ledger_service),
) -> UserResponse:
    """Get a single user; 404 if unknown."""
    return UserResponse.model_validate(ledger.get_user(user_id))
