"""Pydantic schemas for API request/response."""

from remitledger.api.schemas.user import UserResponse, UserListResponse
from remitledger.api.schemas.balance import CurrencyBalanceResponse, BalanceSummaryResponse
from remitledger.api.schemas.timeline import (
    TransactionResponse,
    BalanceImpactResponse,
    RunningBalanceResponse,
    TimelineEntryResponse,
    TimelineResponse,
)

__all__ = [
    "UserResponse",
    "UserListResponse",
    "CurrencyBalanceResponse",
    "BalanceSummaryResponse",
    "TransactionResponse",
    "BalanceImpactResponse",
    "RunningBalanceResponse",
    "TimelineEntryResponse",
    "TimelineResponse",
]
