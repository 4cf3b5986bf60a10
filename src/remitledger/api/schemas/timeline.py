"""Pydantic schemas for transaction timeline endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from remitledger.domain.models import Currency, ImpactType, TransactionState, TransactionType


class TransactionResponse(BaseModel):
    """Response schema for a single transaction."""

    model_config = {"from_attributes": True}

    id: str
    user_id: str
    type: TransactionType
    state: TransactionState
    source_currency: Currency
    source_amount: Decimal
    destination_currency: Optional[Currency] = None
    destination_amount: Optional[Decimal] = None
    exchange_rate: Optional[Decimal] = None
    fee: Optional[Decimal] = None
    fee_currency: Optional[Currency] = None
    description: str
    created_at: datetime
    updated_at: Optional[datetime] = None
    related_transaction_id: Optional[str] = None


class BalanceImpactResponse(BaseModel):
    """What a transaction credited or debited."""

    model_config = {"from_attributes": True}

    currency: Currency
    amount: Decimal
    type: ImpactType
    display: Optional[str] = None


class RunningBalanceResponse(BaseModel):
    """Running available/pending for one currency."""

    model_config = {"from_attributes": True}

    available: Decimal
    pending: Decimal


class TimelineEntryResponse(BaseModel):
    """A transaction with its impacts and the running balances after it."""

    model_config = {"from_attributes": True}

    transaction: TransactionResponse
    balance_impact: list[BalanceImpactResponse]
    running_balances: dict[Currency, RunningBalanceResponse]


class TimelineResponse(BaseModel):
    """Newest-first timeline."""

    entries: list[TimelineEntryResponse]
    count: int
    home_currency: Currency
    show_in_home_currency: bool = False
