"""Transaction timeline endpoint."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from remitledger.api.deps import get_ledger_service
from remitledger.api.schemas import (
    BalanceImpactResponse,
    RunningBalanceResponse,
    TimelineEntryResponse,
    TimelineResponse,
    TransactionResponse,
)
from remitledger.domain.models import Currency, TransactionState, TransactionType
from remitledger.domain.views import TimelineEntry
from remitledger.services import LedgerService, TransactionFilter, describe_impact
from remitledger.services.ledger_service import parse_date_bound

router = APIRouter(prefix="/users", tags=["transactions"])


def _entry_to_out(
    entry: TimelineEntry,
    home_currency: Currency,
    show_in_home_currency: bool,
) -> TimelineEntryResponse:
    return TimelineEntryResponse(
        transaction=TransactionResponse.model_validate(entry.transaction),
        balance_impact=[
            BalanceImpactResponse(
                currency=i.currency,
                amount=i.amount,
                type=i.type,
                display=describe_impact(i, home_currency, show_in_home_currency),
            )
            for i in entry.balance_impact
        ],
        running_balances={
            currency: RunningBalanceResponse.model_validate(balance)
            for currency, balance in entry.running_balances.items()
        },
    )


@router.get("/{user_id}/transactions", response_model=TimelineResponse)
def get_transactions(
    user_id: str,
    currency: Optional[Currency] = Query(None, description="Source or destination currency"),
    state: Optional[TransactionState] = Query(None),
    txn_type: Optional[TransactionType] = Query(None, alias="type"),
    date_from: Optional[str] = Query(None, alias="dateFrom", description="Inclusive lower bound"),
    date_to: Optional[str] = Query(None, alias="dateTo", description="Inclusive upper bound"),
    show_in_home_currency: bool = Query(
        False,
        alias="showInHomeCurrency",
        description="Render impact amounts converted into the user's home currency",
    ),
    ledger: LedgerService = Depends(get_ledger_service),
) -> TimelineResponse:
    """
    Get the user's transaction timeline, newest first.

    Every entry carries its balance impacts and the running balances after it.
    """
    filters = TransactionFilter(
        currency=currency,
        state=state,
        txn_type=txn_type,
        date_from=parse_date_bound(date_from, "dateFrom"),
        date_to=parse_date_bound(date_to, "dateTo"),
    )
    home_currency = ledger.get_user(user_id).home_currency
    entries = ledger.get_timeline(user_id, filters)
    return TimelineResponse(
        entries=[_entry_to_out(e, home_currency, show_in_home_currency) for e in entries],
        count=len(entries),
        home_currency=home_currency,
        show_in_home_currency=show_in_home_currency,
    )
