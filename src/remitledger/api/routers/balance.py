"""Balance endpoint."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from remitledger.api.deps import get_ledger_service
from remitledger.api.schemas import BalanceSummaryResponse, CurrencyBalanceResponse
from remitledger.domain.models import Currency
from remitledger.domain.views import CurrencyBalance
from remitledger.services import LedgerService, display_amount, format_currency

router = APIRouter(prefix="/users", tags=["balance"])


def _balance_to_out(
    balance: CurrencyBalance,
    home_currency: Currency,
    show_in_home_currency: bool,
) -> CurrencyBalanceResponse:
    def show(amount):
        return display_amount(amount, balance.currency, home_currency, show_in_home_currency)

    return CurrencyBalanceResponse(
        currency=balance.currency,
        available=balance.available,
        pending=balance.pending,
        total=balance.total,
        display_available=show(balance.available),
        display_pending=show(balance.pending),
        display_total=show(balance.total),
    )


@router.get("/{user_id}/balance", response_model=BalanceSummaryResponse)
def get_balance(
    user_id: str,
    home_currency: Optional[Currency] = Query(
        None,
        alias="homeCurrency",
        description="Rollup currency (defaults to the user's home currency)",
    ),
    show_in_home_currency: bool = Query(
        False,
        alias="showInHomeCurrency",
        description="Render display amounts converted into the home currency",
    ),
    ledger: LedgerService = Depends(get_ledger_service),
) -> BalanceSummaryResponse:
    """Get available, pending and total balances per currency."""
    summary = ledger.get_balance(user_id, home_currency=home_currency)
    return BalanceSummaryResponse(
        balances=[
            _balance_to_out(b, summary.home_currency, show_in_home_currency)
            for b in summary.balances
        ],
        total_in_home_currency=summary.total_in_home_currency,
        home_currency=summary.home_currency,
        display_total_in_home_currency=format_currency(
            summary.total_in_home_currency, summary.home_currency
        ),
        show_in_home_currency=show_in_home_currency,
    )
