"""Service layer - balance engine and ledger orchestration."""

from remitledger.services.balance_engine import (
    apply_transaction,
    calculate_balances,
    build_timeline,
)
from remitledger.services.exchange_rates import (
    get_exchange_rate,
    convert_amount,
    format_currency,
)
from remitledger.services.display import display_amount, describe_impact
from remitledger.services.ledger_service import LedgerService, TransactionFilter

__all__ = [
    "apply_transaction",
    "calculate_balances",
    "build_timeline",
    "get_exchange_rate",
    "convert_amount",
    "format_currency",
    "display_amount",
    "describe_impact",
    "LedgerService",
    "TransactionFilter",
]
