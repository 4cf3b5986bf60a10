"""Domain models package."""

from remitledger.domain.models.currency import Currency, CURRENCY_SYMBOLS, CURRENCY_DECIMALS
from remitledger.domain.models.enums import TransactionType, TransactionState, ImpactType
from remitledger.domain.models.transaction import Amount, Transaction, coerce_amount
from remitledger.domain.models.user import User

__all__ = [
    "Currency",
    "CURRENCY_SYMBOLS",
    "CURRENCY_DECIMALS",
    "TransactionType",
    "TransactionState",
    "ImpactType",
    "Transaction",
    "Amount",
    "coerce_amount",
    "User",
]
