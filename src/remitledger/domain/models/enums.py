"""Enumerations for domain models."""

from enum import Enum


class TransactionType(str, Enum):
    """Types of ledger transactions."""

    SEND = "send"
    RECEIVE = "receive"
    CONVERSION = "conversion"
    FEE = "fee"
    REFUND = "refund"
    DEPOSIT = "deposit"


class TransactionState(str, Enum):
    """Lifecycle states of a transaction."""

    INITIATED = "initiated"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"

    @property
    def is_in_flight(self) -> bool:
        """Return True for states where funds are not yet settled."""
        return self in (TransactionState.INITIATED, TransactionState.PROCESSING)


class ImpactType(str, Enum):
    """Direction of a balance impact."""

    CREDIT = "credit"
    DEBIT = "debit"
