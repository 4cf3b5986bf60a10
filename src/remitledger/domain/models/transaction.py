"""Transaction domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional, Union

from remitledger.core.timezone import parse_timestamp
from remitledger.domain.models.currency import Currency
from remitledger.domain.models.enums import TransactionState, TransactionType

Amount = Union[Decimal, int, float, str]


def coerce_amount(value: Amount) -> Decimal:
    """Coerce a numeric value to Decimal without binary float artifacts."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass(frozen=True)
class Transaction:
    """
    Ledger transaction entry (read-only).

    - source_amount is always non-negative in valid input
    - destination_currency/destination_amount are present for receive and conversion
    - created_at/updated_at accept ISO-8601 strings and are normalized to UTC
    - related_transaction_id links e.g. a refund to the send it reverses;
      balances never follow this link
    """

    id: str
    user_id: str
    type: TransactionType
    state: TransactionState
    source_currency: Currency
    source_amount: Decimal
    created_at: datetime
    updated_at: Optional[datetime] = None
    description: str = ""
    destination_currency: Optional[Currency] = None
    destination_amount: Optional[Decimal] = None
    exchange_rate: Optional[Decimal] = None
    fee: Optional[Decimal] = None
    fee_currency: Optional[Currency] = None
    related_transaction_id: Optional[str] = field(default=None)

    def __post_init__(self) -> None:
        # Frozen: coerce through object.__setattr__
        set_ = object.__setattr__
        if isinstance(self.type, str):
            set_(self, "type", TransactionType(self.type))
        if isinstance(self.state, str):
            set_(self, "state", TransactionState(self.state))
        set_(self, "source_currency", Currency(self.source_currency))
        set_(self, "source_amount", coerce_amount(self.source_amount))
        set_(self, "created_at", parse_timestamp(self.created_at))
        if self.updated_at is not None:
            set_(self, "updated_at", parse_timestamp(self.updated_at))
        if self.destination_currency is not None:
            set_(self, "destination_currency", Currency(self.destination_currency))
        if self.fee_currency is not None:
            set_(self, "fee_currency", Currency(self.fee_currency))
        for name in ("destination_amount", "exchange_rate", "fee"):
            value = getattr(self, name)
            if value is not None:
                set_(self, name, coerce_amount(value))

    @property
    def has_destination(self) -> bool:
        """Return True if both destination currency and a non-zero amount are set."""
        return self.destination_currency is not None and bool(self.destination_amount)

    def touches(self, currency: Currency) -> bool:
        """Return True if the source or destination currency matches."""
        return currency in (self.source_currency, self.destination_currency)
