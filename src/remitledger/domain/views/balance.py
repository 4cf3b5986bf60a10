"""View models for balance and timeline outputs."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from remitledger.domain.models import Currency, ImpactType, Transaction


@dataclass
class CurrencyBalance:
    """Rounded balance for one currency; total is always available + pending."""

    currency: Currency
    available: Decimal
    pending: Decimal
    total: Decimal


@dataclass
class BalanceSummary:
    """Per-user balances plus a rollup in the home currency."""

    balances: list[CurrencyBalance] = field(default_factory=list)
    total_in_home_currency: Decimal = field(default_factory=lambda: Decimal("0"))
    home_currency: Currency = Currency.USD

    def get(self, currency: Currency) -> Optional[CurrencyBalance]:
        """Return the balance for a currency, if any transaction touched it."""
        for balance in self.balances:
            if balance.currency == currency:
                return balance
        return None


@dataclass(frozen=True)
class BalanceImpact:
    """Signed effect one transaction had on one currency."""

    currency: Currency
    amount: Decimal
    type: ImpactType


@dataclass
class RunningBalance:
    """Mutable available/pending accumulator for one currency."""

    available: Decimal = field(default_factory=lambda: Decimal("0"))
    pending: Decimal = field(default_factory=lambda: Decimal("0"))

    @property
    def total(self) -> Decimal:
        return self.available + self.pending

    def copy(self) -> "RunningBalance":
        return RunningBalance(available=self.available, pending=self.pending)


@dataclass
class TimelineEntry:
    """A transaction annotated with its impacts and the balances after it."""

    transaction: Transaction
    balance_impact: list[BalanceImpact] = field(default_factory=list)
    running_balances: dict[Currency, RunningBalance] = field(default_factory=dict)
