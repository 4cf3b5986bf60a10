"""View models for service outputs."""

from remitledger.domain.views.balance import (
    CurrencyBalance,
    BalanceSummary,
    BalanceImpact,
    RunningBalance,
    TimelineEntry,
)

__all__ = [
    "CurrencyBalance",
    "BalanceSummary",
    "BalanceImpact",
    "RunningBalance",
    "TimelineEntry",
]
