"""User domain model."""

from dataclasses import dataclass

from remitledger.domain.models.currency import Currency


@dataclass(frozen=True)
class User:
    """
    Ledger account holder.

    home_currency is the default currency balances are rolled up into.
    """

    id: str
    name: str
    email: str
    home_currency: Currency
    country: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.home_currency, str):
            object.__setattr__(self, "home_currency", Currency(self.home_currency))
