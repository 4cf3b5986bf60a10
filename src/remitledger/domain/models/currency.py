"""Supported currencies and their display conventions."""

from enum import Enum


class Currency(str, Enum):
    """Currencies the ledger can hold."""

    SGD = "SGD"
    PHP = "PHP"
    MYR = "MYR"
    IDR = "IDR"
    THB = "THB"
    VND = "VND"
    USD = "USD"

    @property
    def symbol(self) -> str:
        """Display symbol, e.g. S$ for SGD."""
        return CURRENCY_SYMBOLS[self]

    @property
    def decimals(self) -> int:
        """Number of decimal places used when rendering amounts."""
        return CURRENCY_DECIMALS[self]


CURRENCY_SYMBOLS: dict[Currency, str] = {
    Currency.USD: "$",
    Currency.SGD: "S$",
    Currency.PHP: "₱",
    Currency.MYR: "RM",
    Currency.IDR: "Rp",
    Currency.THB: "฿",
    Currency.VND: "₫",
}

# IDR and VND are rendered in whole units
CURRENCY_DECIMALS: dict[Currency, int] = {
    Currency.USD: 2,
    Currency.SGD: 2,
    Currency.PHP: 2,
    Currency.MYR: 2,
    Currency.IDR: 0,
    Currency.THB: 2,
    Currency.VND: 0,
}
