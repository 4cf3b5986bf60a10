"""Static exchange rates, conversion and currency formatting."""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

from remitledger.core.timezone import month_key
from remitledger.domain.models import Amount, Currency, coerce_amount

CENT = Decimal("0.01")
ONE = Decimal("1")

# Value of one unit of each currency in USD (the pivot)
PIVOT_VALUES: dict[Currency, Decimal] = {
    Currency.USD: Decimal("1.0"),
    Currency.SGD: Decimal("0.74"),
    Currency.PHP: Decimal("0.018"),
    Currency.MYR: Decimal("0.22"),
    Currency.IDR: Decimal("0.000063"),
    Currency.THB: Decimal("0.028"),
    Currency.VND: Decimal("0.000040"),
}

# Simulated month-level variation, applied to both sides of a rate
RATE_VARIATIONS: dict[str, Decimal] = {
    "2025-01": Decimal("1.0"),
    "2025-02": Decimal("1.005"),
    "2025-03": Decimal("0.998"),
    "2025-04": Decimal("1.012"),
    "2025-05": Decimal("0.995"),
    "2025-06": Decimal("1.008"),
}

AsOf = Optional[Union[date, str]]


def round_money(amount: Decimal) -> Decimal:
    """Round to cents, half away from zero."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def rate_variation(as_of: AsOf = None) -> Decimal:
    """Return the variation multiplier for the month of as_of (1 if unknown)."""
    if not as_of:
        return ONE
    return RATE_VARIATIONS.get(month_key(as_of), ONE)


def get_exchange_rate(
    source_currency: Union[Currency, str],
    target_currency: Union[Currency, str],
    as_of: AsOf = None,
) -> Decimal:
    """
    Return how many units of target_currency one unit of source_currency buys.

    The month variation scales both pivot values, so it cancels out of the
    ratio; as_of is accepted for future time-varying rates.
    """
    source = Currency(source_currency)
    target = Currency(target_currency)
    if source == target:
        return ONE

    variation = rate_variation(as_of)
    source_usd = PIVOT_VALUES[source] * variation
    target_usd = PIVOT_VALUES[target] * variation
    return source_usd / target_usd


def convert_amount(
    amount: Amount,
    source_currency: Union[Currency, str],
    target_currency: Union[Currency, str],
    as_of: AsOf = None,
) -> Decimal:
    """Convert an amount and round the result to 2 decimal places."""
    rate = get_exchange_rate(source_currency, target_currency, as_of)
    return round_money(coerce_amount(amount) * rate)


def format_currency(amount: Amount, currency: Union[Currency, str]) -> str:
    """
    Render an amount with the currency's symbol and display precision.

    e.g. S$1,234.56, Rp1,500,000, $0.00
    """
    currency = Currency(currency)
    value = coerce_amount(amount)
    exponent = Decimal(1).scaleb(-currency.decimals)
    value = value.quantize(exponent, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}{currency.symbol}{abs(value):,.{currency.decimals}f}"
