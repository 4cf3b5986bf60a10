"""Display helpers for rendering balances and timeline amounts."""

from typing import Optional, Union

from remitledger.domain.models import Amount, Currency, ImpactType
from remitledger.domain.views import BalanceImpact
from remitledger.services.exchange_rates import convert_amount, format_currency


def display_amount(
    amount: Amount,
    currency: Union[Currency, str],
    home_currency: Union[Currency, str],
    show_in_home_currency: bool = False,
) -> str:
    """
    Format an amount for display, optionally converted into the home currency.

    Conversion here is display-only and never feeds back into balances.
    """
    currency = Currency(currency)
    home_currency = Currency(home_currency)
    if show_in_home_currency and currency != home_currency:
        return format_currency(convert_amount(amount, currency, home_currency), home_currency)
    return format_currency(amount, currency)


def describe_impact(
    impact: BalanceImpact,
    home_currency: Optional[Union[Currency, str]] = None,
    show_in_home_currency: bool = False,
) -> str:
    """Render an impact as a signed amount, e.g. +S$1,000.00 or -฿2,640.00."""
    sign = "+" if impact.type == ImpactType.CREDIT else "-"
    amount = display_amount(
        impact.amount,
        impact.currency,
        home_currency or impact.currency,
        show_in_home_currency,
    )
    return f"{sign}{amount}"
