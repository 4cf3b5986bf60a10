"""Pydantic schemas for the balance endpoint."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from remitledger.domain.models import Currency


class CurrencyBalanceResponse(BaseModel):
    """Balance of one currency."""

    model_config = {"from_attributes": True}

    currency: Currency
    available: Decimal
    pending: Decimal
    total: Decimal

    # Formatted amounts, converted to the home currency when requested
    display_available: Optional[str] = None
    display_pending: Optional[str] = None
    display_total: Optional[str] = None


class BalanceSummaryResponse(BaseModel):
    """All currency balances with the home-currency rollup."""

    model_config = {"from_attributes": True}

    balances: list[CurrencyBalanceResponse]
    total_in_home_currency: Decimal
    home_currency: Currency
    display_total_in_home_currency: Optional[str] = None
    show_in_home_currency: bool = False
