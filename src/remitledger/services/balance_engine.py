"""Balance engine: derives per-currency balances and the timeline from transactions."""

import logging
from decimal import Decimal
from typing import Iterable

from remitledger.domain.models import (
    Currency,
    ImpactType,
    Transaction,
    TransactionState,
    TransactionType,
)
from remitledger.domain.views import (
    BalanceImpact,
    BalanceSummary,
    CurrencyBalance,
    RunningBalance,
    TimelineEntry,
)
from remitledger.services.exchange_rates import convert_amount, round_money

logger = logging.getLogger(__name__)

BalanceMap = dict[Currency, RunningBalance]


def _credit(
    balances: BalanceMap,
    currency: Currency,
    amount: Decimal,
    *,
    pending: bool = False,
) -> BalanceImpact:
    balance = balances.setdefault(currency, RunningBalance())
    if pending:
        balance.pending += amount
    else:
        balance.available += amount
    return BalanceImpact(currency=currency, amount=amount, type=ImpactType.CREDIT)


def _debit(
    balances: BalanceMap,
    currency: Currency,
    amount: Decimal,
    *,
    hold: bool = False,
) -> BalanceImpact:
    balance = balances.setdefault(currency, RunningBalance())
    balance.available -= amount
    if hold:
        balance.pending += amount
    return BalanceImpact(currency=currency, amount=amount, type=ImpactType.DEBIT)


def apply_transaction(balances: BalanceMap, txn: Transaction) -> list[BalanceImpact]:
    """
    Apply one transaction to a per-currency accumulator in place.

    Each transaction is scored independently (related transactions are never
    consulted). Returns the impacts it produced, in application order:

    - failed: nothing, for any type
    - deposit: completed -> available; initiated/processing -> pending
    - receive: same as deposit, on the destination leg (skipped if missing)
    - refund: completed -> available
    - send: completed/refunded -> debit available;
      initiated/processing -> move from available to pending (held)
    - fee: completed -> debit available
    - conversion: completed -> debit source, then credit destination
    """
    state = txn.state
    if state == TransactionState.FAILED:
        return []

    impacts: list[BalanceImpact] = []
    src, amount = txn.source_currency, txn.source_amount

    if txn.type == TransactionType.DEPOSIT:
        if state == TransactionState.COMPLETED:
            impacts.append(_credit(balances, src, amount))
        elif state.is_in_flight:
            impacts.append(_credit(balances, src, amount, pending=True))

    elif txn.type == TransactionType.RECEIVE:
        if txn.has_destination:
            dst, dst_amount = txn.destination_currency, txn.destination_amount
            if state == TransactionState.COMPLETED:
                impacts.append(_credit(balances, dst, dst_amount))
            elif state.is_in_flight:
                impacts.append(_credit(balances, dst, dst_amount, pending=True))

    elif txn.type == TransactionType.REFUND:
        if state == TransactionState.COMPLETED:
            impacts.append(_credit(balances, src, amount))

    elif txn.type == TransactionType.SEND:
        if state in (TransactionState.COMPLETED, TransactionState.REFUNDED):
            # A refunded send stays debited; the separate refund credits it back
            impacts.append(_debit(balances, src, amount))
        elif state.is_in_flight:
            impacts.append(_debit(balances, src, amount, hold=True))

    elif txn.type == TransactionType.FEE:
        if state == TransactionState.COMPLETED:
            impacts.append(_debit(balances, src, amount))

    elif txn.type == TransactionType.CONVERSION:
        if state == TransactionState.COMPLETED:
            impacts.append(_debit(balances, src, amount))
            if txn.has_destination:
                impacts.append(
                    _credit(balances, txn.destination_currency, txn.destination_amount)
                )

    return impacts


def calculate_balances(
    transactions: Iterable[Transaction],
    home_currency: Currency,
) -> BalanceSummary:
    """
    Calculate available, pending and total balances across all currencies.

    Input order does not matter. Components are rounded to cents after exact
    accumulation; the home-currency total converts each rounded total, then
    rounds the sum once more.
    """
    home_currency = Currency(home_currency)
    accumulator: BalanceMap = {}
    count = 0
    for txn in transactions:
        apply_transaction(accumulator, txn)
        count += 1

    balances: list[CurrencyBalance] = []
    for currency, running in accumulator.items():
        available = round_money(running.available)
        pending = round_money(running.pending)
        balances.append(
            CurrencyBalance(
                currency=currency,
                available=available,
                pending=pending,
                total=round_money(available + pending),
            )
        )

    total_in_home = sum(
        (convert_amount(b.total, b.currency, home_currency) for b in balances),
        Decimal("0"),
    )

    logger.debug(
        "Aggregated %d transactions into %d currency balances", count, len(balances)
    )
    return BalanceSummary(
        balances=balances,
        total_in_home_currency=round_money(total_in_home),
        home_currency=home_currency,
    )


def build_timeline(
    transactions: Iterable[Transaction],
    home_currency: Currency,
) -> list[TimelineEntry]:
    """
    Build the transaction timeline, newest first.

    Transactions are replayed oldest first (stable on equal timestamps) and
    every entry carries a copy of all running balances after it. Running
    balances stay in each transaction's own currency; home_currency is
    accepted for symmetry with calculate_balances and is not applied.
    """
    ordered = sorted(transactions, key=lambda txn: txn.created_at)

    running: BalanceMap = {}
    timeline: list[TimelineEntry] = []
    for txn in ordered:
        impacts = apply_transaction(running, txn)
        timeline.append(
            TimelineEntry(
                transaction=txn,
                balance_impact=impacts,
                running_balances={c: b.copy() for c, b in running.items()},
            )
        )

    logger.debug("Built timeline of %d entries (home %s)", len(timeline), home_currency)
    timeline.reverse()
    return timeline
