"""
Unit tests for balance aggregation.

Tests cover:
- The type x state rule table (completed, in-flight, refunded, failed)
- Missing destination legs degrading to no-ops
- Rounding after exact accumulation
- Home-currency rollup
- Order independence and the total == available + pending invariant
"""

import random
from decimal import Decimal

import pytest

from remitledger.domain.models import Currency, TransactionState, TransactionType
from remitledger.services.balance_engine import apply_transaction, calculate_balances
from remitledger.services.exchange_rates import convert_amount

from tests.conftest import make_txn


def _only(summary):
    assert len(summary.balances) == 1
    return summary.balances[0]


# =============================================================================
# BASIC AGGREGATION
# =============================================================================


class TestCalculateBalances:
    """Tests for calculate_balances."""

    def test_empty_transactions(self):
        """
        GIVEN no transactions
        WHEN I calculate balances
        THEN there are no balances and the home total is zero
        """
        result = calculate_balances([], Currency.USD)

        assert result.balances == []
        assert result.total_in_home_currency == Decimal("0")
        assert result.home_currency == Currency.USD

    def test_completed_deposit_adds_to_available(self):
        result = calculate_balances(
            [make_txn(type="deposit", state="completed", source_amount="1000")],
            Currency.SGD,
        )

        balance = _only(result)
        assert balance.currency == Currency.SGD
        assert balance.available == Decimal("1000")
        assert balance.pending == Decimal("0")
        assert balance.total == Decimal("1000")

    @pytest.mark.parametrize("state", ["processing", "initiated"])
    def test_in_flight_deposit_adds_to_pending(self, state):
        result = calculate_balances(
            [make_txn(type="deposit", state=state, source_amount="500")],
            Currency.SGD,
        )

        balance = _only(result)
        assert balance.available == Decimal("0")
        assert balance.pending == Decimal("500")
        assert balance.total == Decimal("500")

    def test_completed_send_subtracts_from_available(self):
        result = calculate_balances(
            [
                make_txn(type="deposit", source_amount="1000"),
                make_txn(type="send", state="completed", source_amount="300"),
            ],
            Currency.SGD,
        )

        assert _only(result).available == Decimal("700")

    def test_processing_send_is_held_in_pending(self):
        """
        GIVEN a 1000 SGD deposit and a processing 400 SGD send
        WHEN I calculate balances
        THEN 400 moves from available to pending and the total is unchanged
        """
        result = calculate_balances(
            [
                make_txn(type="deposit", source_amount="1000"),
                make_txn(type="send", state="processing", source_amount="400"),
            ],
            Currency.SGD,
        )

        balance = _only(result)
        assert balance.available == Decimal("600")
        assert balance.pending == Decimal("400")
        assert balance.total == Decimal("1000")

    def test_initiated_send_is_held_in_pending(self):
        result = calculate_balances(
            [
                make_txn(type="deposit", source_amount="1000"),
                make_txn(type="send", state="initiated", source_amount="200"),
            ],
            Currency.SGD,
        )

        balance = _only(result)
        assert balance.available == Decimal("800")
        assert balance.pending == Decimal("200")

    def test_completed_fee_subtracts_from_available(self):
        result = calculate_balances(
            [
                make_txn(type="deposit", source_amount="1000"),
                make_txn(type="fee", state="completed", source_amount="5"),
            ],
            Currency.SGD,
        )

        assert _only(result).available == Decimal("995")

    def test_completed_refund_adds_to_available(self):
        result = calculate_balances(
            [
                make_txn(type="deposit", source_amount="1000"),
                make_txn(type="send", source_amount="300"),
                make_txn(type="refund", source_amount="300"),
            ],
            Currency.SGD,
        )

        assert _only(result).available == Decimal("1000")

    def test_refunded_send_plus_refund_restores_balance(self):
        """
        GIVEN a deposit, a send in refunded state and a completed refund
        WHEN I calculate balances
        THEN the send still debits and the refund credits it back independently
        """
        txns = [
            make_txn(type="deposit", source_currency="MYR", source_amount="10000"),
            make_txn(id="send-1", type="send", state="refunded",
                     source_currency="MYR", source_amount="500"),
            make_txn(type="refund", source_currency="MYR", source_amount="500",
                     related_transaction_id="send-1"),
        ]

        assert _only(calculate_balances(txns, Currency.MYR)).available == Decimal("10000")
        # Without the refund the debit persists
        assert _only(calculate_balances(txns[:2], Currency.MYR)).available == Decimal("9500")

    def test_receive_credits_destination_currency(self):
        result = calculate_balances(
            [
                make_txn(type="receive", source_currency="PHP", source_amount="10000",
                         destination_currency="SGD", destination_amount="260"),
            ],
            Currency.SGD,
        )

        sgd = result.get(Currency.SGD)
        assert sgd is not None
        assert sgd.available == Decimal("260")
        assert result.get(Currency.PHP) is None

    def test_processing_receive_credits_pending(self):
        result = calculate_balances(
            [
                make_txn(type="receive", state="processing", source_currency="SGD",
                         destination_currency="MYR", destination_amount="3363.64"),
            ],
            Currency.MYR,
        )

        assert _only(result).pending == Decimal("3363.64")

    def test_completed_conversion_debits_source_and_credits_destination(self):
        result = calculate_balances(
            [
                make_txn(type="deposit", source_amount="1000"),
                make_txn(type="conversion", source_amount="100",
                         destination_currency="THB", destination_amount="2640"),
            ],
            Currency.SGD,
        )

        assert result.get(Currency.SGD).available == Decimal("900")
        assert result.get(Currency.THB).available == Decimal("2640")

    def test_multi_currency_balances(self):
        result = calculate_balances(
            [
                make_txn(type="deposit", source_currency="SGD", source_amount="5000"),
                make_txn(type="deposit", source_currency="MYR", source_amount="2000"),
                make_txn(type="send", source_currency="SGD", source_amount="500"),
                make_txn(type="send", source_currency="MYR", source_amount="500"),
            ],
            Currency.SGD,
        )

        assert result.get(Currency.SGD).available == Decimal("4500")
        assert result.get(Currency.MYR).available == Decimal("1500")
        assert result.total_in_home_currency > 0


# =============================================================================
# NO-OP COMBINATIONS
# =============================================================================


class TestNoOpRules:
    """Combinations that must leave balances untouched."""

    @pytest.mark.parametrize("txn_type", list(TransactionType))
    def test_failed_transactions_never_change_balances(self, txn_type):
        """
        GIVEN a failed transaction of any type
        WHEN I aggregate it
        THEN no currency is touched
        """
        failed = make_txn(
            type=txn_type,
            state="failed",
            source_amount="999",
            destination_currency="THB",
            destination_amount="123",
        )

        assert calculate_balances([failed], Currency.SGD).balances == []

    @pytest.mark.parametrize(
        "txn_type,state",
        [
            ("deposit", "refunded"),
            ("receive", "refunded"),
            ("refund", "processing"),
            ("refund", "initiated"),
            ("refund", "refunded"),
            ("fee", "processing"),
            ("fee", "refunded"),
            ("conversion", "processing"),
            ("conversion", "initiated"),
            ("conversion", "refunded"),
        ],
    )
    def test_unmapped_combinations_are_no_ops(self, txn_type, state):
        txn = make_txn(
            type=txn_type,
            state=state,
            destination_currency="THB",
            destination_amount="2640",
        )

        assert calculate_balances([txn], Currency.SGD).balances == []

    def test_receive_without_destination_is_no_op(self):
        txn = make_txn(type="receive", source_currency="PHP", source_amount="10000")

        assert calculate_balances([txn], Currency.SGD).balances == []

    def test_receive_with_zero_destination_amount_is_no_op(self):
        txn = make_txn(type="receive", destination_currency="SGD", destination_amount="0")

        assert calculate_balances([txn], Currency.SGD).balances == []

    def test_conversion_without_destination_only_debits_source(self):
        txn = make_txn(type="conversion", source_amount="100")

        balance = _only(calculate_balances([txn], Currency.SGD))
        assert balance.available == Decimal("-100")

    def test_zeroing_transactions_still_create_an_entry(self):
        result = calculate_balances(
            [
                make_txn(type="deposit", source_amount="50"),
                make_txn(type="fee", source_amount="50"),
            ],
            Currency.SGD,
        )

        balance = _only(result)
        assert balance.available == Decimal("0")
        assert balance.total == Decimal("0")


# =============================================================================
# ROUNDING AND ROLLUP
# =============================================================================


class TestRoundingAndRollup:
    """Rounding happens once after exact accumulation."""

    def test_rounds_after_exact_summation(self):
        """
        GIVEN a 100.555 deposit and a 0.111 fee
        WHEN I calculate balances
        THEN available is round2(100.444) = 100.44
        """
        result = calculate_balances(
            [
                make_txn(type="deposit", source_amount="100.555"),
                make_txn(type="fee", source_amount="0.111"),
            ],
            Currency.SGD,
        )

        assert _only(result).available == Decimal("100.44")

    def test_total_is_sum_of_rounded_components(self):
        result = calculate_balances(
            [
                make_txn(type="deposit", state="completed", source_amount="0.005"),
                make_txn(type="deposit", state="processing", source_amount="0.005"),
            ],
            Currency.SGD,
        )

        balance = _only(result)
        assert balance.available == Decimal("0.01")
        assert balance.pending == Decimal("0.01")
        assert balance.total == Decimal("0.02")

    def test_home_total_converts_each_rounded_total(self):
        result = calculate_balances(
            [
                make_txn(type="deposit", source_currency="SGD", source_amount="1000"),
                make_txn(type="deposit", source_currency="THB", source_amount="2640"),
                make_txn(type="deposit", state="processing",
                         source_currency="PHP", source_amount="5000"),
            ],
            Currency.USD,
        )

        expected = (
            convert_amount(Decimal("1000"), "SGD", "USD")
            + convert_amount(Decimal("2640"), "THB", "USD")
            + convert_amount(Decimal("5000"), "PHP", "USD")
        )
        assert result.total_in_home_currency == expected
        assert result.total_in_home_currency == Decimal("903.92")

    def test_home_currency_accepts_string(self):
        result = calculate_balances([make_txn(source_amount="100")], "SGD")

        assert result.home_currency == Currency.SGD
        assert result.total_in_home_currency == Decimal("100")


# =============================================================================
# INVARIANTS
# =============================================================================


class TestInvariants:
    """Properties that hold for any transaction set."""

    @pytest.fixture
    def random_transactions(self):
        rng = random.Random(7)
        currencies = list(Currency)
        txns = []
        for i in range(200):
            txns.append(
                make_txn(
                    type=rng.choice(list(TransactionType)),
                    state=rng.choice(list(TransactionState)),
                    source_currency=rng.choice(currencies),
                    source_amount=Decimal(rng.randint(0, 1_000_000)) / 1000,
                    destination_currency=rng.choice(currencies),
                    destination_amount=Decimal(rng.randint(0, 1_000_000)) / 1000,
                    created_at=f"2025-0{1 + i % 6}-{1 + i % 28:02d}T00:00:00Z",
                )
            )
        return txns

    def test_total_equals_available_plus_pending(self, random_transactions):
        result = calculate_balances(random_transactions, Currency.USD)

        assert result.balances
        for balance in result.balances:
            assert balance.total == (balance.available + balance.pending).quantize(Decimal("0.01"))

    def test_input_order_does_not_matter(self, random_transactions):
        forward = calculate_balances(random_transactions, Currency.SGD)
        backward = calculate_balances(list(reversed(random_transactions)), Currency.SGD)

        def as_map(summary):
            return {b.currency: (b.available, b.pending, b.total) for b in summary.balances}

        assert as_map(forward) == as_map(backward)
        assert forward.total_in_home_currency == backward.total_in_home_currency


class TestApplyTransaction:
    """apply_transaction mutates the accumulator and reports impacts."""

    def test_materializes_currency_on_first_touch(self):
        balances = {}

        apply_transaction(balances, make_txn(type="send", state="processing", source_amount="40"))

        assert set(balances) == {Currency.SGD}
        assert balances[Currency.SGD].available == Decimal("-40")
        assert balances[Currency.SGD].pending == Decimal("40")

    def test_no_op_leaves_accumulator_empty(self):
        balances = {}

        impacts = apply_transaction(balances, make_txn(type="fee", state="processing"))

        assert impacts == []
        assert balances == {}
