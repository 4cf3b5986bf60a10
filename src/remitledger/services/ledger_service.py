"""Ledger service: resolves users and feeds their transactions to the balance engine."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from remitledger.core.exceptions import InvalidTimestampError, NotFoundError, ValidationError
from remitledger.core.timezone import parse_timestamp
from remitledger.domain.models import (
    Currency,
    Transaction,
    TransactionState,
    TransactionType,
    User,
)
from remitledger.domain.views import BalanceSummary, TimelineEntry
from remitledger.repositories.protocols import TransactionRepository, UserRepository
from remitledger.services.balance_engine import build_timeline, calculate_balances

logger = logging.getLogger(__name__)


@dataclass
class TransactionFilter:
    """Optional timeline filters; date bounds are inclusive on created_at."""

    currency: Optional[Currency] = None
    state: Optional[TransactionState] = None
    txn_type: Optional[TransactionType] = None
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None

    def matches(self, txn: Transaction) -> bool:
        """Return True if the transaction passes every filter that is set."""
        if self.currency is not None and not txn.touches(self.currency):
            return False
        if self.state is not None and txn.state != self.state:
            return False
        if self.txn_type is not None and txn.type != self.txn_type:
            return False
        if self.date_from is not None and txn.created_at < self.date_from:
            return False
        if self.date_to is not None and txn.created_at > self.date_to:
            return False
        return True


def parse_date_bound(value: Union[str, datetime, None], name: str) -> Optional[datetime]:
    """Parse a date filter from a query string, reporting bad input as a ValidationError."""
    if value is None or value == "":
        return None
    try:
        return parse_timestamp(value)
    except InvalidTimestampError as exc:
        raise ValidationError(f"{name} must be an ISO-8601 date or timestamp") from exc


class LedgerService:
    """
    Service for reading user balances and transaction history.

    Storage is read-only; every call derives its result from the user's
    current transaction snapshot.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        transaction_repo: TransactionRepository,
    ):
        self._user_repo = user_repo
        self._transaction_repo = transaction_repo

    def list_users(self) -> list[User]:
        """List all users."""
        return self._user_repo.list_all()

    def get_user(self, user_id: str) -> User:
        """Get user by ID."""
        user = self._user_repo.get_by_id(user_id)
        if not user:
            raise NotFoundError("User", user_id)
        return user

    def get_balance(
        self,
        user_id: str,
        home_currency: Optional[Currency] = None,
    ) -> BalanceSummary:
        """
        Compute the user's balances.

        Args:
            user_id: User to compute balances for
            home_currency: Rollup currency; defaults to the user's home currency

        Returns:
            BalanceSummary over all of the user's transactions
        """
        user = self.get_user(user_id)
        currency = home_currency or user.home_currency
        transactions = self._transaction_repo.list_by_user(user.id)
        logger.debug(
            "Computing balance for %s over %d transactions", user.id, len(transactions)
        )
        return calculate_balances(transactions, currency)

    def get_timeline(
        self,
        user_id: str,
        filters: Optional[TransactionFilter] = None,
    ) -> list[TimelineEntry]:
        """
        Build the user's newest-first timeline.

        Filters are applied before the timeline is built, so running balances
        reflect only the matching transactions.
        """
        user = self.get_user(user_id)
        transactions = self._transaction_repo.list_by_user(user.id)
        if filters is not None:
            transactions = [t for t in transactions if filters.matches(t)]
        return build_timeline(transactions, user.home_currency)
