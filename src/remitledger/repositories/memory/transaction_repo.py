"""In-memory transaction repository."""

from typing import Iterable

from remitledger.domain.models import Transaction


class InMemoryTransactionRepository:
    """Read-only transaction source over an immutable snapshot."""

    def __init__(self, transactions: Iterable[Transaction]):
        self._transactions: tuple[Transaction, ...] = tuple(transactions)

    def list_by_user(self, user_id: str) -> list[Transaction]:
        return [t for t in self._transactions if t.user_id == user_id]
