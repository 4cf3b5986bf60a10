"""Transaction repository protocol."""

from typing import Protocol

from remitledger.domain.models import Transaction


class TransactionRepository(Protocol):
    """Interface for read-only transaction data access."""

    def list_by_user(self, user_id: str) -> list[Transaction]:
        """List all transactions owned by a user, in storage order."""
        ...
