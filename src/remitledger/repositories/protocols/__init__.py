"""Repository protocol definitions (interfaces)."""

from remitledger.repositories.protocols.user_repo import UserRepository
from remitledger.repositories.protocols.transaction_repo import TransactionRepository

__all__ = [
    "UserRepository",
    "TransactionRepository",
]
