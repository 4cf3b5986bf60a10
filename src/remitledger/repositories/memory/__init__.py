"""In-memory repository implementations backed by a seed dataset."""

from remitledger.repositories.memory.user_repo import InMemoryUserRepository
from remitledger.repositories.memory.transaction_repo import InMemoryTransactionRepository
from remitledger.repositories.memory.seed import SeedData, load_seed, build_seed

__all__ = [
    "InMemoryUserRepository",
    "InMemoryTransactionRepository",
    "SeedData",
    "load_seed",
    "build_seed",
]
