"""Dependency injection for FastAPI."""

from typing import Optional

from fastapi import Depends, Request

from remitledger.config.settings import Settings, get_settings
from remitledger.repositories.memory import (
    InMemoryUserRepository,
    InMemoryTransactionRepository,
    SeedData,
    load_seed,
)
from remitledger.services import LedgerService


def load_configured_seed(settings: Optional[Settings] = None) -> SeedData:
    """Load the dataset named by settings (the bundled seed if none is set)."""
    settings = settings or get_settings()
    return load_seed(
        settings.seed_data_path,
        default_home_currency=settings.default_home_currency,
    )


def get_seed_data(request: Request) -> SeedData:
    """Provide the dataset loaded once at startup and held on app.state."""
    return request.app.state.seed_data


def get_user_repo(seed: SeedData = Depends(get_seed_data)) -> InMemoryUserRepository:
    """Provide UserRepository instance."""
    return InMemoryUserRepository(seed.users)


def get_transaction_repo(
    seed: SeedData = Depends(get_seed_data),
) -> InMemoryTransactionRepository:
    """Provide TransactionRepository instance."""
    return InMemoryTransactionRepository(seed.transactions)


def get_ledger_service(
    user_repo: InMemoryUserRepository = Depends(get_user_repo),
    transaction_repo: InMemoryTransactionRepository = Depends(get_transaction_repo),
) -> LedgerService:
    """Provide LedgerService instance."""
    return LedgerService(
        user_repo=user_repo,
        transaction_repo=transaction_repo,
    )
