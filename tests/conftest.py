"""
Pytest configuration and fixtures for remittance ledger tests.

This module provides:
- Factory helpers for users and transactions
- A small fixed dataset (two users, mixed currencies)
- Repository and service fixtures over that dataset
- A FastAPI test client with the seed dataset overridden
"""

import itertools
from decimal import Decimal
from typing import Callable

import pytest
from fastapi.testclient import TestClient

from remitledger.main import app
from remitledger.config.settings import reset_settings
from remitledger.domain.models import Currency, Transaction, User
from remitledger.repositories.memory import (
    InMemoryUserRepository,
    InMemoryTransactionRepository,
    SeedData,
)
from remitledger.services import LedgerService


# =============================================================================
# FACTORY HELPERS
# =============================================================================


_ids = itertools.count(1)


def make_txn(**overrides) -> Transaction:
    """
    Build a Transaction with sensible defaults.

    Defaults to a completed 100 SGD deposit on 2025-01-01 for user-test.
    """
    data = {
        "id": f"tx-{next(_ids)}",
        "user_id": "user-test",
        "type": "deposit",
        "state": "completed",
        "source_currency": "SGD",
        "source_amount": Decimal("100"),
        "description": "test",
        "created_at": "2025-01-01T00:00:00Z",
        "updated_at": "2025-01-01T00:00:00Z",
    }
    data.update(overrides)
    return Transaction(**data)


@pytest.fixture
def txn_factory() -> Callable[..., Transaction]:
    """Factory for test transactions."""
    return make_txn


# =============================================================================
# DATASET FIXTURES
# =============================================================================


@pytest.fixture
def users() -> list[User]:
    """Two users with different home currencies."""
    return [
        User(
            id="user-sg",
            name="Test Singapore",
            email="sg@example.com",
            home_currency=Currency.SGD,
            country="SG",
        ),
        User(
            id="user-my",
            name="Test Malaysia",
            email="my@example.com",
            home_currency=Currency.MYR,
            country="MY",
        ),
    ]


@pytest.fixture
def transactions() -> list[Transaction]:
    """
    Mixed history for user-sg (stored out of chronological order) plus one
    deposit for user-my.

    Expected user-sg balances:
      SGD available 1000 - 100 - 300 + 300 - 5 = 895, pending 0
      THB available 2640
    """
    return [
        make_txn(id="sg-4", user_id="user-sg", type="send", state="refunded",
                 source_amount="300", destination_currency="PHP",
                 destination_amount="12333.33", created_at="2025-03-10T00:00:00Z"),
        make_txn(id="sg-1", user_id="user-sg", type="deposit", state="completed",
                 source_amount="1000", created_at="2025-01-01T00:00:00Z"),
        make_txn(id="sg-2", user_id="user-sg", type="conversion", state="completed",
                 source_amount="100", destination_currency="THB",
                 destination_amount="2640", created_at="2025-02-01T00:00:00Z"),
        make_txn(id="sg-5", user_id="user-sg", type="refund", state="completed",
                 source_amount="300", related_transaction_id="sg-4",
                 created_at="2025-03-12T00:00:00Z"),
        make_txn(id="sg-3", user_id="user-sg", type="send", state="failed",
                 source_amount="999", created_at="2025-02-15T00:00:00Z"),
        make_txn(id="sg-6", user_id="user-sg", type="fee", state="completed",
                 source_amount="5", created_at="2025-04-01T00:00:00Z"),
        make_txn(id="my-1", user_id="user-my", type="deposit", state="processing",
                 source_currency="MYR", source_amount="2500",
                 created_at="2025-01-20T00:00:00Z"),
    ]


@pytest.fixture
def seed_data(users, transactions) -> SeedData:
    """Provide the test dataset."""
    return SeedData(users=users, transactions=transactions)


# =============================================================================
# REPOSITORY / SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def user_repo(seed_data) -> InMemoryUserRepository:
    """Provide test UserRepository."""
    return InMemoryUserRepository(seed_data.users)


@pytest.fixture
def transaction_repo(seed_data) -> InMemoryTransactionRepository:
    """Provide test TransactionRepository."""
    return InMemoryTransactionRepository(seed_data.transactions)


@pytest.fixture
def ledger_service(user_repo, transaction_repo) -> LedgerService:
    """Provide test LedgerService."""
    return LedgerService(
        user_repo=user_repo,
        transaction_repo=transaction_repo,
    )


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(seed_data) -> TestClient:
    """Provide FastAPI test client backed by the test dataset."""
    reset_settings()
    app.state.seed_data = seed_data
    with TestClient(app) as c:
        yield c
    app.state.seed_data = None
