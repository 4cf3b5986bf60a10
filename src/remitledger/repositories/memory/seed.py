"""Seed dataset for the in-memory repositories.

The bundled records cover every transaction type and state. A JSON file with
the same shape ({"users": [...], "transactions": [...]}, snake_case keys) can
replace them via the ``seed_data_path`` setting.
"""

import json
import logging
from dataclasses import dataclass, field
from decimal import InvalidOperation
from pathlib import Path
from typing import Any, Optional

from remitledger.core.exceptions import ValidationError
from remitledger.domain.models import Currency, Transaction, User

logger = logging.getLogger(__name__)

SEED_USERS: list[dict[str, Any]] = [
    {
        "id": "user-1",
        "name": "Maria Santos",
        "email": "maria.santos@example.com",
        "home_currency": "SGD",
        "country": "SG",
    },
    {
        "id": "user-2",
        "name": "Ahmad bin Ismail",
        "email": "ahmad.ismail@example.com",
        "home_currency": "MYR",
        "country": "MY",
    },
    {
        "id": "user-3",
        "name": "Nguyen Thi Lan",
        "email": "lan.nguyen@example.com",
        "home_currency": "VND",
        "country": "VN",
    },
]

SEED_TRANSACTIONS: list[dict[str, Any]] = [
    # Maria: SGD wallet sending home to PHP
    {
        "id": "tx-1001", "user_id": "user-1", "type": "deposit", "state": "completed",
        "source_currency": "SGD", "source_amount": "5000",
        "description": "Salary top-up",
        "created_at": "2025-01-05T09:00:00Z", "updated_at": "2025-01-05T09:02:00Z",
    },
    {
        "id": "tx-1002", "user_id": "user-1", "type": "send", "state": "completed",
        "source_currency": "SGD", "source_amount": "500",
        "destination_currency": "PHP", "destination_amount": "20555.56",
        "exchange_rate": "41.1111", "fee": "3.50", "fee_currency": "SGD",
        "description": "Send to family in Manila",
        "created_at": "2025-01-12T10:00:00Z", "updated_at": "2025-01-12T10:30:00Z",
    },
    {
        "id": "tx-1003", "user_id": "user-1", "type": "fee", "state": "completed",
        "source_currency": "SGD", "source_amount": "3.50",
        "description": "Transfer fee", "related_transaction_id": "tx-1002",
        "created_at": "2025-01-12T10:00:01Z", "updated_at": "2025-01-12T10:00:01Z",
    },
    {
        "id": "tx-1004", "user_id": "user-1", "type": "conversion", "state": "completed",
        "source_currency": "SGD", "source_amount": "1000",
        "destination_currency": "THB", "destination_amount": "26428.57",
        "exchange_rate": "26.4286",
        "description": "Convert for Bangkok trip",
        "created_at": "2025-02-03T14:20:00Z", "updated_at": "2025-02-03T14:20:05Z",
    },
    {
        "id": "tx-1006", "user_id": "user-1", "type": "send", "state": "refunded",
        "source_currency": "SGD", "source_amount": "300",
        "destination_currency": "MYR", "destination_amount": "1009.09",
        "exchange_rate": "3.3636",
        "description": "Send to Johor Bahru (recipient bank rejected)",
        "created_at": "2025-03-15T08:45:00Z", "updated_at": "2025-03-18T11:00:00Z",
    },
    {
        "id": "tx-1007", "user_id": "user-1", "type": "refund", "state": "completed",
        "source_currency": "SGD", "source_amount": "300",
        "description": "Refund for rejected transfer", "related_transaction_id": "tx-1006",
        "created_at": "2025-03-18T11:00:00Z", "updated_at": "2025-03-18T11:00:00Z",
    },
    {
        "id": "tx-1008", "user_id": "user-1", "type": "send", "state": "failed",
        "source_currency": "SGD", "source_amount": "800",
        "destination_currency": "VND", "destination_amount": "14800000",
        "description": "Send to Hanoi (compliance check failed)",
        "created_at": "2025-04-02T16:10:00Z", "updated_at": "2025-04-02T16:40:00Z",
    },
    {
        "id": "tx-1010", "user_id": "user-1", "type": "receive", "state": "completed",
        "source_currency": "USD", "source_amount": "200",
        "destination_currency": "SGD", "destination_amount": "270.27",
        "exchange_rate": "1.3514",
        "description": "Payment from freelance client",
        "created_at": "2025-05-20T03:15:00Z", "updated_at": "2025-05-20T03:20:00Z",
    },
    {
        "id": "tx-1005", "user_id": "user-1", "type": "send", "state": "processing",
        "source_currency": "SGD", "source_amount": "250",
        "destination_currency": "PHP", "destination_amount": "10277.78",
        "exchange_rate": "41.1111",
        "description": "Monthly allowance to Cebu",
        "created_at": "2025-06-10T07:30:00Z", "updated_at": "2025-06-10T07:31:00Z",
    },
    {
        "id": "tx-1009", "user_id": "user-1", "type": "deposit", "state": "processing",
        "source_currency": "SGD", "source_amount": "1500",
        "description": "Bank transfer top-up",
        "created_at": "2025-06-12T12:00:00Z", "updated_at": "2025-06-12T12:00:00Z",
    },
    # Ahmad: MYR wallet with a USD side balance
    {
        "id": "tx-2001", "user_id": "user-2", "type": "deposit", "state": "completed",
        "source_currency": "MYR", "source_amount": "10000",
        "description": "Initial deposit",
        "created_at": "2025-01-08T02:00:00Z", "updated_at": "2025-01-08T02:01:00Z",
    },
    {
        "id": "tx-2002", "user_id": "user-2", "type": "send", "state": "refunded",
        "source_currency": "MYR", "source_amount": "500",
        "destination_currency": "IDR", "destination_amount": "1746031",
        "exchange_rate": "3492.06",
        "description": "Send to Jakarta (recipient account closed)",
        "created_at": "2025-02-14T05:00:00Z", "updated_at": "2025-02-16T09:00:00Z",
    },
    {
        "id": "tx-2003", "user_id": "user-2", "type": "refund", "state": "completed",
        "source_currency": "MYR", "source_amount": "500",
        "description": "Refund for closed recipient account", "related_transaction_id": "tx-2002",
        "created_at": "2025-02-16T09:00:00Z", "updated_at": "2025-02-16T09:00:00Z",
    },
    {
        "id": "tx-2004", "user_id": "user-2", "type": "conversion", "state": "completed",
        "source_currency": "MYR", "source_amount": "2000",
        "destination_currency": "USD", "destination_amount": "440",
        "exchange_rate": "0.22",
        "description": "Convert to USD",
        "created_at": "2025-03-01T09:00:00Z", "updated_at": "2025-03-01T09:00:10Z",
    },
    {
        "id": "tx-2007", "user_id": "user-2", "type": "fee", "state": "completed",
        "source_currency": "MYR", "source_amount": "5",
        "description": "Conversion fee", "related_transaction_id": "tx-2004",
        "created_at": "2025-03-01T09:01:00Z", "updated_at": "2025-03-01T09:01:00Z",
    },
    {
        "id": "tx-2008", "user_id": "user-2", "type": "conversion", "state": "failed",
        "source_currency": "MYR", "source_amount": "1000",
        "destination_currency": "THB", "destination_amount": "7857.14",
        "description": "Convert to THB (quote expired)",
        "created_at": "2025-04-10T10:00:00Z", "updated_at": "2025-04-10T10:05:00Z",
    },
    {
        "id": "tx-2005", "user_id": "user-2", "type": "receive", "state": "processing",
        "source_currency": "SGD", "source_amount": "1000",
        "destination_currency": "MYR", "destination_amount": "3363.64",
        "exchange_rate": "3.3636",
        "description": "Incoming transfer from Singapore",
        "created_at": "2025-06-14T01:00:00Z", "updated_at": "2025-06-14T01:00:00Z",
    },
    {
        "id": "tx-2006", "user_id": "user-2", "type": "send", "state": "initiated",
        "source_currency": "MYR", "source_amount": "750",
        "destination_currency": "VND", "destination_amount": "4125000",
        "exchange_rate": "5500",
        "description": "Send to Ho Chi Minh City",
        "created_at": "2025-06-15T06:00:00Z", "updated_at": "2025-06-15T06:00:00Z",
    },
    # Lan: receives USD, holds USD and VND
    {
        "id": "tx-3001", "user_id": "user-3", "type": "receive", "state": "completed",
        "source_currency": "USD", "source_amount": "500",
        "destination_currency": "VND", "destination_amount": "12500000",
        "exchange_rate": "25000",
        "description": "Transfer from sister in California",
        "created_at": "2025-01-20T13:00:00Z", "updated_at": "2025-01-20T13:05:00Z",
    },
    {
        "id": "tx-3002", "user_id": "user-3", "type": "deposit", "state": "completed",
        "source_currency": "USD", "source_amount": "1000",
        "description": "USD card top-up",
        "created_at": "2025-02-01T04:00:00Z", "updated_at": "2025-02-01T04:00:00Z",
    },
    {
        "id": "tx-3003", "user_id": "user-3", "type": "send", "state": "completed",
        "source_currency": "USD", "source_amount": "300",
        "destination_currency": "PHP", "destination_amount": "16666.67",
        "exchange_rate": "55.5556",
        "description": "Tuition payment to Manila",
        "created_at": "2025-03-05T02:30:00Z", "updated_at": "2025-03-05T02:45:00Z",
    },
    {
        "id": "tx-3004", "user_id": "user-3", "type": "fee", "state": "completed",
        "source_currency": "USD", "source_amount": "2.99",
        "description": "Transfer fee", "related_transaction_id": "tx-3003",
        "created_at": "2025-03-05T02:30:01Z", "updated_at": "2025-03-05T02:30:01Z",
    },
    {
        "id": "tx-3005", "user_id": "user-3", "type": "conversion", "state": "processing",
        "source_currency": "USD", "source_amount": "100",
        "destination_currency": "IDR", "destination_amount": "1587301",
        "description": "Convert to IDR for Bali trip",
        "created_at": "2025-05-01T08:00:00Z", "updated_at": "2025-05-01T08:00:00Z",
    },
    {
        "id": "tx-3006", "user_id": "user-3", "type": "deposit", "state": "refunded",
        "source_currency": "USD", "source_amount": "50",
        "description": "Card top-up reversed by issuer",
        "created_at": "2025-05-10T11:00:00Z", "updated_at": "2025-05-12T11:00:00Z",
    },
]


@dataclass
class SeedData:
    """Users and transactions backing the in-memory repositories."""

    users: list[User] = field(default_factory=list)
    transactions: list[Transaction] = field(default_factory=list)


def user_from_record(
    record: dict[str, Any],
    default_home_currency: Currency = Currency.USD,
) -> User:
    """Build a User from a seed record."""
    return User(
        id=record["id"],
        name=record["name"],
        email=record.get("email", ""),
        home_currency=record.get("home_currency") or default_home_currency,
        country=record.get("country", ""),
    )


def transaction_from_record(record: dict[str, Any]) -> Transaction:
    """Build a Transaction from a seed record; unknown keys are ignored."""
    return Transaction(
        id=record["id"],
        user_id=record["user_id"],
        type=record["type"],
        state=record["state"],
        source_currency=record["source_currency"],
        source_amount=record["source_amount"],
        created_at=record["created_at"],
        updated_at=record.get("updated_at"),
        description=record.get("description", ""),
        destination_currency=record.get("destination_currency"),
        destination_amount=record.get("destination_amount"),
        exchange_rate=record.get("exchange_rate"),
        fee=record.get("fee"),
        fee_currency=record.get("fee_currency"),
        related_transaction_id=record.get("related_transaction_id"),
    )


def build_seed(
    user_records: list[dict[str, Any]],
    transaction_records: list[dict[str, Any]],
    default_home_currency: Currency = Currency.USD,
) -> SeedData:
    """Build SeedData from raw records, reporting the offending record on error."""
    users: list[User] = []
    for record in user_records:
        try:
            users.append(user_from_record(record, default_home_currency))
        except (KeyError, ValueError) as exc:
            raise ValidationError(
                f"Invalid user record {record.get('id', '?')}: {exc}"
            ) from exc

    transactions: list[Transaction] = []
    for record in transaction_records:
        try:
            transactions.append(transaction_from_record(record))
        except (KeyError, ValueError, InvalidOperation) as exc:
            raise ValidationError(
                f"Invalid transaction record {record.get('id', '?')}: {exc}"
            ) from exc
    return SeedData(users=users, transactions=transactions)


def load_seed(
    path: Optional[Path] = None,
    default_home_currency: Currency = Currency.USD,
) -> SeedData:
    """Load the bundled dataset, or a JSON dataset from path when given."""
    if path is None:
        seed = build_seed(SEED_USERS, SEED_TRANSACTIONS, default_home_currency)
        source = "bundled seed"
    else:
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)
        seed = build_seed(
            payload.get("users", []),
            payload.get("transactions", []),
            default_home_currency,
        )
        source = str(path)

    logger.info(
        "Loaded %d users and %d transactions from %s",
        len(seed.users),
        len(seed.transactions),
        source,
    )
    return seed
