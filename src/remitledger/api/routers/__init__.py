"""API routers package."""

from remitledger.api.routers.users import router as users_router
from remitledger.api.routers.balance import router as balance_router
from remitledger.api.routers.transactions import router as transactions_router

__all__ = [
    "users_router",
    "balance_router",
    "transactions_router",
]
