"""FastAPI application for the remittance ledger."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from remitledger.config.settings import Settings, get_settings
from remitledger.config.logging_config import setup_logging
from remitledger.api.deps import load_configured_seed
from remitledger.api.routers import users_router, balance_router, transactions_router
from remitledger.core.exceptions import AppError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Configure logging and load the dataset once before serving.

    A dataset already placed on app.state (e.g. by a test harness) is kept.
    """
    setup_logging()
    if getattr(app.state, "seed_data", None) is None:
        app.state.seed_data = load_configured_seed()
    seed = app.state.seed_data
    logger.info("%s ready with %d users", app.title, len(seed.users))
    yield


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Render ledger errors as {"error": code, "message": ...}."""
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.code, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application."""
    settings = settings or get_settings()

    application = FastAPI(
        title=settings.app_name,
        description="Multi-currency balances and transaction timeline for a remittance ledger",
        version=settings.app_version,
        lifespan=lifespan,
    )

    application.include_router(users_router)
    application.include_router(balance_router)
    application.include_router(transactions_router)
    application.add_exception_handler(AppError, app_error_handler)

    @application.get("/health")
    def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    @application.get("/")
    def root() -> dict[str, str]:
        """Service name, version and docs path."""
        return {
            "app": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs",
        }

    return application


app = create_app()
