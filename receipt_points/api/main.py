"""Entry point for the FastAPI application.

This module builds the FastAPI app, wires the receipt store, routers and
exception handlers, and exposes :func:`serve` for running it under
uvicorn on port 8080.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from receipt_points.api.endpoints.health import router as health_router
from receipt_points.api.error_handlers import register_exception_handlers
from receipt_points.api.routes.receipts import router as receipts_router
from receipt_points.core.config import HOST, PORT, settings
from receipt_points.core.observability import init_sentry
from receipt_points.services.receipt_store import ReceiptStore

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    logger.info("Starting up...")
    if init_sentry("api"):
        logger.info("Sentry SDK initialized (api)")
    yield
    logger.info("Shutting down... receipts=%d", len(app.state.receipt_store))


def create_app(store: ReceiptStore | None = None) -> FastAPI:
    """Build an application with its own receipt store."""
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )
    app.state.receipt_store = store if store is not None else ReceiptStore()

    register_exception_handlers(app)

    app.include_router(receipts_router)
    app.include_router(health_router)

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        """Root endpoint."""
        return f"{settings.WELCOME_MESSAGE}\n"

    return app


app = create_app()


def serve() -> None:
    """Run the service with uvicorn on the fixed port."""
    logger.info("Server is running on http://localhost:%d", PORT)
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    serve()
