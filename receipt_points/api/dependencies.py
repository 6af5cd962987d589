"""Common dependencies for FastAPI routes.

The receipt store is created once per application by
:func:`receipt_points.api.main.create_app` and kept on ``app.state``;
routes receive it through :func:`get_receipt_store`, which tests can
replace with ``app.dependency_overrides``.
"""

from __future__ import annotations

from fastapi import Request

from receipt_points.services.receipt_store import ReceiptStore


def get_receipt_store(request: Request) -> ReceiptStore:
    """Return the store owned by the running application."""
    return request.app.state.receipt_store
