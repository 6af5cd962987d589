"""Domain exceptions mapped one-to-one onto HTTP statuses.

Routes and services raise these; :mod:`receipt_points.api.error_handlers`
renders them as short plain-text responses.
"""

from __future__ import annotations


class PointsServiceError(Exception):
    """Base class for errors that end a request with a fixed status."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequestError(PointsServiceError):
    status_code = 400
    default_message = "Invalid JSON data"


class MethodNotAllowedError(PointsServiceError):
    status_code = 405
    default_message = "Invalid request method"


class ReceiptNotFoundError(PointsServiceError):
    """Raised when a receipt id is not present in the store."""

    status_code = 404
    default_message = "Receipt not found"

    def __init__(self, receipt_id: str) -> None:
        self.receipt_id = receipt_id
        super().__init__()


__all__ = [
    "PointsServiceError",
    "BadRequestError",
    "MethodNotAllowedError",
    "ReceiptNotFoundError",
]
