"""API routes for receipt submission and points lookup."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError
from starlette.requests import ClientDisconnect

from receipt_points.api.dependencies import get_receipt_store
from receipt_points.core.errors import BadRequestError, MethodNotAllowedError
from receipt_points.core.observability import sentry_breadcrumb
from receipt_points.models.schemas import PointsResponse, Receipt, ReceiptIdResponse
from receipt_points.services.points_engine import compute_points
from receipt_points.services.receipt_store import ReceiptStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/receipts", tags=["receipts"])


@router.post("/process", response_model=ReceiptIdResponse)
async def process_receipt(
    request: Request,
    store: ReceiptStore = Depends(get_receipt_store),
) -> ReceiptIdResponse:
    """Store a submitted receipt and return its generated id.

    The body is decoded by hand rather than declared as a parameter so that
    malformed JSON is reported as 400 instead of FastAPI's 422.
    """
    try:
        body = await request.body()
    except ClientDisconnect:
        logger.warning("[receipts] client disconnected while sending body")
        raise BadRequestError("Failed to read request body")

    try:
        receipt = Receipt.model_validate_json(body)
    except ValidationError as exc:
        logger.warning("[receipts] rejected body errors=%d", exc.error_count())
        raise BadRequestError("Invalid JSON data")

    receipt_id = store.put(receipt)
    sentry_breadcrumb(category="receipts", message="receipt.stored", data={"id": receipt_id})
    return ReceiptIdResponse(id=receipt_id)


@router.api_route(
    "/process",
    methods=["GET", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
async def process_receipt_wrong_method() -> None:
    raise MethodNotAllowedError()


@router.get("/{receipt_id}/points", response_model=PointsResponse)
async def get_receipt_points(
    receipt_id: str,
    store: ReceiptStore = Depends(get_receipt_store),
) -> PointsResponse:
    """Compute the points for a stored receipt.

    Points are recomputed on every call; nothing is cached.
    """
    receipt = store.get(receipt_id)
    points = compute_points(receipt)
    logger.info("[receipts] points computed id=%s points=%d", receipt_id, points)
    return PointsResponse(points=points)
