"""Pydantic schemas for request and response models.

Field names follow the public JSON contract (camelCase) through aliases
while the Python attributes stay snake_case.  Every value on a receipt is
kept as the string the client sent; interpretation happens in the scoring
engine so that a malformed field lowers the score instead of rejecting
the request.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Item(BaseModel):
    """Individual line item on a receipt."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    short_description: str = Field(default="", alias="shortDescription")
    price: str = ""


class Receipt(BaseModel):
    """A submitted purchase receipt.

    ``id`` is assigned by :class:`~receipt_points.services.receipt_store.ReceiptStore`
    and is ignored if a client sends one.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = ""
    retailer: str = ""
    purchase_date: str = Field(default="", alias="purchaseDate")
    purchase_time: str = Field(default="", alias="purchaseTime")
    total: str = ""
    items: List[Item] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# API response schemas


class ReceiptIdResponse(BaseModel):
    id: str


class PointsResponse(BaseModel):
    points: int


__all__ = ["Item", "Receipt", "ReceiptIdResponse", "PointsResponse"]
