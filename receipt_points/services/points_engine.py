"""Scoring engine that turns a receipt into loyalty points.

The engine applies a fixed list of independent rules to a
:class:`~receipt_points.models.schemas.Receipt` and sums their
contributions.  Each rule is a small function returning a non-negative
integer:

* ``retailer`` – one point for every alphanumeric character in the
  retailer name (Unicode letters and decimal digits).
* ``round_dollar`` – 50 points if the total has no cents.
* ``quarter_multiple`` – 25 points if the total is a multiple of
  ``0.25``.  The check truncates ``total * 100`` to an integer rather than
  rounding it.
* ``item_pairs`` – 5 points for every two items.
* ``item_description`` – for each item whose trimmed description length
  is a multiple of three, ``ceil(price * 0.02)`` points.
* ``odd_day`` – 6 points if the day of the purchase date is odd.
* ``afternoon`` – 10 points if the purchase happened at or after 14:00
  and before 16:00.

Parsing is fail-open: a field that cannot be parsed makes its rule
contribute nothing and never aborts the computation.  Amounts are handled
as :class:`~decimal.Decimal` so the cents truncation is exact.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Callable, Dict, List, Tuple

from receipt_points.models.schemas import Item, Receipt
from receipt_points.utils.helpers import (
    parse_amount,
    parse_purchase_date,
    parse_purchase_time,
)

ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
POINTS_PER_ITEM_PAIR = 5
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10

DESCRIPTION_PRICE_MULTIPLIER = Decimal("0.02")
AFTERNOON_START_HOUR = 14
AFTERNOON_END_HOUR = 16


def _retailer_points(receipt: Receipt) -> int:
    return sum(1 for ch in receipt.retailer if ch.isalpha() or ch.isdecimal())


def _round_dollar_points(receipt: Receipt) -> int:
    total = parse_amount(receipt.total)
    if total is None:
        return 0
    return ROUND_DOLLAR_POINTS if total == total.to_integral_value() else 0


def _quarter_multiple_points(receipt: Receipt) -> int:
    total = parse_amount(receipt.total)
    if total is None:
        return 0
    cents = int(total * 100)  # int() truncates toward zero
    return QUARTER_MULTIPLE_POINTS if cents % 25 == 0 else 0


def _item_pair_points(receipt: Receipt) -> int:
    return (len(receipt.items) // 2) * POINTS_PER_ITEM_PAIR


def _description_points(item: Item) -> int:
    """Bonus for a single item.

    The trimmed description is measured in UTF-8 bytes, so an empty
    description qualifies.  An unparsable price earns nothing.
    """
    description = item.short_description.strip()
    if len(description.encode("utf-8")) % 3 != 0:
        return 0
    price = parse_amount(item.price)
    if price is None:
        return 0
    return max(0, math.ceil(price * DESCRIPTION_PRICE_MULTIPLIER))


def _item_description_points(receipt: Receipt) -> int:
    return sum(_description_points(item) for item in receipt.items)


def _odd_day_points(receipt: Receipt) -> int:
    purchased_on = parse_purchase_date(receipt.purchase_date)
    if purchased_on is None:
        return 0
    return ODD_DAY_POINTS if purchased_on.day % 2 == 1 else 0


def _afternoon_points(receipt: Receipt) -> int:
    purchased_at = parse_purchase_time(receipt.purchase_time)
    if purchased_at is None:
        return 0
    if AFTERNOON_START_HOUR <= purchased_at.hour < AFTERNOON_END_HOUR:
        return AFTERNOON_POINTS
    return 0


RULES: List[Tuple[str, Callable[[Receipt], int]]] = [
    ("retailer", _retailer_points),
    ("round_dollar", _round_dollar_points),
    ("quarter_multiple", _quarter_multiple_points),
    ("item_pairs", _item_pair_points),
    ("item_description", _item_description_points),
    ("odd_day", _odd_day_points),
    ("afternoon", _afternoon_points),
]


def points_breakdown(receipt: Receipt) -> Dict[str, int]:
    """Return the contribution of every rule, keyed by rule name.

    The mapping preserves the order of :data:`RULES`.
    """
    return {name: rule(receipt) for name, rule in RULES}


def compute_points(receipt: Receipt) -> int:
    """Compute the total loyalty points for ``receipt``.

    Deterministic and never negative; malformed fields only lower the
    result.
    """
    return sum(points_breakdown(receipt).values())
