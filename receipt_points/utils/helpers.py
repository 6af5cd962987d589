"""Fail-open parsers for the string fields of a receipt.

Each helper returns ``None`` when the value cannot be interpreted; callers
treat ``None`` as "this rule contributes nothing".
"""

from __future__ import annotations

import datetime as dt
import re
from decimal import Decimal, InvalidOperation
from typing import Optional

PURCHASE_DATE_FORMAT = "%Y-%m-%d"
PURCHASE_TIME_FORMAT = "%H:%M"

# strptime accepts one-digit and space-padded fields; these do not.
_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_TIME_RE = re.compile(r"[0-9]{2}:[0-9]{2}")
# Plain decimal notation with an optional exponent; no whitespace or underscores.
_AMOUNT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

# Largest accepted power of ten; keeps arithmetic inside the default context.
MAX_AMOUNT_EXPONENT = 18


def parse_amount(value: str | None) -> Optional[Decimal]:
    """Parse a monetary amount such as ``"12.25"`` into a :class:`Decimal`.

    Returns ``None`` for missing or malformed values, including the forms
    :class:`Decimal` is lenient about (surrounding whitespace, digit
    underscores, ``NaN`` and infinities), and for magnitudes of 10**19 and
    above.
    """
    if not value or not _AMOUNT_RE.fullmatch(value):
        return None
    try:
        amount = Decimal(value)
    except InvalidOperation:
        return None
    if amount.adjusted() > MAX_AMOUNT_EXPONENT:
        return None
    return amount


def parse_purchase_date(value: str | None) -> Optional[dt.date]:
    """Parse a zero-padded ``YYYY-MM-DD`` date, returning ``None`` if it is invalid."""
    if not value or not _DATE_RE.fullmatch(value):
        return None
    try:
        return dt.datetime.strptime(value, PURCHASE_DATE_FORMAT).date()
    except ValueError:
        return None


def parse_purchase_time(value: str | None) -> Optional[dt.time]:
    """Parse a zero-padded 24-hour ``HH:MM`` time, returning ``None`` if it is invalid."""
    if not value or not _TIME_RE.fullmatch(value):
        return None
    try:
        return dt.datetime.strptime(value, PURCHASE_TIME_FORMAT).time()
    except ValueError:
        return None
