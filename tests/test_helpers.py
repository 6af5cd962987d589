import datetime as dt
from decimal import Decimal

from receipt_points.utils.helpers import parse_amount, parse_purchase_date, parse_purchase_time


def test_parse_amount_keeps_exact_cents():
    assert parse_amount("35.35") == Decimal("35.35")


def test_parse_amount_invalid_returns_none():
    assert parse_amount("not-a-number") is None
    assert parse_amount("") is None
    assert parse_amount(None) is None


def test_parse_amount_rejects_non_finite_values():
    assert parse_amount("NaN") is None
    assert parse_amount("-Infinity") is None


def test_parse_amount_rejects_huge_exponents():
    assert parse_amount("1e999999") is None


def test_parse_purchase_date():
    assert parse_purchase_date("2022-03-20") == dt.date(2022, 3, 20)
    assert parse_purchase_date("2022-13-01") is None
    assert parse_purchase_date("2022-03-20T10:00") is None


def test_parse_purchase_time():
    assert parse_purchase_time("14:33") == dt.time(14, 33)
    assert parse_purchase_time("14:60") is None
    assert parse_purchase_time("14:33:00") is None


def test_parse_amount_rejects_whitespace_and_underscores():
    assert parse_amount(" 12.00 ") is None
    assert parse_amount("12.00\n") is None
    assert parse_amount("1_000") is None


def test_parse_amount_accepts_plain_decimal_forms():
    assert parse_amount("-3.50") == Decimal("-3.50")
    assert parse_amount("12") == Decimal("12")
    assert parse_amount(".25") == Decimal("0.25")
    assert parse_amount("1e2") == Decimal("100")


def test_parse_purchase_date_requires_zero_padding():
    assert parse_purchase_date("2022-1-1") is None
    assert parse_purchase_date("2022-01- 1") is None
    assert parse_purchase_date("2022-01-01") == dt.date(2022, 1, 1)


def test_parse_purchase_time_requires_zero_padding():
    assert parse_purchase_time("14:5") is None
    assert parse_purchase_time("4:05") is None
    assert parse_purchase_time("14: 5") is None
    assert parse_purchase_time("04:05") == dt.time(4, 5)
