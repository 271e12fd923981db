"""
Unit tests for cell value normalization.
"""
import math

import pytest

from core.normalize import normalize_number, parse_ratio, safe_get_string


@pytest.mark.parametrize("raw", ["", None, "abc", "   ", float("nan"), "NaN", "Infinity", "-inf", "1e999"])
def test_normalize_number_defaults_to_zero(raw):
    assert normalize_number(raw) == 0


def test_normalize_number_strips_separators():
    assert normalize_number("1,234.50") == 1234.5
    assert normalize_number("  2,000 ") == 2000
    assert normalize_number("1,000,000") == 1000000


def test_normalize_number_accepts_numbers():
    assert normalize_number(12.5) == 12.5
    assert normalize_number(7) == 7
    assert normalize_number("-3.25") == -3.25
    assert normalize_number("1e3") == 1000


def test_normalize_number_rejects_underscored_digits():
    assert normalize_number("1_000") == 0


def test_normalize_number_always_finite():
    for raw in ["1,2,3", "$5", "12abc", "--1", ".", "1.2.3"]:
        assert math.isfinite(normalize_number(raw))


def test_parse_ratio_keeps_empty_distinct_from_zero():
    assert parse_ratio("") is None
    assert parse_ratio(None) is None
    assert parse_ratio("n/a") is None
    assert parse_ratio("0") == 0.0
    assert parse_ratio(" 0.7 ") == 0.7


def test_safe_get_string():
    row = {"Item": "Lamp", "Tax": float("nan")}
    assert safe_get_string(row, "Item") == "Lamp"
    assert safe_get_string(row, "Tax") == ""
    assert safe_get_string(row, "Missing", "x") == "x"
