"""
Cell value normalization.
Turns loosely typed textual cells into finite numbers and clean strings.
"""
import math
from typing import Any, Mapping, Optional

import pandas as pd


def _is_missing(value: Any) -> bool:
    """True for None and pandas/NumPy missing scalars."""
    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        # Non-scalar values (lists, arrays) are never "missing"
        return False


def _parse_finite(text: str) -> Optional[float]:
    """Parse base-10 text into a finite float, or None."""
    # float() accepts "1_000"; plain decimal notation does not
    if "_" in text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def normalize_number(value: Any) -> float:
    """
    Coerce an arbitrary cell value into a finite number.

    Thousands-separator commas and surrounding whitespace are removed.
    Missing, empty, unparseable and non-finite input all become 0.0.

    Args:
        value: Raw cell value (string, number, None or NaN)

    Returns:
        Finite float, 0.0 when the value cannot be read as a number
    """
    if _is_missing(value):
        return 0.0

    text = str(value).replace(",", "").strip()
    if not text:
        return 0.0

    number = _parse_finite(text)
    return number if number is not None else 0.0


def parse_ratio(value: Any) -> Optional[float]:
    """
    Read a ratio cell, keeping "empty" distinct from zero.

    Args:
        value: Raw cell value

    Returns:
        Finite float, or None when the cell is empty or not a number
    """
    if _is_missing(value):
        return None

    text = str(value).strip()
    if not text:
        return None

    return _parse_finite(text)


def safe_get_string(row: Mapping[str, Any], key: str, default: str = "") -> str:
    """
    Safely read a text cell, returning default if missing or NaN.

    Args:
        row: Raw table row
        key: Column name
        default: Default string value

    Returns:
        String value or default
    """
    value = row.get(key, default)
    if _is_missing(value):
        return default
    return str(value)
