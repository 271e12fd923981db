"""
Conversion between raw ledger table rows and LineItem records.
"""
import math
from typing import Any, Dict, Mapping

from core.normalize import normalize_number, parse_ratio, safe_get_string
from core.schema import COLUMN_FIELDS, CSV_HEADERS, NUMERIC_FIELDS, LineItem


def format_number(value: float) -> str:
    """
    Render a number the way it is written in the ledger file.

    Integral values have no fractional part ("100", "0"); everything else
    uses the shortest text that reads back to the same float ("12.5").
    """
    if not math.isfinite(value):
        return "0"
    if value == int(value) and abs(value) < 1e21:
        # int() also folds -0.0 into "0"
        return str(int(value))
    return repr(value)


def decode_row(row: Mapping[str, Any]) -> LineItem:
    """
    Build a fully populated LineItem from one raw table row.

    Missing columns take the field default: "" for text, 0 for amounts,
    None for the ROI ratio.

    Args:
        row: Mapping of column name to raw cell value

    Returns:
        LineItem
    """
    values: Dict[str, Any] = {}
    for column, field in COLUMN_FIELDS.items():
        if field in NUMERIC_FIELDS:
            values[field] = normalize_number(row.get(column))
        elif field == "realized_roi":
            values[field] = parse_ratio(row.get(column))
        else:
            values[field] = safe_get_string(row, column)

    values["invoice"] = values["invoice"].strip()
    return LineItem(**values)


def encode_row(item: LineItem) -> Dict[str, str]:
    """
    Serialize a LineItem back to a raw table row.

    Keys follow CSV_HEADERS order. Amounts are always written, so zero is
    "0"; a missing ROI is written as an empty cell.

    Args:
        item: Line item to serialize

    Returns:
        Ordered mapping of column name to cell text
    """
    row: Dict[str, str] = {}
    for column in CSV_HEADERS:
        field = COLUMN_FIELDS[column]
        value = getattr(item, field)
        if field in NUMERIC_FIELDS:
            row[column] = format_number(value)
        elif field == "realized_roi":
            row[column] = "" if value is None else format_number(value)
        else:
            row[column] = value
    return row
