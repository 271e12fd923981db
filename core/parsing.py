"""
CSV parsing for ledger tables.
Reads heterogeneous text tables into raw rows, tolerating ragged lines.
"""
import csv
import io
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

import pandas as pd

from core.exceptions import ParsingError
from core.logger import setup_logger

logger = setup_logger(__name__)

FOOTER_LABEL = "totals"

TableSource = Union[str, Path, io.StringIO]


def _read_records(source: TableSource) -> List[List[str]]:
    if isinstance(source, io.StringIO):
        return list(csv.reader(source))
    with open(source, newline="", encoding="utf-8-sig") as f:
        return list(csv.reader(f))


def _fit_row(row: List[str], width: int) -> List[Optional[str]]:
    """Pad a short row with missing cells or cut a long one to width."""
    if len(row) < width:
        return row + [None] * (width - len(row))
    return row[:width]


def read_table(source: TableSource) -> pd.DataFrame:
    """
    Parse a delimited table with a header row into a string DataFrame.

    Cells are kept as text. Blank lines are skipped, short rows are padded
    with missing values and long rows are truncated to the header width.

    Args:
        source: Path to a CSV file or a text buffer

    Returns:
        DataFrame with one column per header cell

    Raises:
        ParsingError: If the content is not a readable CSV table
    """
    try:
        records = [row for row in _read_records(source) if row]
    except (csv.Error, UnicodeDecodeError) as e:
        logger.error(f"Failed to parse table: {e}")
        raise ParsingError(
            "Invalid CSV table",
            details={"error": str(e)}
        )

    if not records:
        logger.info("Table is empty")
        return pd.DataFrame()

    header, body = records[0], records[1:]
    width = len(header)

    short_rows = sum(1 for row in body if len(row) < width)
    long_rows = sum(1 for row in body if len(row) > width)
    if short_rows:
        logger.debug(f"Padded {short_rows} rows shorter than the header ({width} columns)")
    if long_rows:
        logger.warning(f"Truncated {long_rows} rows longer than the header ({width} columns)")

    df = pd.DataFrame([_fit_row(row, width) for row in body], columns=header, dtype=object)
    logger.debug(f"Parsed {len(df)} rows, columns: {list(df.columns)}")
    return df


def to_raw_rows(df: pd.DataFrame) -> List[Dict[str, str]]:
    """
    Convert a parsed table to a list of column -> text dictionaries.
    Cells missing from short rows are left out of the dictionary.
    """
    rows = []
    for record in df.to_dict(orient="records"):
        rows.append({
            str(column): str(value)
            for column, value in record.items()
            if not pd.isna(value)
        })
    return rows


def parse_csv_text(text: str) -> List[Dict[str, str]]:
    """Parse CSV text straight to raw rows."""
    return to_raw_rows(read_table(io.StringIO(text)))


def is_footer_row(row: Mapping[str, Any]) -> bool:
    """True for the summary line whose Item cell reads "Totals"."""
    item = row.get("Item")
    if item is None:
        return False
    return str(item).strip().lower() == FOOTER_LABEL


def drop_footer_rows(rows: Iterable[Mapping[str, Any]]) -> List[Mapping[str, Any]]:
    """Remove summary/footer rows from a raw table."""
    return [row for row in rows if not is_footer_row(row)]
