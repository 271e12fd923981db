"""
Ledger exporters.
CSV export keeps the exact 14-column file shape; the spreadsheet export
writes typed cells with currency and percent formatting.
"""
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import pandas as pd

from core.codec import encode_row
from core.config import get_settings
from core.exceptions import ExportError
from core.logger import setup_logger
from core.schema import COLUMN_FIELDS, CSV_HEADERS, NUMERIC_FIELDS, LineItem

logger = setup_logger(__name__)


def export_csv(items: List[LineItem]) -> str:
    """
    Serialize line items to CSV text with the ledger header row.

    Args:
        items: Line items in output order

    Returns:
        CSV document
    """
    rows = [encode_row(item) for item in items]
    df = pd.DataFrame(rows, columns=CSV_HEADERS)
    logger.info(f"Exporting {len(df)} rows to CSV")
    return df.to_csv(index=False, lineterminator="\n")


def _typed_frame(items: List[LineItem]) -> pd.DataFrame:
    """Frame with real numbers instead of cell text, for spreadsheets."""
    records = [
        {column: getattr(item, field) for column, field in COLUMN_FIELDS.items()}
        for item in items
    ]
    return pd.DataFrame(records, columns=CSV_HEADERS)


def export_to_excel(
    items: List[LineItem],
    output_path: str,
    sheet_name: str = "SOT"
) -> str:
    """
    Export line items to an .xlsx workbook.

    Args:
        items: Line items in output order
        output_path: Output file path
        sheet_name: Worksheet name

    Returns:
        Path to created file

    Raises:
        ExportError: If the workbook cannot be written
    """
    logger.info(f"Exporting {len(items)} rows to {output_path}")

    output_df = _typed_frame(items)

    try:
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)

        with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
            output_df.to_excel(writer, sheet_name=sheet_name, index=False)

            workbook = writer.book
            worksheet = writer.sheets[sheet_name]

            money_format = workbook.add_format({"num_format": "#,##0.00"})
            percent_format = workbook.add_format({"num_format": "0.0%"})

            for idx, column in enumerate(output_df.columns):
                field = COLUMN_FIELDS[column]
                cells = output_df[column].fillna("").astype(str)
                max_len = max(
                    int(cells.str.len().max()) if len(output_df) else 0,
                    len(column)
                )
                width = min(max_len + 2, 50)
                if field in NUMERIC_FIELDS:
                    worksheet.set_column(idx, idx, width, money_format)
                elif field == "realized_roi":
                    worksheet.set_column(idx, idx, width, percent_format)
                else:
                    worksheet.set_column(idx, idx, width)

        logger.info(f"Successfully exported to {output_path}")
        return output_path

    except Exception as e:
        logger.error(f"Failed to export Excel: {e}")
        raise ExportError(
            "Failed to export to Excel",
            details={"output_path": output_path, "error": str(e)}
        )


def create_export_filename(base_path: Optional[str] = None) -> str:
    """
    Create timestamped spreadsheet filename.

    Args:
        base_path: Base directory path (defaults to configured storage path)

    Returns:
        Full output file path
    """
    if base_path is None:
        base_path = get_settings().storage_path

    Path(base_path).mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y-%m-%dT%H-%M-%S")
    filename = f"sot_ledger_export_{timestamp}.xlsx"

    return str(Path(base_path) / filename)
