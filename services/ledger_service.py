"""
Ledger working-set service.
Loads the ledger table, applies field edits, imports and exports line items.
"""
from typing import List, Optional

from core.codec import decode_row, encode_row
from core.exceptions import DataNotFoundError, ParsingError, ValidationError
from core.exporters import create_export_filename, export_csv, export_to_excel
from core.financials import compute_financials
from core.logger import setup_logger
from core.metrics import filter_items, summarize
from core.normalize import normalize_number
from core.parsing import drop_footer_rows, parse_csv_text
from core.schema import (
    DERIVED_FIELDS,
    NUMERIC_FIELDS,
    TEXT_FIELDS,
    LedgerSummary,
    LineItem,
    blank_line_item,
)
from services.ledger_store import TableStore

logger = setup_logger(__name__)


class LedgerService:
    """In-memory working set of line items backed by a TableStore."""

    def __init__(self, store: TableStore):
        """
        Initialize ledger service.

        Args:
            store: Backend the table is loaded from and saved to
        """
        self.store = store
        self._items: List[LineItem] = []

    @property
    def items(self) -> List[LineItem]:
        return list(self._items)

    def load(self) -> List[LineItem]:
        """
        Replace the working set with the stored table.
        Footer rows are dropped before decoding.

        Raises:
            TableReadError: If the backend cannot read the table
        """
        raw_rows = self.store.load_table()
        data_rows = drop_footer_rows(raw_rows)
        dropped = len(raw_rows) - len(data_rows)
        if dropped:
            logger.debug(f"Dropped {dropped} footer rows")

        self._items = [compute_financials(decode_row(row)) for row in data_rows]
        logger.info(f"Working set loaded: {len(self._items)} line items")
        return self.items

    def save(self) -> int:
        """
        Write the working set back to the backend.

        Raises:
            TableWriteError: If the backend cannot write the table
        """
        rows = [encode_row(item) for item in self._items]
        return self.store.save_table(rows)

    def add_row(self) -> LineItem:
        """Insert a blank line at the top of the working set."""
        item = compute_financials(blank_line_item())
        self._items.insert(0, item)
        return item

    def get_row(self, index: int) -> LineItem:
        if not 0 <= index < len(self._items):
            raise DataNotFoundError(
                f"No line item at index {index}",
                details={"index": index, "count": len(self._items)}
            )
        return self._items[index]

    def update_row(self, index: int, field: str, value: str) -> LineItem:
        """
        Edit one field of a line item and recompute its financials.

        Args:
            index: Position in the working set
            field: LineItem field name
            value: New value as entered; amounts are normalized

        Returns:
            Updated line item

        Raises:
            DataNotFoundError: If index is out of range
            ValidationError: If field is unknown or derived
        """
        current = self.get_row(index)

        if field in DERIVED_FIELDS:
            raise ValidationError(
                f"Field '{field}' is computed and cannot be edited",
                details={"field": field}
            )
        if field in TEXT_FIELDS:
            new_value = value
        elif field in NUMERIC_FIELDS:
            new_value = normalize_number(value)
        else:
            raise ValidationError(
                f"Unknown field '{field}'",
                details={"field": field}
            )

        updated = compute_financials(current.model_copy(update={field: new_value}))
        self._items[index] = updated
        logger.debug(f"Updated row {index}: {field}={new_value!r}")
        return updated

    def import_csv(self, content: bytes, filename: str = "upload.csv") -> int:
        """
        Prepend line items parsed from an uploaded CSV file.
        Footer rows and rows without an item description are skipped.

        Returns:
            Number of imported line items

        Raises:
            ParsingError: If the file is not UTF-8 CSV
        """
        try:
            text = content.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise ParsingError(
                f"Import failed: {filename} is not UTF-8 text",
                details={"filename": filename, "error": str(e)}
            )

        decoded = [decode_row(row) for row in drop_footer_rows(parse_csv_text(text))]
        parsed = [compute_financials(item) for item in decoded if item.item.strip()]

        self._items = parsed + self._items
        logger.info(f"Imported {len(parsed)} rows from {filename}")
        return len(parsed)

    def export_csv(self) -> str:
        return export_csv(self._items)

    def export_excel(self, output_path: Optional[str] = None) -> str:
        """Write the working set to a spreadsheet; returns the file path."""
        output_path = output_path or create_export_filename()
        return export_to_excel(self._items, output_path)

    def search(self, query: Optional[str]) -> List[LineItem]:
        return filter_items(self._items, query)

    def summary(self, query: Optional[str] = None) -> LedgerSummary:
        """Totals over the items matching query (all items when blank)."""
        return summarize(self.search(query))
