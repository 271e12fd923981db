"""
Storage backends for the ledger table.
A backend moves raw textual rows in and out of persistent storage.
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Mapping

import pandas as pd

from core.exceptions import ParsingError, TableReadError, TableWriteError
from core.logger import setup_logger
from core.parsing import read_table, to_raw_rows
from core.schema import CSV_HEADERS

logger = setup_logger(__name__)


class TableStore(ABC):
    """Bulk load/save of the raw ledger table."""

    @abstractmethod
    def load_table(self) -> List[Dict[str, str]]:
        """Return every data row as a column -> text mapping."""

    @abstractmethod
    def save_table(self, rows: List[Mapping[str, str]]) -> int:
        """Replace the stored table with rows; return the number written."""


class LocalTableStore(TableStore):
    """Ledger table kept as a CSV file on the local filesystem."""

    def __init__(self, path: str):
        self.path = Path(path)

    def load_table(self) -> List[Dict[str, str]]:
        """
        Read the CSV file into raw rows.

        Raises:
            TableReadError: If the file is missing or cannot be parsed
        """
        if not self.path.exists():
            raise TableReadError(
                f"Unable to read {self.path.name}",
                details={"path": str(self.path), "error": "file not found"}
            )

        logger.info(f"Loading ledger table from {self.path}")

        try:
            rows = to_raw_rows(read_table(self.path))
        except ParsingError as e:
            raise TableReadError(
                f"Unable to read {self.path.name}",
                details={"path": str(self.path), **e.details}
            )
        except OSError as e:
            logger.error(f"Failed to read {self.path}: {e}")
            raise TableReadError(
                f"Unable to read {self.path.name}",
                details={"path": str(self.path), "error": str(e)}
            )

        logger.info(f"Loaded {len(rows)} rows from {self.path.name}")
        return rows

    def save_table(self, rows: List[Mapping[str, str]]) -> int:
        """
        Write raw rows to the CSV file, header first.

        Raises:
            TableWriteError: If the file cannot be written
        """
        df = pd.DataFrame(list(rows), columns=CSV_HEADERS)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            df.to_csv(self.path, index=False, lineterminator="\n")
        except OSError as e:
            logger.error(f"Failed to write {self.path}: {e}")
            raise TableWriteError(
                f"Unable to write {self.path.name}",
                details={"path": str(self.path), "error": str(e)}
            )

        logger.info(f"Saved {len(df)} rows to {self.path}")
        return len(df)
