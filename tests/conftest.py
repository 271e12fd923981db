"""
Shared test setup.
Points every storage setting at a scratch directory before app modules load.
"""
import os
import tempfile

import pytest

from core.schema import CSV_HEADERS

_SCRATCH = tempfile.mkdtemp(prefix="sot-ledger-tests-")
os.environ.setdefault("LEDGER_PATH", os.path.join(_SCRATCH, "vista-sot-master.csv"))
os.environ.setdefault("UPLOAD_DIR", os.path.join(_SCRATCH, "uploads"))
os.environ.setdefault("STORAGE_PATH", os.path.join(_SCRATCH, "files"))


SAMPLE_CSV = (
    ",".join(CSV_HEADERS) + "\n"
    "INV-1,2024-03-01,\"Lamp, brass\",40,6,2,3.5,51.5,eBay,100,10,5,0,\n"
    "INV-2,2024-03-02,Chair,20,3,1,2,26,,0,0,0,0,\n"
    ",,Totals,60,9,3,5.5,77.5,,100,10,5,35,\n"
)


@pytest.fixture
def sample_csv() -> str:
    return SAMPLE_CSV


@pytest.fixture
def ledger_file(tmp_path, sample_csv):
    path = tmp_path / "ledger.csv"
    path.write_text(sample_csv, encoding="utf-8")
    return path
