"""
Unit tests for CSV table parsing.
"""
import io

import pytest

from core.parsing import drop_footer_rows, is_footer_row, parse_csv_text, read_table
from core.schema import CSV_HEADERS

HEADER = ",".join(CSV_HEADERS)


def test_parse_keeps_quoted_separators(sample_csv):
    rows = parse_csv_text(sample_csv)
    assert len(rows) == 3
    assert rows[0]["Item"] == "Lamp, brass"
    assert rows[0]["Paid_Total"] == "51.5"


def test_cells_stay_text():
    rows = parse_csv_text(HEADER + "\nA-01,2024-01-01,Clock,007,,,,,,,,,,\n")
    assert rows[0]["Hammer"] == "007"
    assert rows[0]["Tax"] == ""


def test_short_rows_are_tolerated():
    rows = parse_csv_text(HEADER + "\nINV-1,2024-01-01,Clock,10\n")
    assert len(rows) == 1
    assert rows[0]["Hammer"] == "10"
    assert not rows[0].get("Realized_ROI")


def test_long_rows_are_truncated():
    text = HEADER + "\nINV-1,2024-01-01,Clock" + ",1" * 11 + ",extra,more\nINV-2,,Desk\n"
    rows = parse_csv_text(text)
    assert len(rows) == 2
    assert rows[0]["Realized_ROI"] == "1"
    assert set(rows[0]) == set(CSV_HEADERS)
    assert rows[1]["Item"] == "Desk"


def test_blank_lines_are_skipped():
    rows = parse_csv_text(HEADER + "\n\nINV-1,,Clock\n\n")
    assert len(rows) == 1


def test_empty_input():
    assert parse_csv_text("") == []
    assert read_table(io.StringIO("")).empty


@pytest.mark.parametrize("label", ["Totals", "totals", "  TOTALS  ", "ToTaLs\t"])
def test_footer_detection(label):
    assert is_footer_row({"Item": label, "Paid_Total": "999"})


def test_non_footer_rows():
    assert not is_footer_row({"Item": "Totals cabinet"})
    assert not is_footer_row({"Invoice": "Totals"})
    assert not is_footer_row({})


def test_drop_footer_rows(sample_csv):
    rows = drop_footer_rows(parse_csv_text(sample_csv))
    assert [row["Item"] for row in rows] == ["Lamp, brass", "Chair"]
