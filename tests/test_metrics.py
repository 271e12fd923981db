"""
Unit tests for search and summary figures.
"""
import pytest

from core.metrics import filter_items, summarize
from core.schema import LineItem


@pytest.fixture
def items():
    return [
        LineItem(invoice="INV-1", item="Brass Lamp", marketplace="eBay",
                 paid_total=50, sold_for=100, marketplace_fees=10, shipping_cost=5, realized_profit=35),
        LineItem(invoice="INV-2", item="Oak chair", marketplace="Facebook", paid_total=30),
        LineItem(invoice="LAMP-3", item="Rug", marketplace="", paid_total=20,
                 sold_for=40, marketplace_fees=4, shipping_cost=6, realized_profit=10),
    ]


def test_filter_blank_query_returns_all(items):
    assert filter_items(items, "") == items
    assert filter_items(items, "   ") == items
    assert filter_items(items, None) == items


def test_filter_matches_item_invoice_marketplace(items):
    assert [i.invoice for i in filter_items(items, "lamp")] == ["INV-1", "LAMP-3"]
    assert [i.invoice for i in filter_items(items, "FACE")] == ["INV-2"]
    assert filter_items(items, "nothing") == []


def test_summarize(items):
    summary = summarize(items)
    assert summary.line_count == 3
    assert summary.sold_count == 2
    assert summary.paid_total == 100
    assert summary.gross_sales == 140
    assert summary.realized_profit == 45
    assert summary.marketplace_fees == 14
    assert summary.shipping_cost == 11
    assert summary.roi == pytest.approx(0.45)
    assert summary.sell_through == pytest.approx(2 / 3)
    assert summary.avg_ticket == 70


def test_summarize_empty():
    summary = summarize([])
    assert summary.line_count == 0
    assert summary.roi == 0
    assert summary.sell_through == 0
    assert summary.avg_ticket == 0
