"""
Unit tests for row <-> LineItem conversion.
"""
from core.codec import decode_row, encode_row, format_number
from core.schema import CSV_HEADERS, LineItem


def _row(**overrides):
    row = {
        "Invoice": "INV-7",
        "Purchase_Date": "2024-05-01",
        "Item": "Brass lamp, pair",
        "Hammer": "40",
        "Buyer_Premium_15%": "6",
        "Lot_Fee": "2",
        "Tax": "3.5",
        "Paid_Total": "51.5",
        "Marketplace": "eBay",
        "Sold For": "100",
        "Marketplace_Fees": "10",
        "Shipping_Cost": "5",
        "Realized_Profit": "33.5",
        "Realized_ROI": "0.65",
    }
    row.update(overrides)
    return row


def test_decode_maps_columns_to_fields():
    item = decode_row(_row())
    assert item.invoice == "INV-7"
    assert item.purchase_date == "2024-05-01"
    assert item.item == "Brass lamp, pair"
    assert item.buyer_premium == 6
    assert item.paid_total == 51.5
    assert item.sold_for == 100
    assert item.realized_profit == 33.5
    assert item.realized_roi == 0.65


def test_decode_trims_invoice_only():
    item = decode_row(_row(Invoice="  INV-9 ", Item="  Chair "))
    assert item.invoice == "INV-9"
    assert item.item == "  Chair "


def test_decode_missing_columns_use_defaults():
    item = decode_row({"Invoice": "A", "Item": "Vase", "Hammer": "12"})
    assert item.hammer == 12
    assert item.purchase_date == ""
    assert item.marketplace == ""
    assert item.sold_for == 0
    assert item.realized_profit == 0
    assert item.realized_roi is None


def test_decode_normalizes_amounts():
    item = decode_row(_row(Hammer="1,234.50", Tax="", Lot_Fee="n/a"))
    assert item.hammer == 1234.5
    assert item.tax == 0
    assert item.lot_fee == 0


def test_decode_empty_roi_is_not_zero():
    assert decode_row(_row(Realized_ROI="")).realized_roi is None
    assert decode_row(_row(Realized_ROI="0")).realized_roi == 0


def test_encode_uses_header_order():
    row = encode_row(decode_row(_row()))
    assert list(row) == CSV_HEADERS


def test_encode_zero_amounts_are_written():
    row = encode_row(LineItem())
    assert row["Hammer"] == "0"
    assert row["Sold For"] == "0"
    assert row["Realized_Profit"] == "0"
    assert row["Realized_ROI"] == ""
    assert row["Invoice"] == ""


def test_round_trip():
    for raw in [_row(), _row(Realized_ROI="", **{"Sold For": "0"}), _row(Tax="0.07", Hammer="-3")]:
        assert encode_row(decode_row(raw)) == raw


def test_format_number():
    assert format_number(100.0) == "100"
    assert format_number(-0.0) == "0"
    assert format_number(12.5) == "12.5"
    assert format_number(0.1) == "0.1"
    assert format_number(float("nan")) == "0"


def test_non_numeric_roi_is_not_carried_through():
    item = decode_row(_row(Realized_ROI="70%"))
    assert item.realized_roi is None
    assert encode_row(item)["Realized_ROI"] == ""
