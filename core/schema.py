"""
Pydantic models for ledger line items and API payloads.
Defines the 14-column tabular schema and its mapping to LineItem fields.
"""
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

# External column names, in file order
CSV_HEADERS: List[str] = [
    "Invoice",
    "Purchase_Date",
    "Item",
    "Hammer",
    "Buyer_Premium_15%",
    "Lot_Fee",
    "Tax",
    "Paid_Total",
    "Marketplace",
    "Sold For",
    "Marketplace_Fees",
    "Shipping_Cost",
    "Realized_Profit",
    "Realized_ROI",
]

# Column -> LineItem field, same order as CSV_HEADERS
COLUMN_FIELDS: Dict[str, str] = {
    "Invoice": "invoice",
    "Purchase_Date": "purchase_date",
    "Item": "item",
    "Hammer": "hammer",
    "Buyer_Premium_15%": "buyer_premium",
    "Lot_Fee": "lot_fee",
    "Tax": "tax",
    "Paid_Total": "paid_total",
    "Marketplace": "marketplace",
    "Sold For": "sold_for",
    "Marketplace_Fees": "marketplace_fees",
    "Shipping_Cost": "shipping_cost",
    "Realized_Profit": "realized_profit",
    "Realized_ROI": "realized_roi",
}

TEXT_FIELDS = frozenset({"invoice", "purchase_date", "item", "marketplace"})

NUMERIC_FIELDS = frozenset({
    "hammer",
    "buyer_premium",
    "lot_fee",
    "tax",
    "paid_total",
    "sold_for",
    "marketplace_fees",
    "shipping_cost",
    "realized_profit",
})

# Recomputed on every edit, never set directly
DERIVED_FIELDS = frozenset({"realized_roi"})


class LineItem(BaseModel):
    """One purchase/resale transaction."""
    invoice: str = ""
    purchase_date: str = ""
    item: str = ""
    hammer: float = 0.0
    buyer_premium: float = 0.0
    lot_fee: float = 0.0
    tax: float = 0.0
    paid_total: float = 0.0
    marketplace: str = ""
    sold_for: float = 0.0
    marketplace_fees: float = 0.0
    shipping_cost: float = 0.0
    realized_profit: float = 0.0
    realized_roi: Optional[float] = Field(
        default=None,
        description="Realized profit / paid total; None when not sold or nothing was paid"
    )


def blank_line_item() -> LineItem:
    """Template for a new, empty line."""
    return LineItem()


class RowEdit(BaseModel):
    """Single field edit coming from the editor."""
    field: str
    value: str = ""


class LedgerRows(BaseModel):
    """Working set as returned by the API."""
    rows: List[LineItem] = Field(default_factory=list)


class LedgerSummary(BaseModel):
    """Aggregate figures over a set of line items."""
    line_count: int = 0
    sold_count: int = 0
    paid_total: float = 0.0
    gross_sales: float = 0.0
    realized_profit: float = 0.0
    marketplace_fees: float = 0.0
    shipping_cost: float = 0.0
    roi: float = Field(default=0.0, description="Realized profit / cash outlay")
    sell_through: float = Field(default=0.0, description="Sold lines / all lines")
    avg_ticket: float = Field(default=0.0, description="Gross sales per sold line")


class UploadResult(BaseModel):
    """Reference to a stored attachment."""
    ok: bool = True
    url: str
    name: str
