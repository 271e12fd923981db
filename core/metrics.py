"""
Search and aggregate figures over the working set.
"""
from typing import List, Optional

from core.financials import has_sale
from core.schema import LedgerSummary, LineItem


def filter_items(items: List[LineItem], query: Optional[str]) -> List[LineItem]:
    """
    Case-insensitive search over item, invoice and marketplace.
    A blank query returns every item.
    """
    if not query or not query.strip():
        return list(items)

    q = query.lower()
    return [
        item for item in items
        if q in item.item.lower()
        or q in item.invoice.lower()
        or q in item.marketplace.lower()
    ]


def summarize(items: List[LineItem]) -> LedgerSummary:
    """
    Roll up totals and ratios for a set of line items.

    Args:
        items: Line items to aggregate

    Returns:
        LedgerSummary; ratios are 0 when their denominator is 0
    """
    sold = [item for item in items if has_sale(item)]

    paid = sum(item.paid_total for item in items)
    gross = sum(item.sold_for for item in items)
    realized = sum(item.realized_profit for item in items)

    return LedgerSummary(
        line_count=len(items),
        sold_count=len(sold),
        paid_total=paid,
        gross_sales=gross,
        realized_profit=realized,
        marketplace_fees=sum(item.marketplace_fees for item in items),
        shipping_cost=sum(item.shipping_cost for item in items),
        roi=realized / paid if paid else 0.0,
        sell_through=len(sold) / len(items) if items else 0.0,
        avg_ticket=gross / len(sold) if sold else 0.0,
    )
