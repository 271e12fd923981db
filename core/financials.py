"""
Derived financial metrics for a single line item.

Realized profit is computed with exact decimal arithmetic and rounded to
cents using ROUND_HALF_UP (commercial rounding): 10.005 -> 10.01.
"""
import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from core.schema import LineItem

CENTS = Decimal("0.01")

# Enough digits to subtract any two finite floats exactly
EXACT_PRECISION = 800


def _to_decimal(value: float) -> Decimal:
    # repr() is the shortest text that round-trips, so 0.1 stays 0.1
    return Decimal(repr(float(value)))


def round2(value: Decimal) -> float:
    """Round a decimal amount to cents, half away from zero."""
    with localcontext() as ctx:
        # Integer digits, two decimals and one for a rounding carry
        ctx.prec = max(ctx.prec, value.adjusted() + 4)
        return float(value.quantize(CENTS, rounding=ROUND_HALF_UP))


def has_sale(item: LineItem) -> bool:
    """A line counts as sold once it has a positive sale price."""
    return math.isfinite(item.sold_for) and item.sold_for > 0


def compute_financials(item: LineItem) -> LineItem:
    """
    Recompute realized profit and ROI for a line item.

    Sold lines get profit = sold_for - marketplace_fees - shipping_cost -
    paid_total (rounded to cents) and ROI = profit / paid_total when
    paid_total is non-zero. Unsold lines keep their existing profit and
    have no ROI. The input is not modified.

    Args:
        item: Line item to evaluate

    Returns:
        New LineItem with realized_profit and realized_roi updated
    """
    sold = has_sale(item)

    if sold:
        with localcontext() as ctx:
            ctx.prec = EXACT_PRECISION
            realized_profit = round2(
                _to_decimal(item.sold_for)
                - _to_decimal(item.marketplace_fees)
                - _to_decimal(item.shipping_cost)
                - _to_decimal(item.paid_total)
            )
    else:
        realized_profit = item.realized_profit

    realized_roi = None
    if sold and item.paid_total:
        realized_roi = realized_profit / item.paid_total

    return item.model_copy(update={
        "realized_profit": realized_profit,
        "realized_roi": realized_roi,
    })
