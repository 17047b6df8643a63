from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, digits: int = 0) -> float:
    """Round like a spreadsheet does: halves always go up (2.5 -> 3, 0.45 -> 0.5).

    Built-in ``round`` uses banker's rounding, which disagrees with the
    amounts shown on exported payroll sheets.
    """

    exp = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(exp, rounding=ROUND_HALF_UP))


def to_whole_amount(value: float) -> int:
    return int(round_half_up(value))
