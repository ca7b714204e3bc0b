from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_half_away(value: float) -> float:
    """Round to the nearest whole unit, ties away from zero (2.5 -> 3, -2.5 -> -3).

    ``round()`` uses banker's rounding, which would drift from the published figures.
    """
    # + 0.0 so that -0.3 comes back as 0.0 rather than -0.0
    return float(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP)) + 0.0


def round_to_cents(value: float) -> float:
    return round_half_away(value * 100) / 100
