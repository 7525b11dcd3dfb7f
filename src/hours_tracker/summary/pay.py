from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

_CENTS = Decimal("0.01")


def compute_pay(hours: float, rate: float) -> float:
    """hours * rate rounded half-up to cents.

    Goes through Decimal(str(..)) so 2.675 * 1 rounds to 2.68, not 2.67.
    Non-finite products come back unrounded.
    """
    amount = Decimal(str(hours)) * Decimal(str(rate))
    if not amount.is_finite():
        return float(amount)
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the cents
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        return float(amount.quantize(_CENTS, rounding=ROUND_HALF_UP))
