from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

_CENT = Decimal("0.01")


def round2(value: float) -> float:
    """Round half-up to 2 decimals on the shortest decimal repr of ``value``.

    ``round()`` works on the binary value and rounds half to even, which makes
    payroll figures like 2.675 come out as 2.67.
    """
    return float(Decimal(repr(float(value))).quantize(_CENT, rounding=ROUND_HALF_UP))


def as_amount(value: Any, default: float = 0.0) -> float:
    """Coerce a collaborator-supplied number; missing or junk becomes ``default``."""
    if value is None or value == "":
        return default
    try:
        number = float(Decimal(str(value)))
    except (InvalidOperation, TypeError, ValueError):
        return default
    if number != number or number in (float("inf"), float("-inf")):
        return default
    return number
