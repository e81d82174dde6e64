"""Money / rounding helpers.

Centralized so every conversion path uses identical rounding semantics.
"""

from __future__ import annotations
from decimal import Context, Decimal, ROUND_HALF_UP

_FOUR_PLACES = Decimal("0.0001")
# Wide enough to quantize any finite float to 4 places.
_WIDE = Context(prec=400)


def round4(value: float) -> float:
    return float(
        Decimal(str(value)).quantize(_FOUR_PLACES, rounding=ROUND_HALF_UP, context=_WIDE)
    )
