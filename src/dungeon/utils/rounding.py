from __future__ import annotations

import math


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, sending exact halves away from zero.

    Unlike ``round()``, 2.5 becomes 3 and -2.5 becomes -3.
    """
    magnitude = abs(value)
    whole = math.floor(magnitude)
    # Subtracting the floor is exact; adding 0.5 first is not.
    if magnitude - whole >= 0.5:
        whole += 1
    return -whole if value < 0 else whole
