"""Half-up rounding for displayed values and scores.

Python's ``round`` rounds halves to even (``round(12.5) == 12``); reports
round halves up so that 1250 ms shows as 1.3 s. Rounding goes through the
shortest decimal repr of the float, so 2.05 rounds to 2.1 even though its
binary value sits just below 2.05.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, ndigits: int = 0) -> float:
    quantum = Decimal(1).scaleb(-ndigits)
    return float(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))
