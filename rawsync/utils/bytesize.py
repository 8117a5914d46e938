from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

# (smallest value for the unit, divisor, label)
THRESHOLDS: tuple[tuple[int, int, str], ...] = (
    (1, 1, " Byte"),
    (2, 1, " Bytes"),
    (1024, 1024, " KB"),
    (1024**2, 1024**2, " MB"),
    (1024**3, 1024**3, " GB"),
    (1024**4, 1024**4, " TB"),
    (1024**5, 1024**5, " PB"),
    (1024**6, 1024**6, " EB"),
)

_CENTS = Decimal("0.01")


def to_byte_size(value: int) -> str:
    """Return ``value`` as a human-readable size, e.g. ``5.00 MB``.

    Two decimals, midpoints rounded away from zero.
    """
    if value == 0:
        return "0 Bytes"
    if value < 0:
        return "-" + to_byte_size(-value)
    for threshold, divisor, label in reversed(THRESHOLDS):
        if value >= threshold:
            amount = (Decimal(value) / Decimal(divisor)).quantize(_CENTS, rounding=ROUND_HALF_UP)
            return f"{amount}{label}"
    raise ValueError(f"Cannot format byte count {value!r}")
