"""
Satang rounding.

Reduces the fractional digits of an amount to exactly two satang digits.
Only the third fractional digit takes part in the rounding decision; any
further digits are ignored (0.9949 → 99 under NEAREST).

When rounding reaches 100 satang the overflow policy decides what happens:
    allow_overflow=True   → "00" and a carry into the baht amount
    allow_overflow=False  → clamped to "99"; the clamp is reported back
                            through RoundedSatang.clamped, never logged here.
"""

from dataclasses import dataclass

from django.db import models

SATANG_DIGITS = 2
MAX_SATANG = 99


class RoundingMode(models.TextChoices):
    NEAREST = "nearest", "ปัดครึ่งขึ้น"
    TOWARD_ZERO = "toward_zero", "ปัดทิ้ง"
    AWAY_FROM_ZERO = "away_from_zero", "ปัดขึ้น"


DEFAULT_ROUNDING_MODE = RoundingMode.NEAREST


@dataclass(frozen=True)
class RoundedSatang:
    satang: str
    carry: bool = False
    clamped: bool = False


def _round_up(mode, deciding_digit):
    if mode == RoundingMode.TOWARD_ZERO:
        return False
    if mode == RoundingMode.AWAY_FROM_ZERO:
        return deciding_digit > 0
    if mode == RoundingMode.NEAREST:
        return deciding_digit >= 5
    raise ValueError(f"Unknown rounding mode: {mode!r}")


def round_satang(fraction, mode, allow_overflow):
    """
    Round a fractional digit string to two satang digits.

    fraction is the raw digit string after the decimal point (may be empty).
    """
    if len(fraction) <= SATANG_DIGITS:
        # Exact: "" → "00", "5" → "50", "05" → "05"
        return RoundedSatang(fraction.ljust(SATANG_DIGITS, "0"))

    value = int(fraction[:SATANG_DIGITS])
    if _round_up(mode, int(fraction[SATANG_DIGITS])):
        value += 1

    if value > MAX_SATANG:
        if allow_overflow:
            return RoundedSatang("00", carry=True)
        return RoundedSatang(f"{MAX_SATANG:02d}", clamped=True)

    return RoundedSatang(f"{value:02d}")
