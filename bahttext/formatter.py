"""
Amount formatter: integer digits + fractional digits → Thai baht text.

    convert("147521", "19", RoundingMode.NEAREST, allow_overflow=False)
    → ConversionResult("หนึ่งแสนสี่หมื่นเจ็ดพันห้าร้อยยี่สิบเอ็ดบาทสิบเก้าสตางค์", False)

Inputs must already be sanitized (see sanitize.py). This module is pure: it
never reads settings and never logs; a clamp is returned to the caller.
"""

from typing import NamedTuple

from .digits import BAHT, EXACT, ONES_ED, SATANG, TENS_YI, ZERO, digit_word, unit_word
from .exceptions import InvalidInput
from .grouping import convert_digits
from .rounding import round_satang


class ConversionResult(NamedTuple):
    text: str
    clamped: bool = False


def to_digit_sequence(digits):
    """Return digits (a digit string or a sequence of ints) as a tuple of ints."""
    if isinstance(digits, str):
        if not digits.isascii() or not digits.isdigit():
            raise InvalidInput(f"Not a digit string: {digits!r}")
        return tuple(int(char) for char in digits)

    sequence = tuple(digits)
    for digit in sequence:
        if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit <= 9:
            raise InvalidInput(f"Not a digit: {digit!r}")
    return sequence


def increment_digits(digits):
    """
    Add one to a digit sequence, growing it when every digit carries.

    (9, 9, 9) → (1, 0, 0, 0)
    """
    result = list(digits)
    index = len(result) - 1
    while index >= 0:
        if result[index] < 9:
            result[index] += 1
            return tuple(result)
        result[index] = 0
        index -= 1
    return (1,) + tuple(result)


def satang_text(satang):
    """Read a two-digit satang string. Returns "" for "00"."""
    value = int(satang)
    tens, ones = divmod(value, 10)

    if value == 1:
        return digit_word(1)
    if value == 11:
        return unit_word(1) + ONES_ED
    if 12 <= value <= 19:
        return unit_word(1) + digit_word(ones)
    if tens >= 2 and ones == 1:
        tens_word = TENS_YI if tens == 2 else digit_word(tens)
        return tens_word + unit_word(1) + ONES_ED
    return convert_digits(to_digit_sequence(satang))


def convert(integer_digits, fraction_digits, mode, allow_overflow):
    """
    Convert a sanitized amount to Thai text.

    integer_digits: non-empty digit string or sequence of ints, no sign.
    fraction_digits: digit string after the decimal point, possibly empty.
    mode: a RoundingMode. allow_overflow: whether rounding may carry into baht.
    """
    digits = to_digit_sequence(integer_digits)
    if not digits:
        raise InvalidInput("Integer part is empty")
    if fraction_digits and not (fraction_digits.isascii() and fraction_digits.isdigit()):
        raise InvalidInput(f"Not a digit string: {fraction_digits!r}")

    rounded = round_satang(fraction_digits, mode, allow_overflow)
    if rounded.carry:
        digits = increment_digits(digits)

    text = (convert_digits(digits) or ZERO) + BAHT
    if rounded.satang == "00":
        text += EXACT
    else:
        text += (satang_text(rounded.satang) or ZERO) + SATANG

    return ConversionResult(text, rounded.clamped)
