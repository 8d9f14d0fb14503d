"""
Input collaborators: type coercion, sanitization and bound checking.

These run before the formatter and are the only place user-facing input
errors come from:

    parse_amount(" 1,500.5 ")   → ("1500", "5")
    parse_amount(12500)         → ("12500", "")
    parse_amount(100.5)         → ("100", "50")
    parse_amount("1.2.3")       → InvalidInput
    parse_amount([1, 2])        → UnsupportedType
"""

import re
from decimal import Decimal

from .exceptions import ExceedsMaxValue, InvalidInput, UnsupportedType

MAX_INTEGER_DIGITS = 19

_IGNORED_CHARS = re.compile(r"[\s_,]")
_AMOUNT_CHARS = re.compile(r"[0-9.]+")


def to_decimal_string(amount):
    """
    Render a numeric value as a plain decimal string.

    Floats are rendered with exactly two fractional digits; ints and Decimals
    keep their exact digits.
    """
    if isinstance(amount, str):
        return amount
    # bool is an int subclass but never an amount
    if isinstance(amount, bool):
        raise UnsupportedType(f"Unsupported type: {type(amount).__name__}")
    if isinstance(amount, int):
        try:
            return str(amount)
        except ValueError as exc:
            # int too long for str() under the interpreter digit limit
            raise ExceedsMaxValue(f"Amount is too large: {amount.bit_length()}-bit integer") from exc
    if isinstance(amount, float):
        return f"{amount:.2f}"
    if isinstance(amount, Decimal):
        if not amount.is_finite():
            raise InvalidInput(f"Not a finite amount: {amount}")
        return format(amount, "f")
    raise UnsupportedType(f"Unsupported type: {type(amount).__name__}")


def sanitize(text):
    """
    Clean a decimal string and split it into (integer_part, fraction_part).

    Whitespace, underscores and thousands separators are dropped, a leading
    sign is stripped and leading zeros of the integer part are removed.
    """
    cleaned = _IGNORED_CHARS.sub("", text)
    if cleaned[:1] in ("+", "-"):
        cleaned = cleaned[1:]

    if not cleaned or cleaned == ".":
        raise InvalidInput(f"Empty amount: {text!r}")
    if not _AMOUNT_CHARS.fullmatch(cleaned):
        raise InvalidInput(f"Invalid characters in amount: {text!r}")
    if cleaned.count(".") > 1:
        raise InvalidInput(
            f"Multiple decimal points in amount: {text!r}",
            hint="Use ',' only as a thousands separator and '.' once for satang",
        )

    integer_part, _, fraction_part = cleaned.partition(".")
    integer_part = integer_part.lstrip("0") or "0"
    return integer_part, fraction_part


def check_bounds(integer_part, max_digits=MAX_INTEGER_DIGITS):
    if len(integer_part) > max_digits:
        raise ExceedsMaxValue(
            f"Amount has {len(integer_part)} integer digits; at most {max_digits} are supported"
        )


def parse_amount(amount, max_digits=MAX_INTEGER_DIGITS):
    """Coerce, sanitize and bound-check an amount. Returns (integer_part, fraction_part)."""
    integer_part, fraction_part = sanitize(to_decimal_string(amount))
    check_bounds(integer_part, max_digits)
    return integer_part, fraction_part
