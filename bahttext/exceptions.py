"""
Errors raised while turning an amount into Thai text.

All of them are ValueErrors so callers that already guard numeric parsing
with ``except ValueError`` keep working. Each carries a short machine kind,
the message, and a hint telling the user what to change.
"""


class BahtTextError(ValueError):
    kind = "error"
    default_hint = ""

    def __init__(self, message, hint=None):
        super().__init__(message)
        self.message = message
        self.hint = self.default_hint if hint is None else hint

    def __str__(self):
        return self.message


class InvalidInput(BahtTextError):
    kind = "invalid_input"
    default_hint = "Use digits with at most one decimal point, e.g. 1500.50"


class ExceedsMaxValue(BahtTextError):
    kind = "exceeds_max_value"
    default_hint = "Split the amount or raise BAHTTEXT_MAX_INTEGER_DIGITS"


class UnsupportedType(BahtTextError, TypeError):
    kind = "unsupported_type"
    default_hint = "Pass a str, int, float or Decimal"
