"""
Configured baht text converter.

A BahtTextConverter holds a frozen ConverterConfig; build one once and share
it freely between threads. There is no module-level switch to flip.

Usage:
    converter = BahtTextConverter.from_settings()
    converter.text(1500.5)                      → "หนึ่งพันห้าร้อยบาทห้าสิบสตางค์"

    strict = converter.with_options(rounding_mode=RoundingMode.TOWARD_ZERO)
    strict.convert("100.999")                   → ConversionResult(..., clamped=False)

    baht_text("100.995", ConverterConfig(allow_overflow=True))
    → "หนึ่งร้อยเอ็ดบาทถ้วน"
"""

import logging
from dataclasses import dataclass, replace

from django.core.exceptions import ImproperlyConfigured

from .formatter import convert
from .rounding import DEFAULT_ROUNDING_MODE, RoundingMode
from .sanitize import MAX_INTEGER_DIGITS, parse_amount

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConverterConfig:
    rounding_mode: RoundingMode = DEFAULT_ROUNDING_MODE
    allow_overflow: bool = False
    warn_on_clamp: bool = True
    max_integer_digits: int = MAX_INTEGER_DIGITS

    def __post_init__(self):
        # Accept plain setting strings such as "toward_zero"
        object.__setattr__(self, "rounding_mode", RoundingMode(self.rounding_mode))

    @classmethod
    def from_settings(cls):
        """Build a config from the BAHTTEXT_* Django settings."""
        from django.conf import settings

        mode = getattr(settings, "BAHTTEXT_ROUNDING_MODE", DEFAULT_ROUNDING_MODE)
        try:
            return cls(
                rounding_mode=mode,
                allow_overflow=getattr(settings, "BAHTTEXT_ALLOW_OVERFLOW", False),
                warn_on_clamp=getattr(settings, "BAHTTEXT_WARN_ON_CLAMP", True),
                max_integer_digits=getattr(settings, "BAHTTEXT_MAX_INTEGER_DIGITS", MAX_INTEGER_DIGITS),
            )
        except ValueError as exc:
            valid = ", ".join(RoundingMode.values)
            raise ImproperlyConfigured(
                f"BAHTTEXT_ROUNDING_MODE={mode!r} is not one of: {valid}"
            ) from exc


DEFAULT_CONFIG = ConverterConfig()


class BahtTextConverter:
    """Converts amounts to Thai baht text using one fixed configuration."""

    __slots__ = ("_config",)

    def __init__(self, config=DEFAULT_CONFIG):
        self._config = config

    def __repr__(self):
        return f"BahtTextConverter({self._config!r})"

    @property
    def config(self):
        return self._config

    @classmethod
    def from_settings(cls):
        return cls(ConverterConfig.from_settings())

    def with_options(self, **changes):
        """Return a new converter with some config fields replaced."""
        return BahtTextConverter(replace(self._config, **changes))

    def convert(self, amount):
        """
        Convert an amount and report whether satang had to be clamped.

        Raises InvalidInput, ExceedsMaxValue or UnsupportedType for bad input.
        """
        config = self._config
        integer_part, fraction_part = parse_amount(amount, config.max_integer_digits)
        result = convert(integer_part, fraction_part, config.rounding_mode, config.allow_overflow)

        if result.clamped and config.warn_on_clamp:
            logger.warning(
                "%s rounds to 100 satang, clamped to 99 satang. "
                "Set allow_overflow to carry the satang into baht.",
                amount,
            )
        return result

    def text(self, amount):
        return self.convert(amount).text


def baht_text(amount, config=DEFAULT_CONFIG):
    """Convert an amount to Thai baht text with an explicit config."""
    return BahtTextConverter(config).text(amount)
