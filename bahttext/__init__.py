"""
Thai baht text: read monetary amounts aloud in Thai.

    from bahttext import baht_text
    baht_text("147521.19")  → "หนึ่งแสนสี่หมื่นเจ็ดพันห้าร้อยยี่สิบเอ็ดบาทสิบเก้าสตางค์"
"""

from .converter import DEFAULT_CONFIG, BahtTextConverter, ConverterConfig, baht_text
from .exceptions import BahtTextError, ExceedsMaxValue, InvalidInput, UnsupportedType
from .formatter import ConversionResult, convert
from .rounding import DEFAULT_ROUNDING_MODE, RoundingMode

__all__ = [
    "BahtTextConverter",
    "ConverterConfig",
    "DEFAULT_CONFIG",
    "baht_text",
    "convert",
    "ConversionResult",
    "RoundingMode",
    "DEFAULT_ROUNDING_MODE",
    "BahtTextError",
    "InvalidInput",
    "ExceedsMaxValue",
    "UnsupportedType",
]
