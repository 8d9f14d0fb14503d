"""
Thai baht text template filters.

Usage in templates:
    {% load baht_filters %}
    {{ 12500|baht_text }}                   → "หนึ่งหมื่นสองพันห้าร้อยบาทถ้วน"
    {{ "100.999"|baht_text:"toward_zero" }} → "หนึ่งร้อยบาทเก้าสิบเก้าสตางค์"

Rounding, overflow and clamp warnings follow the BAHTTEXT_* settings.
"""

import logging

from django import template

from bahttext.converter import BahtTextConverter
from bahttext.rounding import RoundingMode

logger = logging.getLogger(__name__)

register = template.Library()


@register.filter
def baht_text(value, rounding_mode=None):
    """
    Convert a number to Thai baht words.

    Examples:
        100     → "หนึ่งร้อยบาทถ้วน"
        1500.50 → "หนึ่งพันห้าร้อยบาทห้าสิบสตางค์"
        0       → "ศูนย์บาทถ้วน"

    Values that cannot be read are rendered unchanged.
    """
    if value is None or value == "":
        return ""

    converter = BahtTextConverter.from_settings()
    if rounding_mode:
        converter = converter.with_options(rounding_mode=RoundingMode(rounding_mode))

    try:
        return converter.text(value)
    except (ValueError, TypeError) as exc:
        logger.debug("baht_text could not convert %r: %s", value, exc)
        return str(value)
