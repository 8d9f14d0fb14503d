"""
Pytest configuration and shared fixtures.
"""

import pytest

from bahttext.converter import BahtTextConverter, ConverterConfig
from bahttext.rounding import RoundingMode


@pytest.fixture
def converter():
    return BahtTextConverter()


@pytest.fixture
def overflow_converter():
    return BahtTextConverter(ConverterConfig(allow_overflow=True))


@pytest.fixture
def quiet_converter():
    return BahtTextConverter(ConverterConfig(warn_on_clamp=False))


@pytest.fixture(params=list(RoundingMode))
def rounding_mode(request):
    return request.param
