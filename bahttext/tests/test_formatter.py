"""Tests for the amount formatter: rounding carry, satang reading, assembly."""

import pytest

from bahttext.exceptions import InvalidInput
from bahttext.formatter import ConversionResult, convert, increment_digits, satang_text, to_digit_sequence
from bahttext.grouping import convert_digits
from bahttext.rounding import RoundingMode

NEAREST = RoundingMode.NEAREST


class TestScenarios:
    def test_six_digits_with_satang(self):
        assert convert("147521", "19", NEAREST, allow_overflow=False) == ConversionResult(
            "หนึ่งแสนสี่หมื่นเจ็ดพันห้าร้อยยี่สิบเอ็ดบาทสิบเก้าสตางค์", False
        )

    def test_one_million_exact(self):
        assert convert("1000000", "", NEAREST, False).text == "หนึ่งล้านบาทถ้วน"

    def test_telescoping_million(self):
        assert convert("1000000000000000000", "", NEAREST, False).text == "หนึ่งล้านล้านล้านบาทถ้วน"

    def test_several_groups(self):
        assert convert("1234567", "89", NEAREST, False).text == (
            "หนึ่งล้านสองแสนสามหมื่นสี่พันห้าร้อยหกสิบเจ็ดบาทแปดสิบเก้าสตางค์"
        )

    def test_clamped_without_overflow(self):
        assert convert("100", "995", NEAREST, allow_overflow=False) == ConversionResult(
            "หนึ่งร้อยบาทเก้าสิบเก้าสตางค์", True
        )

    def test_carried_with_overflow(self):
        assert convert("100", "995", NEAREST, allow_overflow=True) == ConversionResult(
            "หนึ่งร้อยเอ็ดบาทถ้วน", False
        )


class TestAssembly:
    @pytest.mark.parametrize(
        "integer, fraction, expected",
        [
            ("0", "", "ศูนย์บาทถ้วน"),
            ("0", "50", "ศูนย์บาทห้าสิบสตางค์"),
            ("147521", "00", "หนึ่งแสนสี่หมื่นเจ็ดพันห้าร้อยยี่สิบเอ็ดบาทถ้วน"),
            ("1000000", "25", "หนึ่งล้านบาทยี่สิบห้าสตางค์"),
            ("100", "01", "หนึ่งร้อยบาทหนึ่งสตางค์"),
            ("50", "05", "ห้าสิบบาทห้าสตางค์"),
            ("100", "11", "หนึ่งร้อยบาทสิบเอ็ดสตางค์"),
            ("100000001", "01", "หนึ่งร้อยล้านเอ็ดบาทหนึ่งสตางค์"),
            ("100", "21", "หนึ่งร้อยบาทยี่สิบเอ็ดสตางค์"),
            ("21", "25", "ยี่สิบเอ็ดบาทยี่สิบห้าสตางค์"),
            ("500200300", "00", "ห้าร้อยล้านสองแสนสามร้อยบาทถ้วน"),
            (
                "999999999",
                "99",
                "เก้าร้อยเก้าสิบเก้าล้านเก้าแสนเก้าหมื่นเก้าพันเก้าร้อยเก้าสิบเก้าบาทเก้าสิบเก้าสตางค์",
            ),
            ("1", "5", "หนึ่งบาทห้าสิบสตางค์"),
        ],
    )
    def test_text(self, integer, fraction, expected):
        assert convert(integer, fraction, NEAREST, False).text == expected

    def test_accepts_digit_tuples(self):
        assert convert((1, 0, 1), "", NEAREST, False).text == "หนึ่งร้อยเอ็ดบาทถ้วน"

    def test_deterministic(self):
        first = convert("9223372036854775807", "4567", NEAREST, True)
        assert convert("9223372036854775807", "4567", NEAREST, True) == first


class TestCarry:
    @pytest.mark.parametrize(
        "integer, expected",
        [
            ("0", "หนึ่งบาทถ้วน"),
            ("99", "หนึ่งร้อยบาทถ้วน"),
            ("199", "สองร้อยบาทถ้วน"),
            ("999", "หนึ่งพันบาทถ้วน"),
            ("999999", "หนึ่งล้านบาทถ้วน"),
            ("1000000", "หนึ่งล้านเอ็ดบาทถ้วน"),
            ("50", "ห้าสิบเอ็ดบาทถ้วน"),
        ],
    )
    def test_carry_increments_baht(self, integer, expected):
        assert convert(integer, "995", NEAREST, allow_overflow=True).text == expected

    def test_carry_past_nineteen_digits(self):
        result = convert("9999999999999999999", "999", RoundingMode.AWAY_FROM_ZERO, True)
        assert result.text == "สิบล้านล้านล้านบาทถ้วน"

    def test_toward_zero_never_carries(self):
        assert convert("100", "999", RoundingMode.TOWARD_ZERO, True).text == "หนึ่งร้อยบาทเก้าสิบเก้าสตางค์"


class TestIncrementDigits:
    @pytest.mark.parametrize(
        "digits, expected",
        [("0", "1"), ("8", "9"), ("9", "10"), ("129", "130"), ("999", "1000"), ("999999", "1000000")],
    )
    def test_increment(self, digits, expected):
        assert increment_digits(to_digit_sequence(digits)) == to_digit_sequence(expected)

    @pytest.mark.parametrize("number", [0, 9, 99, 100, 999999, 10**18 - 1, 10**19 - 1])
    def test_reads_like_the_next_number(self, number):
        incremented = increment_digits(to_digit_sequence(str(number)))
        assert convert_digits(incremented) == convert_digits(to_digit_sequence(str(number + 1)))


class TestSatangText:
    @pytest.mark.parametrize(
        "satang, expected",
        [
            ("01", "หนึ่ง"),
            ("05", "ห้า"),
            ("10", "สิบ"),
            ("11", "สิบเอ็ด"),
            ("12", "สิบสอง"),
            ("19", "สิบเก้า"),
            ("20", "ยี่สิบ"),
            ("21", "ยี่สิบเอ็ด"),
            ("31", "สามสิบเอ็ด"),
            ("91", "เก้าสิบเอ็ด"),
            ("99", "เก้าสิบเก้า"),
            ("00", ""),
        ],
    )
    def test_reading(self, satang, expected):
        assert satang_text(satang) == expected


class TestDefensiveChecks:
    def test_empty_integer_part(self):
        with pytest.raises(InvalidInput):
            convert("", "", NEAREST, False)

    def test_non_digit_integer_part(self):
        with pytest.raises(InvalidInput):
            convert("12a", "", NEAREST, False)

    def test_out_of_range_digit(self):
        with pytest.raises(InvalidInput):
            convert((1, 10), "", NEAREST, False)

    def test_non_digit_fraction(self):
        with pytest.raises(InvalidInput):
            convert("1", "5x", NEAREST, False)
