"""
Thai numeral lexemes.

Digit words are indexed by digit value (index 0 is never spoken inside a
number; zero is only read out as ศูนย์ for a whole amount).
Unit words are indexed by position from the right inside a six-digit group.
"""

DIGIT_NAMES = ["", "หนึ่ง", "สอง", "สาม", "สี่", "ห้า", "หก", "เจ็ด", "แปด", "เก้า"]
UNIT_NAMES = ["", "สิบ", "ร้อย", "พัน", "หมื่น", "แสน"]

ONES_ED = "เอ็ด"
TENS_YI = "ยี่"
MILLION = "ล้าน"
ZERO = "ศูนย์"

BAHT = "บาท"
SATANG = "สตางค์"
EXACT = "ถ้วน"

GROUP_SIZE = len(UNIT_NAMES)


def digit_word(digit):
    return DIGIT_NAMES[digit]


def unit_word(position):
    return UNIT_NAMES[position]
