"""
Six-digit group conversion and million grouping.

Thai names every position up to แสน (10⁵). Past that it does not coin new
words; it reads the number in six-digit windows and repeats ล้าน instead:

    1,000,000           → หนึ่งล้าน
    1,234,567           → หนึ่งล้าน + สองแสนสามหมื่นสี่พันห้าร้อยหกสิบเจ็ด
    1,000,000,000,000   → หนึ่งล้านล้าน

How many ล้าน a group receives depends on how many groups are non-zero:
with a single non-zero group the suffix telescopes (g repetitions for the
group g windows from the right); with several, each group left of the
rightmost one gets exactly one.
"""

from .digits import GROUP_SIZE, MILLION, ONES_ED, TENS_YI, digit_word, unit_word


def convert_group(digits):
    """Convert up to six digits to Thai text, without any ล้าน suffix."""
    count = len(digits)
    words = []
    for index, digit in enumerate(digits):
        if digit == 0:
            continue
        position = count - index - 1
        if position == 0:
            # เอ็ด only when 1 closes a multi-digit number: 101, 21, 000001
            words.append(ONES_ED if digit == 1 and count > 1 else digit_word(digit))
        elif position == 1:
            if digit == 1:
                words.append(unit_word(1))
            elif digit == 2:
                words.append(TENS_YI + unit_word(1))
            else:
                words.append(digit_word(digit) + unit_word(1))
        else:
            words.append(digit_word(digit) + unit_word(position))
    return "".join(words)


def split_groups(digits):
    """
    Split a digit sequence into six-digit groups, rightmost group first.

    The list index of a group is its distance g from the right. Only the
    last (most significant) group may be shorter than six digits.
    """
    groups = []
    end = len(digits)
    while end > 0:
        start = max(end - GROUP_SIZE, 0)
        groups.append(tuple(digits[start:end]))
        end = start
    return groups


def convert_digits(digits):
    """
    Convert a whole integer digit sequence to Thai text (no บาท).

    Returns an empty string for an all-zero sequence; the caller decides
    how to read zero.
    """
    if len(digits) <= GROUP_SIZE:
        return convert_group(digits)

    groups = split_groups(digits)
    non_zero_group_count = sum(1 for group in groups if any(group))

    parts = []
    for g, group in enumerate(groups):
        text = convert_group(group)
        if not text:
            continue
        if non_zero_group_count > 1:
            suffix_count = 1 if g > 0 else 0
        else:
            suffix_count = g
        parts.append(text + MILLION * suffix_count)

    return "".join(reversed(parts))
