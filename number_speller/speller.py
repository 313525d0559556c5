"""
Spell a digit string out in English words.

Two renderings are produced in a single left-to-right pass:
    "123456" → "one hundred twenty three thousand four hundred fifty six "
             → "123 thousand 456 "

Algorithm:
  1. Left-pad the digits with zeros to a multiple of three.
  2. Slice into 3-digit groups, most significant first.
  3. Spell each group (0..999) from the ones/teens/tens tables.
  4. Follow every non-zero group with its scale name (thousand, million...).
     Zero groups are silent: no words, no digits, no scale name.

Every word in either rendering is followed by a single space, so both
strings end with one trailing space.

Uses US short-scale names up to duotrigintillion (10**99).
"""

from __future__ import annotations

from .exceptions import InvalidNumber
from .models import GroupSpelling, SpellResult
from .validators import (
    MAX_DIGITS_ALLOWED,
    is_valid_number,
    number_constraints,
    rejection_reason,
)

# ─── Word Lookup Tables ──────────────────────────────────────────────

ONES: tuple[str, ...] = (
    "", "one", "two", "three", "four",
    "five", "six", "seven", "eight", "nine",
)

# Index 0 is unused: ten is spelled through TENS, only 11..19 come from here.
TEENS: tuple[str, ...] = (
    "", "eleven", "twelve", "thirteen", "fourteen",
    "fifteen", "sixteen", "seventeen", "eighteen", "nineteen",
)

TENS: tuple[str, ...] = (
    "", "ten", "twenty", "thirty", "forty",
    "fifty", "sixty", "seventy", "eighty", "ninety",
)

SCALE_NAMES: tuple[str, ...] = (
    "", "thousand", "million", "billion",
    "trillion", "quadrillion", "quintillion",
    "sextillion", "septillion", "octillion",
    "nonillion", "decillion", "undecillion",
    "duodecillion", "tredecillion", "quattuordecillion",
    "quindecillion", "sexdecillion", "septendecillion",
    "octodecillion", "novemdecillion", "vigintillion",
    "unvigintillion", "duovigintillion", "trevigintillion",
    "quattuorvigintillion", "quinvigintillion", "sexvigintillion",
    "septenvigintillion", "octovigintillion", "novemvigintillion",
    "trigintillion", "untrigintillion", "duotrigintillion",
)

GROUP_SIZE = 3

# Most digits the scale table can name at all (34 groups of three).
TABLE_CAPACITY = len(SCALE_NAMES) * GROUP_SIZE


# ─── Grouping ────────────────────────────────────────────────────────


def split_into_groups(digits: str) -> tuple[list[str], int]:
    """Split a digit string into zero-padded 3-digit groups.

    Returns:
        (groups, count), most significant group first.
        "1234567" → (["001", "234", "567"], 3)
    """
    pad = (GROUP_SIZE - len(digits) % GROUP_SIZE) % GROUP_SIZE
    padded = "0" * pad + digits
    groups = [padded[i : i + GROUP_SIZE] for i in range(0, len(padded), GROUP_SIZE)]
    return groups, len(groups)


# ─── Single Group ────────────────────────────────────────────────────


def group_to_words(group: str) -> tuple[str, int]:
    """Spell one group of up to three digits.

    Returns:
        (fragment, value), e.g. "120" → ("one hundred twenty", 120).
        A zero group gives ("", 0).
    """
    value = 0
    for ch in group:
        value = value * 10 + (ord(ch) - ord("0"))

    fragments: list[str] = []

    if value > 99:
        fragments.append(ONES[value // 100])
        fragments.append("hundred")

    remainder = value % 100

    if 10 < remainder < 20:
        fragments.append(TEENS[remainder - 10])
        remainder = 0  # the teen word already covers the ones digit
    elif remainder >= 10:
        fragments.append(TENS[remainder // 10])

    remainder %= 10

    if remainder:
        fragments.append(ONES[remainder])

    return " ".join(fragments), value


# ─── Assembler ───────────────────────────────────────────────────────


def spell_groups(digits: str, max_digits: int = MAX_DIGITS_ALLOWED) -> list[GroupSpelling]:
    """Break a normalized digit string into spelled groups with their scales.

    Raises:
        InvalidNumber: If `digits` is not a normalized digit string of at
            most `max_digits` digits (use normalize_and_validate first).
    """
    limit = min(max_digits, TABLE_CAPACITY)

    if not is_valid_number(digits, limit):
        raise InvalidNumber(
            number_constraints(limit),
            details={"input": digits, "reason": rejection_reason(digits), "max_digits": limit},
        )
    if digits[0] == "0":
        raise InvalidNumber(
            number_constraints(limit),
            details={"input": digits, "reason": "not_normalized", "max_digits": limit},
        )

    groups, count = split_into_groups(digits)
    spelled: list[GroupSpelling] = []

    for position, group in enumerate(groups):
        scale_index = count - 1 - position
        words, value = group_to_words(group)
        spelled.append(
            GroupSpelling(
                digits=group,
                value=value,
                words=words,
                scale_index=scale_index,
                scale_name=SCALE_NAMES[scale_index],
            )
        )

    return spelled


def assemble(groups: list[GroupSpelling]) -> SpellResult:
    """Join spelled groups into the words and words-and-digits renderings."""
    words: list[str] = []
    words_and_digits: list[str] = []

    for group in groups:
        owes_scale_name = False

        if group.value != 0:
            words_and_digits.append(f"{group.value} ")
            owes_scale_name = True

        if group.words:
            words.append(f"{group.words} ")

        if owes_scale_name and group.scale_index >= 1:
            words.append(f"{group.scale_name} ")
            words_and_digits.append(f"{group.scale_name} ")

    return SpellResult(words="".join(words), words_and_digits="".join(words_and_digits))


def spell(digits: str, max_digits: int = MAX_DIGITS_ALLOWED) -> SpellResult:
    """Spell a normalized digit string.

    Args:
        digits: Output of normalize_and_validate(), e.g. "100020".
        max_digits: Longest number accepted, as passed to normalize_and_validate().

    Returns:
        SpellResult(words="one hundred thousand twenty ",
                    words_and_digits="100 thousand 20 ")

    Raises:
        InvalidNumber: If `digits` is not normalized or is too long.
    """
    return assemble(spell_groups(digits, max_digits))


def number_length(digits: str) -> int:
    """Number of digits in a normalized digit string."""
    return len(digits)
