"""
Input normalization and validation, the gate in front of the speller.

Raw input arrives the way people type numbers: "1,250,000", "007", "42".
These functions reduce it to a canonical digit string or reject it outright.
Nothing downstream ever sees an unvalidated string.

Rules:
  - Commas are digit-group separators and are dropped wherever they appear.
  - Leading zeros are dropped; an input that is nothing but zeros is rejected
    (zero has no spelling here, the smallest spellable number is 1).
  - Only ASCII digits 0-9 are accepted. No signs, no decimals, no whitespace.
  - At most MAX_DIGITS_ALLOWED digits after normalization.
"""

from __future__ import annotations

import re

from .exceptions import InvalidNumber


# ─── Constants ───────────────────────────────────────────────────────

# duotrigintillion is 10**99; 99 zeros + two more digits for "100 duotrigintillion"
MAX_DIGITS_ALLOWED = 99 + 2

DIGIT_SEPARATOR = ","

_DIGITS_ONLY = re.compile(r"[0-9]+")


# ─── Constraint Descriptor ───────────────────────────────────────────


def number_constraints(max_digits: int = MAX_DIGITS_ALLOWED) -> str:
    """Human-readable description of what a valid number looks like.

    Shared by InvalidNumber messages, the CLI usage text and the API.
    """
    return (
        "Number must be a non-zero positive integer, "
        f"should not exceed {max_digits} digits "
        "and may contain commas as digits separator"
    )


# ─── Validators ──────────────────────────────────────────────────────


def is_valid_number(digits: str, max_digits: int = MAX_DIGITS_ALLOWED) -> bool:
    """True if `digits` is a non-empty ASCII digit string within the length limit."""
    if not digits:
        return False
    if not _DIGITS_ONLY.fullmatch(digits):
        return False
    return len(digits) <= max_digits


def rejection_reason(digits: str) -> str:
    """Why `digits` fails is_valid_number: "empty", "non_digit" or "too_long"."""
    if not digits:
        return "empty"
    if not _DIGITS_ONLY.fullmatch(digits):
        return "non_digit"
    return "too_long"


def normalize_and_validate(raw: str, max_digits: int = MAX_DIGITS_ALLOWED) -> str:
    """Strip separators and leading zeros, then validate.

    Args:
        raw: e.g. "1,250,000" or "007"

    Returns:
        The normalized digit string, e.g. "1250000" or "7".

    Raises:
        InvalidNumber: If nothing is left after stripping, a non-digit
            character remains, or the number is longer than `max_digits`.
    """
    digits = raw.replace(DIGIT_SEPARATOR, "").lstrip("0")

    if not is_valid_number(digits, max_digits):
        raise InvalidNumber(
            number_constraints(max_digits),
            details={
                "input": raw,
                "reason": rejection_reason(digits),
                "max_digits": max_digits,
            },
        )

    return digits
