"""
Convert written-out English number words back to an integer.

This is the inverse of the speller and is used to cross-check every
spelling: whatever the speller writes must read back as the number it was
given. It understands the full scale table, so 101-digit numbers round-trip.

Supported patterns:
    "one hundred thousand twenty"               → 100020
    "Three Hundred Forty-Five"                  → 345
    "twelve duotrigintillion"                   → 12 * 10**99
    "one million, two hundred and five"         → 1000205
"""

from __future__ import annotations

from .speller import ONES, SCALE_NAMES, TEENS, TENS

# ─── Word Lookup Tables ──────────────────────────────────────────────

_UNITS: dict[str, int] = {"zero": 0}
_UNITS.update({word: value for value, word in enumerate(ONES) if word})
_UNITS.update({word: 10 + value for value, word in enumerate(TEENS) if word})

_TENS: dict[str, int] = {word: value * 10 for value, word in enumerate(TENS) if word}

_SCALES: dict[str, int] = {
    name: 1000**index for index, name in enumerate(SCALE_NAMES) if name
}

# Words that may appear in written numbers without carrying a value
_IGNORE: set[str] = {"and"}


# ─── Word Classifier ─────────────────────────────────────────────────


def _classify_and_apply(word: str, current: int, result: int, source: str) -> tuple[int, int]:
    """Classify a single number word and update the running accumulators.

    Returns:
        (new_current, new_result) after processing the word.

    Raises:
        ValueError: If the word is not a recognised number token.
    """
    if word in _UNITS:
        return current + _UNITS[word], result
    if word in _TENS:
        return current + _TENS[word], result
    if word == "hundred":
        return (current or 1) * 100, result
    if word in _SCALES:
        return 0, result + (current or 1) * _SCALES[word]
    raise ValueError(f"Unrecognized number word: {word!r} in {source!r}")


# ─── Main Converter ─────────────────────────────────────────────────


def words_to_number(text: str) -> int:
    """Convert English number words to an integer.

    Args:
        text: e.g. "one thousand one "

    Returns:
        1001

    Raises:
        ValueError: If the text is empty or contains unrecognized words.

    Algorithm:
        `result` holds completed scale groups, `current` the group being
        built. Units, teens and tens add to `current`; "hundred" multiplies
        it; a scale word flushes `current * scale` into `result`.
    """
    if not text or not text.strip():
        raise ValueError("Empty text cannot be converted to a number")

    normalized = text.strip()
    words = normalized.lower().replace("-", " ").replace(",", " ").split()
    words = [w for w in words if w not in _IGNORE]

    if not words:
        raise ValueError(f"No number words found in: {text!r}")

    result = 0
    current = 0

    for word in words:
        current, result = _classify_and_apply(word, current, result, normalized)

    return result + current
