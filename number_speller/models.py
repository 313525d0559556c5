"""
Pydantic models for spelling results.

All models are frozen: a result describes exactly one conversion and is
never updated in place. Re-spelling produces a new object.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# ─── Per-Group Breakdown ────────────────────────────────────────────


class GroupSpelling(BaseModel):
    """One 3-digit group of a number and how it reads."""

    model_config = ConfigDict(frozen=True)

    digits: str = Field(min_length=3, max_length=3)  # Zero-padded, e.g. "020"
    value: int = Field(ge=0, le=999)
    words: str  # "twenty"; empty for a zero group
    scale_index: int = Field(ge=0)  # 0 = units, 1 = thousand, 2 = million...
    scale_name: str  # "" for the units group


# ─── Spell Result ───────────────────────────────────────────────────


class SpellResult(BaseModel):
    """The two renderings of a number."""

    model_config = ConfigDict(frozen=True)

    words: str  # "one thousand one "
    words_and_digits: str  # "1 thousand 1 "


# ─── Spell Report ───────────────────────────────────────────────────


class SpellReport(BaseModel):
    """The final output of the spelling pipeline."""

    model_config = ConfigDict(frozen=True)

    number_in_digits: str
    number_in_words: str
    number_in_words_and_digits: str
    number_length: int
    groups: list[GroupSpelling] = Field(default_factory=list)
    verified: bool = False  # True once the words were read back and matched
