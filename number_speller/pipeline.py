"""
Main spelling pipeline: orchestrates the full workflow.

Flow:
  ┌───────────┐
  │ Raw input │   "1,000,020"
  └─────┬─────┘
        │
  ┌─────▼─────┐
  │ Normalize │   ← strip commas / leading zeros, validate
  └─────┬─────┘
        │
  ┌─────▼─────┐
  │   Spell   │   ← 3-digit groups → words + scale names
  └─────┬─────┘
        │
  ┌─────▼─────┐
  │ Read back │   ← words → number, must equal the input
  └─────┬─────┘
        │
  ┌─────▼─────┐
  │  Report   │   ← digits, both renderings, per-group breakdown
  └───────────┘

Invalid input stops the pipeline at the first step: no partial report is
ever built.
"""

from __future__ import annotations

import logging

from .config import Settings
from .exceptions import SpellingMismatchError
from .models import SpellReport
from .speller import assemble, number_length, spell_groups
from .validators import normalize_and_validate
from .word_to_number import words_to_number

logger = logging.getLogger(__name__)


class SpellPipeline:
    """Orchestrates validation, spelling and the read-back check.

    Usage:
        pipeline = SpellPipeline()
        report = pipeline.run("1,001")
        print(report.number_in_words)             # "one thousand one "
        print(report.number_in_words_and_digits)  # "1 thousand 1 "
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings()

    def run(self, raw: str) -> SpellReport:
        """Spell a raw number string.

        Raises:
            InvalidNumber: If the input fails validation.
            SpellingMismatchError: If the words do not read back as the input.
        """
        digits = normalize_and_validate(raw, self.settings.max_digits)
        logger.debug("Normalized %r to %d digits", raw, len(digits))

        groups = spell_groups(digits, self.settings.max_digits)
        result = assemble(groups)

        verified = False
        if self.settings.verify:
            self._verify(digits, result.words)
            verified = True

        logger.info("Spelled %d-digit number in %d groups", len(digits), len(groups))

        return SpellReport(
            number_in_digits=digits,
            number_in_words=result.words,
            number_in_words_and_digits=result.words_and_digits,
            number_length=number_length(digits),
            groups=groups,
            verified=verified,
        )

    # ─── Read-back Check ─────────────────────────────────────────────

    def _verify(self, digits: str, words: str) -> None:
        """Parse the words back and compare with the digits."""
        read_back = words_to_number(words)
        if read_back != int(digits):
            logger.error("Spelling of %s reads back as %d", digits, read_back)
            raise SpellingMismatchError(
                f"Spelling reads back as {read_back}, expected {digits}",
                details={"digits": digits, "words": words, "read_back": str(read_back)},
            )
