"""
Exception hierarchy for number spelling.

Each exception carries a machine-readable code plus optional details so the
CLI and the HTTP API can report failures without parsing messages.
"""

from __future__ import annotations


class SpellError(Exception):
    """Base exception for all number spelling failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidNumber(SpellError):
    """The input is not a spellable number (empty, non-digit, or too long)."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_NUMBER", message, details)


class SpellingMismatchError(SpellError):
    """The spelled words do not read back as the number that was spelled."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("SPELLING_MISMATCH", message, details)
