#!/usr/bin/env python3
"""
Number Speller — Command Line
=============================

Spells a number out in words and in a words-and-digits mix.

Usage:
    python main.py 1,000,020        # Spell the given number
    python main.py                  # Prompt for a number
    python main.py -h               # Show usage and input constraints
"""

from __future__ import annotations

import logging
import sys

from dotenv import load_dotenv
from pydantic import ValidationError

from number_speller.config import Settings, load_settings
from number_speller.exceptions import SpellError
from number_speller.models import SpellReport
from number_speller.pipeline import SpellPipeline
from number_speller.validators import number_constraints


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"


def _paint(text: str, color: str, stream=None) -> str:
    """Wrap text in an ANSI color only when the stream is a terminal."""
    stream = stream or sys.stdout
    if not stream.isatty():
        return text
    return f"{color}{text}{_RESET}"


# ─── Output Helpers ─────────────────────────────────────────────────


def show_usage(prog: str, settings: Settings) -> None:
    """Print usage and the input constraints."""
    print(f"Usage: \n {prog} the_number_to_spell \n")
    print(number_constraints(settings.max_digits))


def print_report(report: SpellReport) -> None:
    """Print both renderings and the digit count."""
    print(f"{_paint('In words:', _BOLD)} {report.number_in_words}")
    print(f"{_paint('In words and digits:', _BOLD)} {report.number_in_words_and_digits}")
    print(f"{_paint('Number length:', _BOLD)} {report.number_length} digits")


def _read_number() -> str:
    """Prompt for a number and return the first whitespace-delimited token."""
    try:
        line = input(">")
    except EOFError:
        return ""
    tokens = line.split()
    return tokens[0] if tokens else ""


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Spell the number from argv (or stdin) and print the result.

    Returns:
        0 on success or usage, 1 if the number was rejected, 2 on bad settings.
    """
    load_dotenv()
    argv = sys.argv if argv is None else argv

    try:
        settings = load_settings()
    except ValidationError as e:
        print(f"{_paint('Invalid SPELL_* settings:', _RED, sys.stderr)}\n{e}", file=sys.stderr)
        return 2

    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    if len(argv) > 1 and argv[1].startswith("-"):
        show_usage(argv[0], settings)
        return 0

    number = argv[1] if len(argv) > 1 else _read_number()

    try:
        report = SpellPipeline(settings).run(number)
    except SpellError as e:
        print(_paint(str(e), _RED, sys.stderr), file=sys.stderr)
        if "reason" in e.details:
            print(_paint(f"{e.code}: {e.details['reason']}", _DIM, sys.stderr), file=sys.stderr)
        return 1

    print_report(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
