"""
Number Speller — spell out very large numbers in English words.

Architecture: Normalize → Group → Spell → Read back → Report
Range:       1 up to 101 digits, US short-scale names through duotrigintillion.
"""

__version__ = "1.0.0"
