"""Exception types raised by herocards.

Layout contract violations are programming errors and propagate. Pattern,
dice, and data errors come from user input or files and are reported by the
command layer without ending the session.
"""

from __future__ import annotations


class HerocardsError(Exception):
    """Base class for all herocards errors."""


class InvalidArgument(HerocardsError, ValueError):
    """A layout primitive was called with an argument it cannot honor."""


class InvalidPattern(HerocardsError, ValueError):
    """A search pattern failed to compile as a regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"{pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class DataError(HerocardsError):
    """A data file is missing, malformed, or internally inconsistent."""


class DiceError(HerocardsError, ValueError):
    """A dice expression could not be parsed or evaluated."""
