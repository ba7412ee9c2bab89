"""Public package surface for herocards.

Exports the layout primitives, cards, and record lookup used by the CLI.
``main`` is imported lazily so library use does not pull in prompt_toolkit.
"""

from __future__ import annotations

from .ansi import display_width, pad
from .card import Card, Weight
from .errors import DataError, DiceError, HerocardsError, InvalidArgument, InvalidPattern
from .layout import expand, listify, wrap
from .records import find, render


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "Card",
    "DataError",
    "DiceError",
    "HerocardsError",
    "InvalidArgument",
    "InvalidPattern",
    "Weight",
    "display_width",
    "expand",
    "find",
    "listify",
    "main",
    "pad",
    "render",
    "wrap",
]
