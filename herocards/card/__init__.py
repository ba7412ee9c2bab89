"""Bordered terminal cards.

Re-exports the card value, its element types, and border weights.
"""

from __future__ import annotations

from .border import Weight, border_glyphs
from .model import (
    DEFAULT_CARD_WIDTH,
    MIN_CARD_WIDTH,
    BulletList,
    Card,
    Element,
    Line,
    Rule,
    Text,
)

__all__ = [
    "DEFAULT_CARD_WIDTH",
    "MIN_CARD_WIDTH",
    "BulletList",
    "Card",
    "Element",
    "Line",
    "Rule",
    "Text",
    "Weight",
    "border_glyphs",
]
