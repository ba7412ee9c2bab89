"""Box-drawing glyph sets for card borders and section rules."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Weight(enum.Enum):
    """Stroke weight of a border or rule."""

    LIGHT = "light"
    HEAVY = "heavy"


@dataclass(frozen=True)
class BorderGlyphs:
    """Corners, edges and side junctions for one border weight.

    ```text
    ┏━━━┓   ┌───┐
    ┃   ┃   │   │
    ┗━━━┛   └───┘
    ```
    """

    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    horizontal: str
    vertical: str
    # (left, right) junction per rule weight crossing this border's verticals.
    junctions: dict[Weight, tuple[str, str]]

    def head(self, width: int) -> str:
        return f"{self.top_left}{self.horizontal * width}{self.top_right}"

    def end(self, width: int) -> str:
        return f"{self.bottom_left}{self.horizontal * width}{self.bottom_right}"

    def rule(self, weight: Weight, width: int) -> str:
        left, right = self.junctions[weight]
        return f"{left}{RULE_STROKES[weight] * width}{right}"


RULE_STROKES: dict[Weight, str] = {
    Weight.LIGHT: "─",
    Weight.HEAVY: "━",
}

HEAVY_BORDER = BorderGlyphs(
    top_left="┏",
    top_right="┓",
    bottom_left="┗",
    bottom_right="┛",
    horizontal="━",
    vertical="┃",
    junctions={
        Weight.LIGHT: ("┠", "┨"),
        Weight.HEAVY: ("┣", "┫"),
    },
)

LIGHT_BORDER = BorderGlyphs(
    top_left="┌",
    top_right="┐",
    bottom_left="└",
    bottom_right="┘",
    horizontal="─",
    vertical="│",
    junctions={
        Weight.LIGHT: ("├", "┤"),
        Weight.HEAVY: ("┝", "┥"),
    },
)


def border_glyphs(weight: Weight) -> BorderGlyphs:
    """Return the glyph set drawn for a card of the given border weight."""
    return HEAVY_BORDER if weight is Weight.HEAVY else LIGHT_BORDER
