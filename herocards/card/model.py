"""Card value, content elements, and the bordered text renderer.

```text
 ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
 ┃ +bonus                                 ┃
 ┣━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┫
 ┃ It modifies your effectiveness in a    ┃
 ┃ specified situation. It might be “+1   ┃
 ┃ forward to spout lore” or “-1 ongoing  ┃
 ┃ to hack and slash.”                    ┃
 ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛
```

A card is immutable. Builder methods return a new card with one more
element, or the same card when their ``when`` guard is false.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union

from ..ansi import pad
from ..errors import InvalidArgument
from ..layout import DEFAULT_BULLET, expand, iter_wrap, listify
from .border import Weight, border_glyphs

DEFAULT_CARD_WIDTH = 40
MIN_CARD_WIDTH = 3
LEFT_MARGIN = " "


@dataclass(frozen=True)
class Rule:
    """Full-width divider between sections."""

    weight: Weight = Weight.LIGHT


@dataclass(frozen=True)
class Text:
    """Paragraph word-wrapped to the card interior."""

    body: str


@dataclass(frozen=True)
class Line:
    """Single row expanded at its ``{}`` marker, never wrapped."""

    body: str


@dataclass(frozen=True)
class BulletList:
    """Items rendered one bullet each, wrapped with a hanging indent."""

    items: tuple[str, ...]


Element = Union[Rule, Text, Line, BulletList]


@dataclass(frozen=True)
class Card:
    """Ordered content elements drawn inside a border.

    ``width`` counts the cells between the two vertical border glyphs; text
    gets ``width - 2`` of them, one space of padding on each side.
    """

    elements: tuple[Element, ...] = ()
    border: Weight = Weight.HEAVY
    width: int = DEFAULT_CARD_WIDTH

    def with_width(self, width: int) -> Card:
        return replace(self, width=width)

    def with_border(self, border: Weight) -> Card:
        return replace(self, border=border)

    def with_light_border(self) -> Card:
        return self.with_border(Weight.LIGHT)

    def with_heavy_border(self) -> Card:
        return self.with_border(Weight.HEAVY)

    def add(self, element: Element, when: bool = True) -> Card:
        """Append ``element`` if ``when`` holds."""
        if not when:
            return self
        return replace(self, elements=self.elements + (element,))

    def light_rule(self, when: bool = True) -> Card:
        return self.add(Rule(Weight.LIGHT), when)

    def heavy_rule(self, when: bool = True) -> Card:
        return self.add(Rule(Weight.HEAVY), when)

    def text(self, body: str, when: bool = True) -> Card:
        """Append a wrapped paragraph; surrounding whitespace is trimmed."""
        return self.add(Text(body.strip()), when)

    def line(self, body: str, when: bool = True) -> Card:
        return self.add(Line(body), when)

    def bullets(self, items, when: bool = True) -> Card:
        return self.add(BulletList(tuple(items)), when)

    def rows(self) -> list[str]:
        """Return every rendered row, borders included, top to bottom."""
        if self.width < MIN_CARD_WIDTH:
            raise InvalidArgument(f"card width must be at least {MIN_CARD_WIDTH}, got {self.width}")

        glyphs = border_glyphs(self.border)
        inner = self.width - 2

        def framed(body: str) -> str:
            return f"{LEFT_MARGIN}{glyphs.vertical} {body} {glyphs.vertical}"

        rows = [LEFT_MARGIN + glyphs.head(self.width)]
        for element in self.elements:
            if isinstance(element, Rule):
                rows.append(LEFT_MARGIN + glyphs.rule(element.weight, self.width))
            elif isinstance(element, Text):
                rows.extend(framed(pad(row, inner)) for row in iter_wrap(element.body, inner))
            elif isinstance(element, Line):
                rows.append(framed(expand(element.body, inner)))
            elif isinstance(element, BulletList):
                rows.extend(framed(row) for row in listify(element.items, DEFAULT_BULLET, inner).split("\n"))
            else:
                raise TypeError(f"unsupported card element: {element!r}")
        rows.append(LEFT_MARGIN + glyphs.end(self.width))
        return rows

    def to_display_string(self) -> str:
        return "\n".join(self.rows())

    def __str__(self) -> str:
        return self.to_display_string()
