"""Per-kind card layouts.

Each builder decides which record fields become lines, paragraphs and
lists, and skips sections whose source field is empty.

```text
 ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
 ┃ Anointed                       Cleric  ┃
 ┣━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┫
 ┃  Requires  Chosen One                  ┃
 ┠────────────────────────────────────────┨
 ┃ Choose one spell in addition to the    ┃
 ┃ one you picked for chosen one. You are ┃
 ┃ granted that spell as if it was one    ┃
 ┃ level lower.                           ┃
 ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛
```
"""

from __future__ import annotations

from ..card import MIN_CARD_WIDTH, BulletList, Card, Element, Line, Rule, Text, Weight
from ..layout import EXPAND_MARKER, capitalize
from ..theme import DEFAULT_THEME, CardTheme
from .types import Item, Monster, Move, Record, Tag

MOVE_CARD_WIDTH = 40
MONSTER_CARD_WIDTH = 60
ITEM_CARD_WIDTH = 40
TAG_CARD_WIDTH = 40

# Narrowest override every layout accepts: bullet rows give up two more
# cells to the bullet and its hanging indent.
MIN_RECORD_CARD_WIDTH = MIN_CARD_WIDTH + 2


def move_card(move: Move, theme: CardTheme = DEFAULT_THEME, width: int | None = None) -> Card:
    name = theme.paint(theme.title, move.name)
    classes = ", ".join(theme.paint(theme.class_badge, f" {capitalize(cls)} ") for cls in move.classes)
    requires = f"{theme.paint(theme.requires_badge, ' Requires ')} {move.requires}"
    replaces = f"{theme.paint(theme.replaces_badge, ' Replaces ')} {move.replaces}"
    has_explanation = bool(move.explanation)
    return (
        Card(width=width or MOVE_CARD_WIDTH)
        .with_heavy_border()
        .line(f"{name}{EXPAND_MARKER}{classes}")
        .heavy_rule()
        .line(requires, when=bool(move.requires))
        .line(replaces, when=bool(move.replaces))
        .light_rule(when=bool(move.requires or move.replaces))
        .text(move.description)
        .light_rule(when=has_explanation)
        .text(move.explanation, when=has_explanation)
    )


def monster_card(monster: Monster, theme: CardTheme = DEFAULT_THEME, width: int | None = None) -> Card:
    name = theme.paint(theme.monster_name, monster.name)
    hp = theme.paint(theme.hp_badge, f" {monster.hp} HP ")
    armor = theme.paint(theme.armor_badge, f" {monster.armor} Armor ")
    tags = ", ".join(capitalize(tag) for tag in monster.tags)

    elements: list[Element] = [
        Line(f"{name}{EXPAND_MARKER}{hp} {armor}"),
        Rule(Weight.HEAVY),
        Line(f"{EXPAND_MARKER}{tags}"),
        Rule(Weight.HEAVY),
        Text(monster.description.strip()),
    ]
    if monster.instinct:
        instinct = theme.paint(theme.instinct_badge, "Instinct:")
        elements += [Rule(Weight.LIGHT), Line(f"{instinct} {monster.instinct}!")]
    if monster.moves:
        elements += [Rule(Weight.LIGHT), BulletList(tuple(f"{move}." for move in monster.moves))]
    elements.append(Rule(Weight.LIGHT))
    if monster.attacks:
        elements.extend(Line(attack.card_line()) for attack in monster.attacks)
    else:
        elements.append(Line("no attacks"))
    return Card(tuple(elements), Weight.HEAVY, width or MONSTER_CARD_WIDTH)


def item_card(item: Item, theme: CardTheme = DEFAULT_THEME, width: int | None = None) -> Card:
    return (
        Card(width=width or ITEM_CARD_WIDTH)
        .with_heavy_border()
        .line(theme.paint(theme.title, item.name))
        .heavy_rule()
        .line(", ".join(str(tag) for tag in item.tags))
        .light_rule()
        .text(item.description)
    )


def tag_card(tag: Tag, theme: CardTheme = DEFAULT_THEME, width: int | None = None) -> Card:
    return (
        Card(width=width or TAG_CARD_WIDTH)
        .line(theme.paint(theme.title, capitalize(tag.name)))
        .heavy_rule()
        .text(tag.description)
    )


def record_card(record: Record, theme: CardTheme = DEFAULT_THEME, width: int | None = None) -> Card:
    """Build the card for any record kind."""
    if isinstance(record, Move):
        return move_card(record, theme, width)
    if isinstance(record, Monster):
        return monster_card(record, theme, width)
    if isinstance(record, Item):
        return item_card(record, theme, width)
    if isinstance(record, Tag):
        return tag_card(record, theme, width)
    raise TypeError(f"no card layout for {type(record).__name__}")


def render(record: Record, theme: CardTheme = DEFAULT_THEME, width: int | None = None) -> str:
    """Return the ready-to-print card for ``record``."""
    return record_card(record, theme, width).to_display_string()
