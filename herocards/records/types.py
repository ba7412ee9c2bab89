"""Record datatypes loaded from the data files."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..layout import EXPAND_MARKER, capitalize


@dataclass(frozen=True)
class Attack:
    """One monster attack: name, damage dice and capitalized-on-display tags."""

    name: str
    damage: str
    tags: tuple[str, ...] = ()

    def card_line(self) -> str:
        """Return the attack as a card line, tags pushed to the right edge."""
        tags = ", ".join(capitalize(tag) for tag in self.tags)
        return f"{self.name} ({self.damage}){EXPAND_MARKER}{tags}"


@dataclass(frozen=True)
class Monster:
    key: str
    name: str = ""
    tags: tuple[str, ...] = ()
    armor: int = 0
    hp: int = 0
    instinct: str = ""
    moves: tuple[str, ...] = ()
    description: str = ""
    attacks: tuple[Attack, ...] = ()


@dataclass(frozen=True)
class Move:
    """A move a character can make.

    ``replaces`` and ``requires`` hold the *names* of the related moves once
    loading has resolved the keys stored in the data file.
    """

    name: str
    description: str
    key: str = ""
    classes: tuple[str, ...] = ("all",)
    explanation: str = ""
    replaces: str = ""
    requires: str = ""


@dataclass(frozen=True)
class ItemTag:
    """Item tag, either a bare label (``ration``) or a valued one (``weight: 1``)."""

    label: str
    value: int | str | None = None

    def __str__(self) -> str:
        if self.value is None:
            return capitalize(self.label)
        if self.label == "weight":
            return f"{self.value} KG"
        return f"{self.value} {capitalize(self.label)}"


@dataclass(frozen=True)
class Item:
    name: str
    key: str
    tags: tuple[ItemTag, ...] = ()
    plural_name: str = ""
    description: str = ""


@dataclass(frozen=True)
class Tag:
    name: str
    key: str
    description: str


Record = Union[Monster, Move, Item, Tag]

