"""Record types, data-file loading, collections, and per-kind cards."""

from __future__ import annotations

from .cards import MIN_RECORD_CARD_WIDTH, item_card, monster_card, move_card, record_card, render, tag_card
from .collection import CollectionKind, Library, RecordCollection, find, load_library
from .types import Attack, Item, ItemTag, Monster, Move, Record, Tag

__all__ = [
    "MIN_RECORD_CARD_WIDTH",
    "Attack",
    "CollectionKind",
    "Item",
    "ItemTag",
    "Library",
    "Monster",
    "Move",
    "Record",
    "RecordCollection",
    "Tag",
    "find",
    "item_card",
    "load_library",
    "monster_card",
    "move_card",
    "record_card",
    "render",
    "tag_card",
]
