"""Record collections tagged by kind, and the library that holds all four.

Search dispatches on the collection kind: only moves carry classes, so only
the move collection ranks class hits.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from .. import search
from .loader import parse_items, parse_monsters, parse_moves, parse_tags
from .types import Item, Monster, Move, Record, Tag

logger = logging.getLogger(__name__)


class CollectionKind(enum.Enum):
    """The four record collections, valued by their plural name."""

    MONSTERS = "monsters"
    MOVES = "moves"
    ITEMS = "items"
    TAGS = "tags"

    @property
    def singular(self) -> str:
        return self.value[:-1]

    @property
    def filename(self) -> str:
        return f"{self.value}.json"

    @property
    def title(self) -> str:
        return self.value.capitalize()

    @classmethod
    def from_word(cls, word: str) -> CollectionKind | None:
        """Accept singular or plural kind names, any case."""
        folded = word.strip().lower()
        for kind in cls:
            if folded in (kind.value, kind.singular):
                return kind
        return None


@dataclass(frozen=True)
class RecordCollection:
    """Ordered, read-only records of one kind."""

    kind: CollectionKind
    records: tuple[Record, ...] = ()

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def find(self, pattern: str) -> Record | None:
        return find(self, pattern)

    def names(self, pattern: str = "") -> list[str]:
        return search.matching_names(self.records, pattern)

    def complete(self, prefix: str) -> list[str]:
        return search.complete_names(self.records, prefix)


def _move_classes(move: Move) -> tuple[str, ...]:
    return move.classes


def find(collection: RecordCollection, pattern: str) -> Record | None:
    """Return the best record in ``collection`` for ``pattern``.

    Raises :class:`~herocards.errors.InvalidPattern` for a malformed pattern.
    """
    if collection.kind is CollectionKind.MOVES:
        return search.find_best(collection.records, pattern, classes_of=_move_classes)
    return search.find_best(collection.records, pattern)


@dataclass(frozen=True)
class Library:
    """All loaded collections."""

    monsters: RecordCollection
    moves: RecordCollection
    items: RecordCollection
    tags: RecordCollection

    @classmethod
    def from_records(
        cls,
        monsters: tuple[Monster, ...] = (),
        moves: tuple[Move, ...] = (),
        items: tuple[Item, ...] = (),
        tags: tuple[Tag, ...] = (),
    ) -> Library:
        return cls(
            monsters=RecordCollection(CollectionKind.MONSTERS, tuple(monsters)),
            moves=RecordCollection(CollectionKind.MOVES, tuple(moves)),
            items=RecordCollection(CollectionKind.ITEMS, tuple(items)),
            tags=RecordCollection(CollectionKind.TAGS, tuple(tags)),
        )

    def collection(self, kind: CollectionKind) -> RecordCollection:
        return getattr(self, kind.value)

    def __iter__(self) -> Iterator[RecordCollection]:
        return (self.collection(kind) for kind in CollectionKind)


def load_library(data_dir: Path) -> Library:
    """Load ``monsters.json``, ``moves.json``, ``items.json`` and ``tags.json``."""
    data_dir = Path(data_dir)
    logger.debug("loading data files from %s", data_dir)
    return Library.from_records(
        monsters=parse_monsters(data_dir / CollectionKind.MONSTERS.filename),
        moves=parse_moves(data_dir / CollectionKind.MOVES.filename),
        items=parse_items(data_dir / CollectionKind.ITEMS.filename),
        tags=parse_tags(data_dir / CollectionKind.TAGS.filename),
    )
