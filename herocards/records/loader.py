"""JSON data-file parsing into record tuples.

Each data file holds a top-level JSON array of objects. Missing optional
fields take their dataclass defaults. Anything else that does not fit the
record shape raises :class:`~herocards.errors.DataError` naming the file.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import replace
from pathlib import Path
from typing import Any

from ..errors import DataError
from .types import Attack, Item, ItemTag, Monster, Move, Tag

logger = logging.getLogger(__name__)

MOVE_FIELDS = frozenset({"name", "key", "description", "classes", "explanation", "replaces", "requires"})


def read_json_array(path: Path) -> list[dict[str, Any]]:
    """Read ``path`` and return its top-level array of JSON objects."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise DataError(f"{path}: file not found") from exc
    except OSError as exc:
        raise DataError(f"{path}: cannot read file: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise DataError(f"{path}: invalid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise DataError(f"{path}: expected a JSON array of records")
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise DataError(f"{path}: record {index} is not an object")
    return data


def _text(raw: Mapping[str, Any], key: str, where: str, default: str | None = None) -> str:
    if key not in raw:
        if default is None:
            raise DataError(f"{where}: missing field {key!r}")
        return default
    value = raw[key]
    if not isinstance(value, str):
        raise DataError(f"{where}: field {key!r} must be a string")
    return value


def _number(raw: Mapping[str, Any], key: str, where: str) -> int:
    value = raw.get(key, 0)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise DataError(f"{where}: field {key!r} must be a non-negative integer")
    return value


def _strings(
    raw: Mapping[str, Any],
    key: str,
    where: str,
    default: tuple[str, ...] | None = (),
) -> tuple[str, ...]:
    if key not in raw:
        if default is None:
            raise DataError(f"{where}: missing field {key!r}")
        return default
    value = raw[key]
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise DataError(f"{where}: field {key!r} must be a list of strings")
    return tuple(value)


def _where(path: Path, index: int) -> str:
    return f"{path} record {index}"


def parse_attack(raw: object, where: str) -> Attack:
    if not isinstance(raw, dict):
        raise DataError(f"{where}: attack must be an object")
    return Attack(
        name=_text(raw, "name", where),
        damage=_text(raw, "damage", where),
        tags=_strings(raw, "tags", where, default=None),
    )


def parse_monsters(path: Path) -> tuple[Monster, ...]:
    monsters: list[Monster] = []
    for index, raw in enumerate(read_json_array(path)):
        where = _where(path, index)
        attacks = raw.get("attacks", [])
        if not isinstance(attacks, list):
            raise DataError(f"{where}: field 'attacks' must be a list")
        monsters.append(
            Monster(
                key=_text(raw, "key", where),
                name=_text(raw, "name", where, ""),
                tags=_strings(raw, "tags", where),
                armor=_number(raw, "armor", where),
                hp=_number(raw, "hp", where),
                instinct=_text(raw, "instinct", where, ""),
                moves=_strings(raw, "moves", where),
                description=_text(raw, "description", where, ""),
                attacks=tuple(parse_attack(attack, where) for attack in attacks),
            )
        )
    logger.debug("loaded %d monsters from %s", len(monsters), path)
    return tuple(monsters)


def _resolve_move_reference(key: str, names_by_key: Mapping[str, str], where: str) -> str:
    if not key:
        return ""
    try:
        return names_by_key[key]
    except KeyError:
        raise DataError(f"{where}: key {key!r} does not exist") from None


def parse_moves(path: Path) -> tuple[Move, ...]:
    """Parse moves and replace ``replaces``/``requires`` keys with move names."""
    raw_moves = read_json_array(path)
    moves: list[Move] = []
    for index, raw in enumerate(raw_moves):
        where = _where(path, index)
        unknown = sorted(set(raw) - MOVE_FIELDS)
        if unknown:
            raise DataError(f"{where}: unknown field(s) {', '.join(unknown)}")
        moves.append(
            Move(
                name=_text(raw, "name", where),
                key=_text(raw, "key", where, ""),
                description=_text(raw, "description", where),
                classes=_strings(raw, "classes", where, default=("all",)),
                explanation=_text(raw, "explanation", where, ""),
                replaces=_text(raw, "replaces", where, ""),
                requires=_text(raw, "requires", where, ""),
            )
        )

    names_by_key: dict[str, str] = {}
    for move in moves:
        if move.key:
            names_by_key.setdefault(move.key, move.name)

    resolved: list[Move] = []
    for index, move in enumerate(moves):
        where = _where(path, index)
        resolved.append(
            replace(
                move,
                replaces=_resolve_move_reference(move.replaces, names_by_key, where),
                requires=_resolve_move_reference(move.requires, names_by_key, where),
            )
        )
    logger.debug("loaded %d moves from %s", len(resolved), path)
    return tuple(resolved)


def parse_item_tag(raw: object, where: str) -> ItemTag:
    """Parse ``"label"`` or ``{"label": value}`` into an :class:`ItemTag`."""
    if isinstance(raw, str):
        return ItemTag(raw)
    if isinstance(raw, dict):
        if not raw:
            return ItemTag("?")
        label, value = next(iter(sorted(raw.items())))
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise DataError(f"{where}: item tag {label!r} must have an integer or string value")
        return ItemTag(label, value)
    raise DataError(f"{where}: item tag must be a string or an object")


def parse_items(path: Path) -> tuple[Item, ...]:
    items: list[Item] = []
    for index, raw in enumerate(read_json_array(path)):
        where = _where(path, index)
        tags = raw.get("tags")
        if not isinstance(tags, list):
            raise DataError(f"{where}: field 'tags' must be a list")
        items.append(
            Item(
                name=_text(raw, "name", where),
                key=_text(raw, "key", where),
                tags=tuple(parse_item_tag(tag, where) for tag in tags),
                plural_name=_text(raw, "plural_name", where, ""),
                description=_text(raw, "description", where, ""),
            )
        )
    logger.debug("loaded %d items from %s", len(items), path)
    return tuple(items)


def parse_tags(path: Path) -> tuple[Tag, ...]:
    tags = tuple(
        Tag(
            name=_text(raw, "name", _where(path, index)),
            key=_text(raw, "key", _where(path, index)),
            description=_text(raw, "description", _where(path, index)),
        )
        for index, raw in enumerate(read_json_array(path))
    )
    logger.debug("loaded %d tags from %s", len(tags), path)
    return tags
