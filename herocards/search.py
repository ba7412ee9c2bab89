"""Case-insensitive record lookup with field priorities.

A name hit wins outright and stops the scan. Otherwise the first record
holding the highest-ranked hit (description over classes) is returned, so
collection order is part of the result.
"""

from __future__ import annotations

import enum
import re
from collections.abc import Callable, Iterable
from typing import Protocol, TypeVar

from .errors import InvalidPattern


class Searchable(Protocol):
    name: str
    description: str


R = TypeVar("R", bound=Searchable)
ClassesOf = Callable[[R], Iterable[str]]


class MatchRank(enum.IntEnum):
    """Which field produced a hit, ordered by priority."""

    NONE = 0
    CLASSES = 1
    DESCRIPTION = 2
    NAME = 3


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a user query as a case-insensitive regular expression."""
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as exc:
        raise InvalidPattern(pattern, str(exc)) from exc


def match_rank(record: R, regex: re.Pattern[str], classes_of: ClassesOf | None = None) -> MatchRank:
    """Return the highest-priority field of ``record`` matched by ``regex``."""
    if regex.search(record.name):
        return MatchRank.NAME
    if regex.search(record.description):
        return MatchRank.DESCRIPTION
    if classes_of is not None and any(regex.search(value) for value in classes_of(record)):
        return MatchRank.CLASSES
    return MatchRank.NONE


def find_best(
    records: Iterable[R],
    pattern: str,
    classes_of: ClassesOf | None = None,
) -> R | None:
    """Return the best match for ``pattern`` in ``records``, or ``None``.

    ``classes_of`` extracts classification strings for collections that have
    them; without it only names and descriptions are searched.
    """
    regex = compile_pattern(pattern)
    best_rank = MatchRank.NONE
    best: R | None = None
    for record in records:
        rank = match_rank(record, regex, classes_of)
        if rank is MatchRank.NAME:
            return record
        if rank > best_rank:
            best_rank = rank
            best = record
    return best


def matching_names(records: Iterable[Searchable], pattern: str) -> list[str]:
    """Names of all records whose name matches ``pattern``, in order."""
    regex = compile_pattern(pattern)
    return [record.name for record in records if regex.search(record.name)]


def complete_names(records: Iterable[Searchable], prefix: str) -> list[str]:
    """Names starting with ``prefix``, compared case-insensitively."""
    folded = prefix.casefold()
    return [record.name for record in records if record.name.casefold().startswith(folded)]
