"""Paragraph layout primitives built on ANSI-aware width.

Word wrapping, single-line expansion around a marker, and bulleted lists.
All functions are pure and return the same output for the same input.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from .ansi import display_width, pad, split_ansi_chunks
from .errors import InvalidArgument

EXPAND_MARKER = "{}"
DEFAULT_BULLET = "•"
_TOKEN_RE = re.compile(r"\S+|\s+")


def _gap(whitespace: str) -> str:
    """Normalize a whitespace run found between two words on one line."""
    if set(whitespace) == {" "}:
        return whitespace
    return " "


def iter_wrap(text: str, width: int) -> Iterator[str]:
    """Yield lines of ``text`` that fit ``width`` display cells.

    Lines break at whitespace only; a single word wider than ``width`` is cut
    into width-sized pieces. Whitespace at a break is dropped and runs of
    spaces between words on the same line are kept. Empty or blank text
    yields one empty line. Lines are not padded.
    """
    if width <= 0:
        raise InvalidArgument(f"wrap width must be positive, got {width}")

    line = ""
    col = 0
    gap = ""
    emitted = False
    for token in _TOKEN_RE.findall(text):
        if token.isspace():
            gap = _gap(token) if line else ""
            continue

        token_width = display_width(token)
        if line and col + len(gap) + token_width <= width:
            line += gap + token
            col += len(gap) + token_width
        else:
            if line:
                yield line
                emitted = True
            if token_width > width:
                *full, line = split_ansi_chunks(token, width)
                for piece in full:
                    yield piece
                    emitted = True
                col = display_width(line)
            else:
                line = token
                col = token_width
        gap = ""

    if line or not emitted:
        yield line


def wrap(text: str, width: int) -> list[str]:
    """Return the lines of :func:`iter_wrap`, each padded to exactly ``width`` cells.

    A glyph wider than ``width`` (a wide character at width 1) still comes
    back on a line of its own and overflows, as :func:`expand` does.
    """
    return [pad(line, width) for line in iter_wrap(text, width)]


def expand(line: str, width: int, marker: str = EXPAND_MARKER) -> str:
    """Fill ``line`` to ``width`` cells by inserting spaces at ``marker``.

    Text left of the first marker stays flush left and text after it flush
    right. Extra markers are dropped, and a line without one behaves as if
    it ended with a marker. When the content is already wider than
    ``width`` the markers are removed and the text comes back over-width.
    """
    if marker not in line:
        line += marker
    left, _, right = line.partition(marker)
    right = right.replace(marker, "")
    missing = width - display_width(left) - display_width(right)
    if missing < 0:
        return left + right
    return f"{left}{' ' * missing}{right}"


def listify(items: Iterable[str], bullet: str = DEFAULT_BULLET, width: int = 38) -> str:
    """Render ``items`` as a bulleted list of lines exactly ``width`` cells wide.

    Each item wraps to ``width - 2``; its first line gets ``"{bullet} "`` and
    continuation lines a two-space hanging indent. No items still produces
    one blank line so callers always get at least one row.
    """
    inner = width - 2
    rows: list[str] = []
    for item in items:
        for idx, row in enumerate(iter_wrap(item, inner)):
            prefix = f"{bullet} " if idx == 0 else "  "
            rows.append(prefix + pad(row, inner))
    if not rows:
        return pad("", width)
    return "\n".join(rows)


def capitalize(text: str) -> str:
    """Upper-case the first character and keep the rest untouched."""
    return text[:1].upper() + text[1:]
