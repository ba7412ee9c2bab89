"""ANSI-aware text measurement and padding.

Color and style sequences never count toward layout width, and East Asian
wide glyphs occupy two cells. Everything that lines text up against a card
border measures through :func:`display_width`.
"""

from __future__ import annotations

import re
import unicodedata

SGR_ESCAPE_RE = re.compile(r"\x1b\[[0-9;:]*m")
ZERO_WIDTH_CHARS = frozenset("\u200b\u200c\u200d\u2060\ufeff")
ALIGNMENTS = ("left", "right", "center")


def strip_ansi(text: str) -> str:
    """Remove every SGR (``ESC [ ... m``) sequence from ``text``."""
    return SGR_ESCAPE_RE.sub("", text)


def char_display_width(ch: str) -> int:
    """Return terminal cell width for one character.

    Combining marks and joiners consume no cells, East Asian wide/fullwidth
    characters consume two, everything else one.
    """
    if ch in ZERO_WIDTH_CHARS or unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return the number of terminal cells ``text`` occupies once styling is removed."""
    plain = strip_ansi(text)
    if plain.isascii():
        return len(plain)
    return sum(char_display_width(ch) for ch in plain)


def pad(text: str, width: int, align: str = "left") -> str:
    """Pad ``text`` with spaces to exactly ``width`` display cells.

    ``align`` is ``"left"`` (spaces appended), ``"right"`` (spaces prepended)
    or ``"center"`` (extra space goes to the right). Text already wider than
    ``width`` is returned unchanged; callers wrap first when it must fit.
    """
    if align not in ALIGNMENTS:
        raise ValueError(f"unknown alignment: {align!r}")
    missing = width - display_width(text)
    if missing <= 0:
        return text
    if align == "left":
        return text + " " * missing
    if align == "right":
        return " " * missing + text
    left = missing // 2
    return " " * left + text + " " * (missing - left)


def split_ansi_chunks(text: str, width: int) -> list[str]:
    """Cut a styled string into chunks of at most ``width`` display cells.

    Escape sequences stay attached to the chunk they appear in. Used to break
    single words that are wider than a wrap target. A glyph wider than
    ``width`` is placed alone on its chunk rather than dropped.
    """
    if width <= 0 or not text:
        return [text]

    chunks: list[str] = []
    chunk: list[str] = []
    col = 0
    i = 0
    n = len(text)
    while i < n:
        if text[i] == "\x1b":
            match = SGR_ESCAPE_RE.match(text, i)
            if match:
                chunk.append(match.group(0))
                i = match.end()
                continue
        ch = text[i]
        w = char_display_width(ch)
        if col + w > width and col > 0:
            chunks.append("".join(chunk))
            chunk = []
            col = 0
        chunk.append(ch)
        col += w
        i += 1

    chunks.append("".join(chunk))
    return chunks
