"""Card color themes and selection helpers.

Themes are ANSI palettes for names, badges and headings. Escapes never
affect layout; the ``plain`` theme drops them for pipes and ``--no-color``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CardTheme:
    """Semantic ANSI palette used by card builders."""

    name: str
    reset: str
    title: str
    monster_name: str
    heading: str
    class_badge: str
    requires_badge: str
    replaces_badge: str
    hp_badge: str
    armor_badge: str
    instinct_badge: str
    error: str

    def paint(self, style: str, text: str) -> str:
        """Wrap ``text`` in ``style`` and a reset, or return it bare for unstyled slots."""
        if not style:
            return text
        return f"{style}{text}{self.reset}"


DEFAULT_THEME = CardTheme(
    name="default",
    reset="\033[0m",
    title="\033[1;33m",
    monster_name="\033[1m",
    heading="\033[1m",
    class_badge="\033[30;107m",
    requires_badge="\033[30;41m",
    replaces_badge="\033[30;107m",
    hp_badge="\033[41m",
    armor_badge="\033[44m",
    instinct_badge="\033[30;107m",
    error="\033[31m",
)

PARCHMENT_THEME = CardTheme(
    name="parchment",
    reset="\033[0m",
    title="\033[1;38;5;179m",
    monster_name="\033[1;38;5;223m",
    heading="\033[1;38;5;179m",
    class_badge="\033[38;5;235;48;5;223m",
    requires_badge="\033[38;5;235;48;5;167m",
    replaces_badge="\033[38;5;235;48;5;144m",
    hp_badge="\033[38;5;230;48;5;88m",
    armor_badge="\033[38;5;230;48;5;24m",
    instinct_badge="\033[38;5;235;48;5;187m",
    error="\033[38;5;167m",
)

PLAIN_THEME = CardTheme(
    name="plain",
    reset="",
    title="",
    monster_name="",
    heading="",
    class_badge="",
    requires_badge="",
    replaces_badge="",
    hp_badge="",
    armor_badge="",
    instinct_badge="",
    error="",
)

_THEMES: dict[str, CardTheme] = {
    theme.name: theme
    for theme in (
        DEFAULT_THEME,
        PARCHMENT_THEME,
        PLAIN_THEME,
    )
}


def available_theme_names() -> tuple[str, ...]:
    """Return supported theme names in stable display order."""
    return tuple(_THEMES.keys())


def normalize_theme_name(name: str | None) -> str | None:
    """Normalize user-provided theme names to registry keys.

    Matching is case-insensitive and accepts ``_``/space as ``-`` aliases.
    Returns ``None`` for unknown or blank names.
    """
    if name is None:
        return None
    normalized = str(name).strip().lower().replace("_", "-").replace(" ", "-")
    if not normalized:
        return None
    return normalized if normalized in _THEMES else None


def resolve_theme(name: str | None, *, no_color: bool = False) -> CardTheme:
    """Resolve a theme name to a palette, falling back to the default theme."""
    if no_color:
        return PLAIN_THEME
    normalized = normalize_theme_name(name)
    if normalized is None:
        return DEFAULT_THEME
    return _THEMES[normalized]


__all__ = [
    "CardTheme",
    "DEFAULT_THEME",
    "PARCHMENT_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
