"""UI theme definitions and selection helpers.

Themes map entry kinds to pygments console colour specs (``"*blue*"`` is
bold blue, ``""`` leaves the text unstyled). Only the name column is
coloured.
"""

from __future__ import annotations

from dataclasses import dataclass

from pygments.console import ansiformat

from .listing.types import EntryKind


@dataclass(frozen=True)
class UITheme:
    """Semantic colour palette used by the table renderer."""

    name: str
    directory: str
    executable: str
    file: str

    def color_for(self, kind: EntryKind) -> str:
        if kind is EntryKind.DIRECTORY:
            return self.directory
        if kind is EntryKind.EXECUTABLE:
            return self.executable
        return self.file


DEFAULT_THEME = UITheme(
    name="default",
    directory="*blue*",
    executable="*green*",
    file="",
)

OCEAN_THEME = UITheme(
    name="ocean",
    directory="*cyan*",
    executable="*brightyellow*",
    file="brightblue",
)

PLAIN_THEME = UITheme(
    name="plain",
    directory="",
    executable="",
    file="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


def colorize_name(theme: UITheme, kind: EntryKind, text: str) -> str:
    """Wrap ``text`` in the theme's ANSI colour for ``kind``."""
    color = theme.color_for(kind)
    if not color or not text:
        return text
    return ansiformat(color, text)


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
    "colorize_name",
]
