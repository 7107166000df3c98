"""Menu theme definitions and selection helpers.

A theme maps semantic roles of the directory browser (headings, tokens,
labels, errors) to a color/modifier pair. Syntax highlighting for file
contents is a separate Pygments style setting.
"""

from __future__ import annotations

from dataclasses import dataclass

from .ansi import Color, Modifier


@dataclass(frozen=True)
class TextStyle:
    """Color and modifier pair passed to ``Renderer.render``."""

    color: Color | None = None
    modifier: Modifier | None = None


PLAIN_STYLE = TextStyle()


@dataclass(frozen=True)
class MenuTheme:
    """Semantic styles used by the directory browser."""

    name: str
    heading: TextStyle
    token: TextStyle
    dir_label: TextStyle
    file_label: TextStyle
    current_dir_label: TextStyle
    current_dir: TextStyle
    menu_item: TextStyle
    prompt: TextStyle
    error: TextStyle


DEFAULT_THEME = MenuTheme(
    name="default",
    heading=TextStyle(Color.BLUE, Modifier.BOLD),
    token=TextStyle(Color.RED),
    dir_label=TextStyle(Color.BLUE, Modifier.BOLD),
    file_label=TextStyle(Color.GREEN, Modifier.BOLD),
    current_dir_label=TextStyle(Color.RED, Modifier.BOLD),
    current_dir=TextStyle(Color.BLUE, Modifier.BOLD),
    menu_item=TextStyle(Color.RED, Modifier.BOLD),
    prompt=TextStyle(Color.GREEN),
    error=TextStyle(Color.RED, Modifier.BOLD),
)

OCEAN_THEME = MenuTheme(
    name="ocean",
    heading=TextStyle(Color.CYAN, Modifier.BOLD),
    token=TextStyle(Color.CYAN),
    dir_label=TextStyle(Color.BLUE, Modifier.BOLD),
    file_label=TextStyle(Color.WHITE, Modifier.BOLD),
    current_dir_label=TextStyle(Color.CYAN, Modifier.BOLD),
    current_dir=TextStyle(Color.WHITE, Modifier.BOLD),
    menu_item=TextStyle(Color.CYAN),
    prompt=TextStyle(Color.BLUE),
    error=TextStyle(Color.YELLOW, Modifier.BOLD),
)

PLAIN_THEME = MenuTheme(
    name="plain",
    heading=PLAIN_STYLE,
    token=PLAIN_STYLE,
    dir_label=PLAIN_STYLE,
    file_label=PLAIN_STYLE,
    current_dir_label=PLAIN_STYLE,
    current_dir=PLAIN_STYLE,
    menu_item=PLAIN_STYLE,
    prompt=PLAIN_STYLE,
    error=PLAIN_STYLE,
)

_THEMES: dict[str, MenuTheme] = {
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


def resolve_theme(name: str | None, *, no_color: bool = False) -> MenuTheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "TextStyle",
    "MenuTheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
