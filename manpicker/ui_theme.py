"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the picker chrome. Bold and underline inside
previewed pages come from the page itself and are applied in every theme
except the plain one.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    border: str
    title: str
    result_key: str
    match_highlight: str
    selected_row: str
    prompt_marker: str
    prompt_input: str
    match_count: str
    status_dim: str
    bold: str
    underline: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    border="\033[38;5;250m",
    title="\033[1m",
    result_key="\033[1;36m",
    match_highlight="\033[1;31m",
    selected_row="\033[48;5;240m",
    prompt_marker="\033[31m",
    prompt_input="\033[48;5;240m",
    match_count="\033[90m",
    status_dim="\033[2;38;5;250m",
    bold="\033[1m",
    underline="\033[4m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    border="\033[38;5;31m",
    title="\033[1;38;5;45m",
    result_key="\033[1;38;5;45m",
    match_highlight="\033[1;38;5;214m",
    selected_row="\033[48;5;24m",
    prompt_marker="\033[38;5;39m",
    prompt_input="\033[48;5;24m",
    match_count="\033[38;5;110m",
    status_dim="\033[2;38;5;110m",
    bold="\033[1m",
    underline="\033[4m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    border="",
    title="",
    result_key="",
    match_highlight="",
    selected_row="",
    prompt_marker="",
    prompt_input="",
    match_count="",
    status_dim="",
    bold="",
    underline="",
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


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
