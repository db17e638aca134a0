"""Color palettes for the screen areas.

Themes are ANSI SGR palettes for the commit list, diff body, gutter and
status line. Diff coloring is limited to the first character of each line.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the screen areas."""

    name: str
    default: str
    commit_selected: str
    commit_selected_inactive: str
    diff_added: str
    diff_removed: str
    gutter: str
    status: str
    status_alert: str


DEFAULT_THEME = UITheme(
    name="default",
    default="\033[37;40m",
    commit_selected="\033[37;42m",
    commit_selected_inactive="\033[37;100m",
    diff_added="\033[32;40m",
    diff_removed="\033[31;40m",
    gutter="\033[2m",
    status="\033[30;47m",
    status_alert="\033[31;47m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    default="\033[38;5;252m",
    commit_selected="\033[1;38;5;231;48;5;31m",
    commit_selected_inactive="\033[38;5;252;48;5;24m",
    diff_added="\033[38;5;84m",
    diff_removed="\033[38;5;210m",
    gutter="\033[2;38;5;31m",
    status="\033[38;5;16;48;5;117m",
    status_alert="\033[38;5;88;48;5;117m",
)

PLAIN_THEME = UITheme(
    name="plain",
    default="",
    commit_selected="\033[7m",
    commit_selected_inactive="\033[4m",
    diff_added="",
    diff_removed="",
    gutter="",
    status="\033[7m",
    status_alert="\033[7m",
)

COLOR_THEMES: tuple[UITheme, ...] = (DEFAULT_THEME, OCEAN_THEME)


def theme_names() -> list[str]:
    """Names accepted by ``--theme``; the plain palette comes from ``--no-color``."""
    return [theme.name for theme in COLOR_THEMES]


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Pick the palette for ``name``; unknown names fall back to the default."""
    if no_color:
        return PLAIN_THEME
    wanted = (name or DEFAULT_THEME.name).strip().lower()
    for theme in COLOR_THEMES:
        if theme.name == wanted:
            return theme
    logger.warning("unknown theme %r, using %s", name, DEFAULT_THEME.name)
    return DEFAULT_THEME
