"""Predefined color themes for tables."""

from dataclasses import dataclass

from ansi_charts.core import constants as c


@dataclass(frozen=True)
class TableColorTheme:
    """Escape sequences wrapped around table borders, headers and rows."""
    border: str
    header: str
    header_bg: str
    row: str
    alt_row: str


DEFAULT = TableColorTheme(
    border=c.WHITE,
    header=c.WHITE,
    header_bg="",
    row=c.WHITE,
    alt_row=c.WHITE,
)

DARK = TableColorTheme(
    border=c.BRIGHT_BLACK,
    header=c.BRIGHT_WHITE,
    header_bg=c.BG_BLACK,
    row=c.BRIGHT_WHITE,
    alt_row=c.BRIGHT_BLACK,
)

BLUE = TableColorTheme(
    border=c.BLUE,
    header=c.BRIGHT_BLUE,
    header_bg="",
    row=c.WHITE,
    alt_row=c.BRIGHT_BLACK,
)

GREEN = TableColorTheme(
    border=c.GREEN,
    header=c.BRIGHT_GREEN,
    header_bg="",
    row=c.WHITE,
    alt_row=c.BRIGHT_BLACK,
)

# Registry of built-in themes
THEMES: dict[str, TableColorTheme] = {
    "default": DEFAULT,
    "dark": DARK,
    "blue": BLUE,
    "green": GREEN,
}


def get_theme(name: str) -> TableColorTheme | None:
    """Get a theme by name (case-insensitive)."""
    return THEMES.get(name.lower())


def list_themes() -> list[str]:
    """Get list of available theme names."""
    return list(THEMES.keys())
