"""Glyph tables for each chart type, keyed by visual style."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TableStyle(Enum):
    ASCII = "ascii"
    UNICODE = "unicode"
    DOUBLE_LINE = "double_line"
    ROUNDED = "rounded"


class LineStyle(Enum):
    ASCII = "ascii"
    UNICODE = "unicode"
    SMOOTH = "smooth"


class BarStyle(Enum):
    ASCII = "ascii"
    UNICODE = "unicode"


class BreakdownStyle(Enum):
    ASCII = "ascii"
    UNICODE = "unicode"
    BLOCK = "block"
    ROUNDED = "rounded"
    MINIMAL = "minimal"


class TreeStyle(Enum):
    ASCII = "ascii"
    UNICODE = "unicode"
    ROUNDED = "rounded"
    THICK = "thick"


@dataclass(frozen=True)
class BoxChars:
    """Border and junction glyphs for a boxed table."""
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    horizontal: str
    vertical: str
    cross: str
    tee_down: str
    tee_up: str
    tee_left: str
    tee_right: str


@dataclass(frozen=True)
class LineGlyphs:
    """Glyphs for line segments, point markers and grid lines."""
    horizontal: str
    vertical: str
    rising: str     # dx and dy of opposite sign on screen
    falling: str
    point: str
    grid_horizontal: str
    grid_vertical: str


@dataclass(frozen=True)
class BreakdownGlyphs:
    segment: str
    legend: str


@dataclass(frozen=True)
class TreeChars:
    """Connector glyphs for tree branches plus optional node icons."""
    branch: str
    last_branch: str
    continuation: str
    space: str
    icon_expanded: str
    icon_collapsed: str
    icon_leaf: str


BOX_CHARS: dict[TableStyle, BoxChars] = {
    TableStyle.ASCII: BoxChars(
        top_left="+", top_right="+", bottom_left="+", bottom_right="+",
        horizontal="-", vertical="|", cross="+",
        tee_down="+", tee_up="+", tee_left="+", tee_right="+",
    ),
    TableStyle.UNICODE: BoxChars(
        top_left="┌", top_right="┐", bottom_left="└", bottom_right="┘",
        horizontal="─", vertical="│", cross="┼",
        tee_down="┬", tee_up="┴", tee_left="┤", tee_right="├",
    ),
    TableStyle.DOUBLE_LINE: BoxChars(
        top_left="╔", top_right="╗", bottom_left="╚", bottom_right="╝",
        horizontal="═", vertical="║", cross="╬",
        tee_down="╦", tee_up="╩", tee_left="╣", tee_right="╠",
    ),
    TableStyle.ROUNDED: BoxChars(
        top_left="╭", top_right="╮", bottom_left="╰", bottom_right="╯",
        horizontal="─", vertical="│", cross="┼",
        tee_down="┬", tee_up="┴", tee_left="┤", tee_right="├",
    ),
}

LINE_GLYPHS: dict[LineStyle, LineGlyphs] = {
    LineStyle.ASCII: LineGlyphs(
        horizontal="-", vertical="|", rising="/", falling="\\", point="*",
        grid_horizontal="-", grid_vertical="|",
    ),
    LineStyle.UNICODE: LineGlyphs(
        horizontal="─", vertical="│", rising="╱", falling="╲", point="●",
        grid_horizontal="─", grid_vertical="│",
    ),
    LineStyle.SMOOTH: LineGlyphs(
        horizontal="━", vertical="┃", rising="╱", falling="╲", point="●",
        grid_horizontal="┄", grid_vertical="┆",
    ),
}

BAR_CHARS: dict[BarStyle, str] = {
    BarStyle.ASCII: "#",
    BarStyle.UNICODE: "█",
}

BREAKDOWN_GLYPHS: dict[BreakdownStyle, BreakdownGlyphs] = {
    BreakdownStyle.ASCII: BreakdownGlyphs(segment="=", legend="o"),
    BreakdownStyle.UNICODE: BreakdownGlyphs(segment="█", legend="●"),
    BreakdownStyle.BLOCK: BreakdownGlyphs(segment="█", legend="●"),
    BreakdownStyle.ROUNDED: BreakdownGlyphs(segment="█", legend="●"),
    BreakdownStyle.MINIMAL: BreakdownGlyphs(segment="▬", legend="•"),
}

TREE_CHARS: dict[TreeStyle, TreeChars] = {
    TreeStyle.ASCII: TreeChars(
        branch="|-", last_branch="`-", continuation="| ", space="  ",
        icon_expanded="v ", icon_collapsed="> ", icon_leaf="- ",
    ),
    TreeStyle.UNICODE: TreeChars(
        branch="├─", last_branch="└─", continuation="│ ", space="  ",
        icon_expanded="▾ ", icon_collapsed="▸ ", icon_leaf="• ",
    ),
    TreeStyle.ROUNDED: TreeChars(
        branch="├─", last_branch="╰─", continuation="│ ", space="  ",
        icon_expanded="▾ ", icon_collapsed="▸ ", icon_leaf="• ",
    ),
    TreeStyle.THICK: TreeChars(
        branch="┣━", last_branch="┗━", continuation="┃ ", space="  ",
        icon_expanded="▼ ", icon_collapsed="▶ ", icon_leaf="■ ",
    ),
}

# Eight block heights, lowest first
SPARK_CHARS: tuple[str, ...] = ("▁", "▂", "▃", "▄", "▅", "▆", "▇", "█")


def box_chars(style: TableStyle | str) -> BoxChars:
    """Get the border glyphs for a table style (enum or name)."""
    return BOX_CHARS[TableStyle(style)]


def line_glyphs(style: LineStyle | str) -> LineGlyphs:
    """Get the line/marker/grid glyphs for a line style (enum or name)."""
    return LINE_GLYPHS[LineStyle(style)]


def bar_char(style: BarStyle | str) -> str:
    """Get the bar fill glyph for a bar style (enum or name)."""
    return BAR_CHARS[BarStyle(style)]


def breakdown_glyphs(style: BreakdownStyle | str) -> BreakdownGlyphs:
    """Get the segment and legend glyphs for a breakdown style (enum or name)."""
    return BREAKDOWN_GLYPHS[BreakdownStyle(style)]


def tree_chars(style: TreeStyle | str) -> TreeChars:
    """Get the connector glyphs for a tree style (enum or name)."""
    return TREE_CHARS[TreeStyle(style)]
