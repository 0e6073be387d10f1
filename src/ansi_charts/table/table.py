"""Boxed text tables with fixed-width, aligned columns."""

from __future__ import annotations

import copy
import io
import logging
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, TextIO

from ansi_charts.core.ansi_text import Alignment, align, visible_len
from ansi_charts.core.constants import RESET
from ansi_charts.core.glyphs import BoxChars, TableStyle, box_chars
from ansi_charts.table.themes import TableColorTheme

logger = logging.getLogger(__name__)

EMPTY_MESSAGE = "Empty table\n"
MIN_AUTO_WIDTH = 5


class _Rule(Enum):
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class Column:
    header: str
    width: int
    alignment: Alignment = Alignment.LEFT

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValueError(f"Column width must be >= 0, got {self.width}")


class Table:
    """
    A table of fixed-width columns.

    Cell text longer than its column is truncated, shorter text is padded
    per the column alignment. Widths are measured on visible text, so cells
    may carry their own ANSI colors. Rows shorter than the column list
    render empty cells; extra cells are ignored.

    Example:
        >>> table = Table(TableStyle.ROUNDED)
        >>> table.add_column("Name", 10)
        >>> table.add_column("Age", 5, Alignment.RIGHT)
        >>> table.add_row(["Alice", "25"])
        >>> print(table.render())
    """

    def __init__(self, style: TableStyle | str = TableStyle.UNICODE):
        self.style = TableStyle(style)
        self.theme: TableColorTheme | None = None
        self.alternating_rows = False
        self._columns: list[Column] = []
        self._rows: list[list[str]] = []

    @property
    def columns(self) -> tuple[Column, ...]:
        return tuple(self._columns)

    @property
    def rows(self) -> tuple[tuple[str, ...], ...]:
        return tuple(tuple(row) for row in self._rows)

    @property
    def has_header(self) -> bool:
        return bool(self._columns)

    def add_column(
        self,
        header: str,
        width: int,
        alignment: Alignment | str = Alignment.LEFT,
    ) -> None:
        self._columns.append(Column(header, width, Alignment(alignment)))

    def add_row(self, cells: Sequence[str]) -> None:
        self._rows.append([str(cell) for cell in cells])

    # Configuration

    def _derive(self) -> "Table":
        table = copy.copy(self)
        table._columns = list(self._columns)
        table._rows = [list(row) for row in self._rows]
        return table

    def with_colors(self, theme: TableColorTheme | None) -> "Table":
        """Return a copy drawn with the given color theme (None for plain)."""
        table = self._derive()
        table.theme = theme
        return table

    def with_alternating_rows(self, enabled: bool = True) -> "Table":
        table = self._derive()
        table.alternating_rows = enabled
        return table

    def with_style(self, style: TableStyle | str) -> "Table":
        table = self._derive()
        table.style = TableStyle(style)
        return table

    # Rendering

    def _paint(self, text: str, color: str) -> str:
        if self.theme is None or not color:
            return text
        return f"{color}{text}{RESET}"

    def _rule(self, chars: BoxChars, kind: _Rule) -> str:
        left, junction, right = {
            _Rule.TOP: (chars.top_left, chars.tee_down, chars.top_right),
            _Rule.MIDDLE: (chars.tee_right, chars.cross, chars.tee_left),
            _Rule.BOTTOM: (chars.bottom_left, chars.tee_up, chars.bottom_right),
        }[kind]
        segments = [chars.horizontal * (column.width + 2) for column in self._columns]
        line = left + junction.join(segments) + right
        return self._paint(line, self.theme.border if self.theme else "")

    def _row_line(self, chars: BoxChars, cells: Sequence[str], color: str) -> str:
        border = self.theme.border if self.theme else ""
        vertical = self._paint(chars.vertical, border)
        parts = [vertical]
        for i, column in enumerate(self._columns):
            text = cells[i] if i < len(cells) else ""
            padded = align(text, column.width, column.alignment)
            parts.append(self._paint(f" {padded} ", color))
            parts.append(vertical)
        return ''.join(parts)

    def _row_color(self, index: int) -> str:
        if self.theme is None:
            return ""
        if self.alternating_rows and index % 2 == 1:
            return self.theme.alt_row
        return self.theme.row

    def write(self, out: TextIO | None = None) -> None:
        """Write the table to out (stdout by default)."""
        out = out if out is not None else sys.stdout
        if not self._columns:
            logger.debug("Table has no columns")
            out.write(EMPTY_MESSAGE)
            return

        chars = box_chars(self.style)
        out.write(self._rule(chars, _Rule.TOP) + "\n")

        if self.has_header:
            header_color = ""
            if self.theme is not None:
                header_color = self.theme.header + self.theme.header_bg
            headers = [column.header for column in self._columns]
            out.write(self._row_line(chars, headers, header_color) + "\n")
            out.write(self._rule(chars, _Rule.MIDDLE) + "\n")

        for index, row in enumerate(self._rows):
            out.write(self._row_line(chars, row, self._row_color(index)) + "\n")

        out.write(self._rule(chars, _Rule.BOTTOM) + "\n")

    def render(self) -> str:
        """Render the table to a string."""
        buffer = io.StringIO()
        self.write(buffer)
        return buffer.getvalue()


def auto_column_widths(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> list[int]:
    """Width of each column: its longest visible text, header included, but at least 5."""
    widths = []
    for index, header in enumerate(headers):
        longest = visible_len(header)
        for row in rows:
            if index < len(row):
                longest = max(longest, visible_len(str(row[index])))
        widths.append(max(longest, MIN_AUTO_WIDTH))
    return widths


def create_simple_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    style: TableStyle | str = TableStyle.UNICODE,
) -> Table:
    """Build a left-aligned table sized to fit its content."""
    table = Table(style)
    for header, width in zip(headers, auto_column_widths(headers, rows)):
        table.add_column(header, width, Alignment.LEFT)
    for row in rows:
        table.add_row(row)
    return table
