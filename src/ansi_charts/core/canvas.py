"""Canvas - fixed-size 2D grid of glyph cells for chart rendering."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator

from ansi_charts.core.cell import Cell
from ansi_charts.core.constants import RESET
from ansi_charts.core.glyphs import LineGlyphs
from ansi_charts.core.scale import round_half_up


@dataclass
class Canvas:
    """
    A width x height grid of Cells.

    A canvas lives for one render pass: the chart creates it, draws its
    layers (grid, lines, markers) with each layer overwriting the cells
    beneath it, emits the rows and discards it.
    """
    width: int
    height: int
    _buffer: list[list[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Initialize the buffer with blank cells."""
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Canvas size must be non-negative, got {self.width}x{self.height}")
        if not self._buffer:
            self._buffer = [
                [Cell() for _ in range(self.width)] for _ in range(self.height)
            ]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Cell:
        """Get the cell at position (x, y)."""
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) out of bounds ({self.width}x{self.height})")
        return self._buffer[y][x]

    def set(self, x: int, y: int, cell: Cell) -> None:
        """Set the cell at position (x, y)."""
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) out of bounds ({self.width}x{self.height})")
        self._buffer[y][x] = cell

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        """Get cell using indexing: canvas[x, y]."""
        x, y = pos
        return self.get(x, y)

    def __setitem__(self, pos: tuple[int, int], cell: Cell) -> None:
        """Set cell using indexing: canvas[x, y] = cell."""
        x, y = pos
        self.set(x, y, cell)

    def draw_point(self, x: int, y: int, glyph: str, style: str | None = None) -> None:
        """Write a glyph at (x, y); coordinates off the grid are dropped."""
        if self.in_bounds(x, y):
            self._buffer[y][x] = Cell(glyph, style)

    def put_text(self, x: int, y: int, text: str, style: str | None = None) -> None:
        """Write text left to right starting at (x, y), clipped to the grid."""
        for i, char in enumerate(text):
            self.draw_point(x + i, y, char, style)

    def hline(self, y: int, glyph: str, style: str | None = None) -> None:
        """Fill row y with glyph."""
        for x in range(self.width):
            self.draw_point(x, y, glyph, style)

    def vline(self, x: int, glyph: str, style: str | None = None) -> None:
        """Fill column x with glyph."""
        for y in range(self.height):
            self.draw_point(x, y, glyph, style)

    def draw_grid(self, horizontal: str, vertical: str, style: str | None = None) -> None:
        """
        Overlay gridlines every height/5 rows and width/5 columns.

        Must be drawn before data so lines and markers land on top.
        """
        row_step = max(1, self.height // 5)
        for y in range(0, self.height, row_step):
            self.hline(y, horizontal, style)

        col_step = max(1, self.width // 5)
        for x in range(0, self.width, col_step):
            self.vline(x, vertical, style)

    def draw_line(
        self,
        x1: int,
        y1: int,
        x2: int,
        y2: int,
        glyphs: LineGlyphs,
        style: str | None = None,
    ) -> None:
        """
        Rasterize a segment by stepping.

        Takes max(|dx|, |dy|) steps of dx/steps and dy/steps, writing at
        each rounded cell. Steps whose cell falls off the grid are skipped
        without being visited, so far off-screen endpoints cost nothing.
        A zero-length segment draws nothing; its endpoint is drawn as a
        marker by the caller.
        """
        dx = x2 - x1
        dy = y2 - y1
        steps = max(abs(dx), abs(dy))
        if steps == 0:
            return

        glyph = segment_glyph(dx, dy, glyphs)
        x_inc = dx / steps
        y_inc = dy / steps

        first, last = _visible_steps(x1, x_inc, self.width, 0, steps)
        first, last = _visible_steps(y1, y_inc, self.height, first, last)

        for k in range(first, last + 1):
            x = round_half_up(x1 + k * x_inc)
            y = round_half_up(y1 + k * y_inc)
            self.draw_point(x, y, glyph, style)

    @property
    def current_height(self) -> int:
        """Get the number of rows in the buffer."""
        return len(self._buffer)

    def rows(self) -> Iterator[list[Cell]]:
        """Iterate over rows."""
        yield from self._buffer

    def cells(self) -> Iterator[tuple[int, int, Cell]]:
        """Iterate over all cells as (x, y, cell) tuples."""
        for y, row in enumerate(self._buffer):
            for x, cell in enumerate(row):
                yield x, y, cell

    def render_lines(self) -> list[str]:
        """
        Emit each row as a string.

        Styled cells are wrapped in their escape and a reset; runs of cells
        sharing a style share one escape.
        """
        lines: list[str] = []
        for row in self._buffer:
            parts: list[str] = []
            current: str | None = None
            for cell in row:
                if cell.style != current:
                    if current is not None:
                        parts.append(RESET)
                    if cell.style is not None:
                        parts.append(cell.style)
                    current = cell.style
                parts.append(cell.char)
            if current is not None:
                parts.append(RESET)
            lines.append(''.join(parts))
        return lines

    def to_text(self) -> str:
        """Plain text of the grid without any styling, rows joined by newlines."""
        return '\n'.join(''.join(cell.char for cell in row) for row in self._buffer)


def _visible_steps(start: int, inc: float, size: int, first: int, last: int) -> tuple[int, int]:
    """
    Narrow the step range [first, last] to steps that can round into [0, size).

    The result may keep one extra step at each end; draw_point drops those.
    An empty range comes back with first > last.
    """
    if inc == 0:
        if -0.5 <= start < size - 0.5:
            return first, last
        return 1, 0
    low = (-0.5 - start) / inc
    high = (size - 0.5 - start) / inc
    if low > high:
        low, high = high, low
    return max(first, math.floor(low)), min(last, math.ceil(high))


def segment_glyph(dx: int, dy: int, glyphs: LineGlyphs) -> str:
    """Pick the glyph for a segment from its screen direction."""
    if abs(dx) > abs(dy):
        return glyphs.horizontal
    if abs(dy) > abs(dx):
        return glyphs.vertical
    # Screen y grows downward, so opposite signs mean the line climbs
    if (dx > 0 > dy) or (dx < 0 < dy):
        return glyphs.rising
    return glyphs.falling
