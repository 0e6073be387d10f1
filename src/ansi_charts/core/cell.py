"""Cell - atomic unit of the chart canvas."""

from dataclasses import dataclass


@dataclass(slots=True)
class Cell:
    """
    A single glyph cell with an optional style.

    The glyph occupies one terminal column. style is a raw ANSI escape
    (e.g. "\\x1b[31m") emitted before the glyph, or None for plain text.
    """
    char: str = ' '
    style: str | None = None

    def copy(self) -> "Cell":
        """Create a copy of this cell."""
        return Cell(char=self.char, style=self.style)

    def is_default(self) -> bool:
        """Check if this cell is an unstyled blank."""
        return self.char == ' ' and self.style is None
