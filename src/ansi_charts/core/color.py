"""Color arguments and color-selection strategies for chart output."""

from __future__ import annotations

import itertools
import random
from dataclasses import dataclass
from typing import Callable, Iterable, Union

from ansi_charts.core.constants import COLORS, CSI, ESC, RANDOM_COLORS


@dataclass(frozen=True)
class Color:
    """
    A foreground color beyond the named 16-color set.

    Charts store colors as raw escape strings. Build one of these for a
    256-color index or a 24-bit RGB value and pass it anywhere a color
    argument is taken.
    """
    sgr: str

    @classmethod
    def from_256(cls, index: int) -> "Color":
        """Create a Color from a 256-color index."""
        if not 0 <= index <= 255:
            raise ValueError(f"256-color index must be 0-255, got {index}")
        return cls(f"38;5;{index}")

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a Color from RGB values."""
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise ValueError(f"RGB values must be 0-255, got ({r}, {g}, {b})")
        return cls(f"38;2;{r};{g};{b}")

    @property
    def fg(self) -> str:
        """Escape sequence selecting this color as foreground."""
        return f"{CSI}{self.sgr}m"


ColorLike = Union[Color, str]

# A color picker returns one escape string per call
ColorPicker = Callable[[], str]


def to_escape(color: ColorLike) -> str:
    """
    Normalize a color argument to a raw escape string.

    Accepts a Color, a raw escape sequence, or a name from COLORS
    (case-insensitive, e.g. "bright_cyan").
    """
    if isinstance(color, Color):
        return color.fg
    if color.startswith(ESC):
        return color
    try:
        return COLORS[color.lower()]
    except KeyError:
        raise ValueError(f"Unknown color: {color!r}") from None


def random_picker(
    palette: Iterable[str] = RANDOM_COLORS,
    rng: random.Random | None = None,
) -> ColorPicker:
    """Picker sampling the palette uniformly with its own random source."""
    colors = tuple(palette)
    if not colors:
        raise ValueError("palette must not be empty")
    source = rng or random.Random()
    return lambda: source.choice(colors)


def cycle_picker(palette: Iterable[str]) -> ColorPicker:
    """Deterministic picker cycling through the palette in order."""
    colors = tuple(palette)
    if not colors:
        raise ValueError("palette must not be empty")
    it = itertools.cycle(colors)
    return lambda: next(it)
