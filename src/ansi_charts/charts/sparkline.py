"""Sparklines - one block glyph per value."""

from __future__ import annotations

import io
import math
import sys
from typing import Iterable, TextIO

from ansi_charts.core.glyphs import SPARK_CHARS
from ansi_charts.core.scale import check_finite


class Sparkline:
    """
    Map a numeric sequence onto eight block heights.

    Stateless: the values are copied at construction and rendering can be
    repeated any number of times.

        >>> Sparkline([1, 5, 22, 13, 53, 29, 44, 90]).render()
        '▁▁▂▁▅▃▄█\\n'
    """

    def __init__(self, values: Iterable[float]):
        """Raises InvalidValueError for NaN or infinite values."""
        self.values = tuple(check_finite(v) for v in values)

    def levels(self) -> list[int]:
        """Glyph index (0-7) for each value; all 0 for a flat sequence."""
        if not self.values:
            return []
        low = min(self.values)
        high = max(self.values)
        span = high - low
        if span == 0:
            return [0] * len(self.values)
        top = len(SPARK_CHARS) - 1
        return [math.floor((v - low) * top / span) for v in self.values]

    def write(self, out: TextIO | None = None) -> None:
        out = out if out is not None else sys.stdout
        out.write(self.render())

    def render(self) -> str:
        """The sparkline followed by a newline; empty input renders nothing."""
        if not self.values:
            return ""
        buffer = io.StringIO()
        for level in self.levels():
            buffer.write(SPARK_CHARS[level])
        buffer.write("\n")
        return buffer.getvalue()


def sparkline(values: Iterable[float]) -> str:
    """Render values as a sparkline string."""
    return Sparkline(values).render()
