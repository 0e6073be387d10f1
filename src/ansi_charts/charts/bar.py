"""Horizontal bar charts."""

from __future__ import annotations

import copy
import io
import logging
import sys
from dataclasses import dataclass
from typing import TextIO

from ansi_charts.core.ansi_text import pad_to_width
from ansi_charts.core.color import ColorPicker, random_picker
from ansi_charts.core.constants import RESET
from ansi_charts.core.errors import InvalidValueError
from ansi_charts.core.glyphs import BarStyle, bar_char
from ansi_charts.core.scale import check_finite, scale_length

logger = logging.getLogger(__name__)

LABEL_WIDTH = 12
NO_DATA_MESSAGE = "No bars to display\n"


def check_value(value: float) -> float:
    """Reject values that cannot be drawn proportionally."""
    value = check_finite(value)
    if value < 0:
        raise InvalidValueError(f"Value must not be negative, got {value}")
    return value


@dataclass(frozen=True)
class Bar:
    label: str
    value: float


class BarChart:
    """
    Horizontal bars scaled so the largest value spans max_width cells.

    In random color mode every filled cell gets its own color from the
    color picker. Pass a picker (see core.color.cycle_picker) for
    reproducible output.
    """

    def __init__(
        self,
        style: BarStyle | str = BarStyle.UNICODE,
        max_width: int = 40,
        random_colors: bool = False,
        color_picker: ColorPicker | None = None,
    ):
        self.style = BarStyle(style)
        self.max_width = max_width
        self.random_colors = random_colors
        self.color_picker = color_picker
        self._bars: list[Bar] = []

    @property
    def bars(self) -> tuple[Bar, ...]:
        return tuple(self._bars)

    def add_bar(self, label: str, value: float) -> None:
        """Add a bar; value must be finite and non-negative."""
        self._bars.append(Bar(label, check_value(value)))

    def with_random_colors(
        self,
        enabled: bool = True,
        color_picker: ColorPicker | None = None,
    ) -> "BarChart":
        """Return a copy with per-cell random colors switched on or off."""
        chart = copy.copy(self)
        chart._bars = list(self._bars)
        chart.random_colors = enabled
        if color_picker is not None:
            chart.color_picker = color_picker
        return chart

    def bar_lengths(self) -> list[int]:
        """Filled cell count for each bar, in insertion order."""
        max_value = max((bar.value for bar in self._bars), default=0.0)
        return [scale_length(bar.value, max_value, self.max_width) for bar in self._bars]

    def write(self, out: TextIO | None = None) -> None:
        """Write one line per bar: label, bar, and value."""
        out = out if out is not None else sys.stdout
        if not self._bars:
            logger.debug("Bar chart has no bars")
            out.write(NO_DATA_MESSAGE)
            return

        char = bar_char(self.style)
        picker = None
        if self.random_colors:
            picker = self.color_picker or random_picker()

        for bar, length in zip(self._bars, self.bar_lengths()):
            if picker is not None:
                fill = ''.join(f"{picker()}{char}{RESET}" for _ in range(length))
            else:
                fill = char * length
            label = pad_to_width(bar.label, LABEL_WIDTH)
            out.write(f"{label} | {fill} ({bar.value:g})\n")

    def render(self) -> str:
        """Render the chart to a string."""
        buffer = io.StringIO()
        self.write(buffer)
        return buffer.getvalue()
