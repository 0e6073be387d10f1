"""Breakdown charts - one stacked bar split proportionally across segments."""

from __future__ import annotations

import copy
import io
import logging
import sys
from dataclasses import dataclass, replace
from typing import Sequence, TextIO

from ansi_charts.charts.bar import check_value
from ansi_charts.core.color import ColorLike, to_escape
from ansi_charts.core.constants import RESET, SEGMENT_COLORS
from ansi_charts.core.glyphs import BreakdownStyle, breakdown_glyphs
from ansi_charts.core.scale import allocate_widths

logger = logging.getLogger(__name__)

NO_DATA_MESSAGE = "No segments to display\n"


@dataclass
class Segment:
    """
    One labeled share of the bar.

    percentage is derived from the chart total and recomputed before
    every render; it is not meaningful between renders.
    """
    label: str
    value: float
    color: str | None = None
    percentage: float = 0.0


@dataclass(frozen=True)
class BreakdownOptions:
    style: BreakdownStyle = BreakdownStyle.UNICODE
    width: int = 50
    title: str | None = None
    show_percentages: bool = True
    show_values: bool = False
    show_legend: bool = True
    min_segment_width: int = 1


@dataclass(frozen=True)
class BreakdownStatistics:
    total: float
    segment_count: int
    largest_label: str
    largest_percentage: float


class BreakdownChart:
    """
    A single bar of total width cells split across segments by value.

    Segment widths always sum to exactly the configured width: every
    segment but the last gets its rounded share (at least
    min_segment_width) and the last takes whatever is left.
    """

    def __init__(self, style: BreakdownStyle | str = BreakdownStyle.UNICODE, width: int = 50):
        self.options = BreakdownOptions(style=BreakdownStyle(style), width=width)
        self._segments: list[Segment] = []

    @property
    def segments(self) -> tuple[Segment, ...]:
        return tuple(self._segments)

    def add_segment(self, label: str, value: float, color: ColorLike | None = None) -> None:
        """Add a segment; value must be finite and non-negative."""
        escape = to_escape(color) if color is not None else None
        self._segments.append(Segment(label, check_value(value), escape))

    # Configuration

    def _derive(self, **changes) -> "BreakdownChart":
        chart = copy.copy(self)
        chart._segments = [replace(segment) for segment in self._segments]
        chart.options = replace(self.options, **changes)
        return chart

    def with_title(self, title: str) -> "BreakdownChart":
        return self._derive(title=title)

    def with_percentages(self, show: bool = True) -> "BreakdownChart":
        return self._derive(show_percentages=show)

    def with_values(self, show: bool = True) -> "BreakdownChart":
        return self._derive(show_values=show)

    def with_legend(self, show: bool = True) -> "BreakdownChart":
        return self._derive(show_legend=show)

    def with_min_segment_width(self, width: int) -> "BreakdownChart":
        return self._derive(min_segment_width=width)

    # Layout

    @property
    def total(self) -> float:
        return sum(segment.value for segment in self._segments)

    def _calculate_percentages(self) -> None:
        total = self.total
        for segment in self._segments:
            segment.percentage = segment.value / total * 100.0 if total > 0 else 0.0

    def segment_color(self, index: int) -> str:
        """Explicit segment color, else the default palette wrapped by index."""
        if index < len(self._segments) and self._segments[index].color:
            return self._segments[index].color
        return SEGMENT_COLORS[index % len(SEGMENT_COLORS)]

    def segment_widths(self) -> list[int]:
        """Cell width of every segment for the current values."""
        self._calculate_percentages()
        return allocate_widths(
            [segment.percentage for segment in self._segments],
            self.options.width,
            self.options.min_segment_width,
        )

    # Rendering

    def write(self, out: TextIO | None = None) -> None:
        """Write title, stacked bar and legend to out (stdout by default)."""
        out = out if out is not None else sys.stdout
        if not self._segments:
            logger.debug("Breakdown chart has no segments")
            out.write(NO_DATA_MESSAGE)
            return

        if self.options.title:
            out.write(f"{self.options.title}\n")
        self._write_bar(out)
        if self.options.show_legend:
            self._write_legend(out)
        out.write("\n")

    def _write_bar(self, out: TextIO) -> None:
        char = breakdown_glyphs(self.options.style).segment
        for i, width in enumerate(self.segment_widths()):
            out.write(f"{self.segment_color(i)}{char * width}{RESET}")
        out.write("\n")

    def _write_legend(self, out: TextIO) -> None:
        self._calculate_percentages()
        marker = breakdown_glyphs(self.options.style).legend

        out.write("\nLegend:\n")
        for i, segment in enumerate(self._segments):
            line = f"{self.segment_color(i)}{marker}{RESET} {segment.label}"
            if self.options.show_percentages:
                line += f" ({segment.percentage:.1f}%)"
            if self.options.show_values:
                line += f" [{segment.value:.2f}]"
            out.write(line + "\n")

    def render(self) -> str:
        """Render the chart to a string."""
        buffer = io.StringIO()
        self.write(buffer)
        return buffer.getvalue()

    # Statistics

    def statistics(self) -> BreakdownStatistics | None:
        """Total, segment count and the largest segment, or None when empty."""
        if not self._segments:
            return None
        self._calculate_percentages()
        # First of equal maxima wins
        largest = max(self._segments, key=lambda segment: segment.value)
        return BreakdownStatistics(
            total=self.total,
            segment_count=len(self._segments),
            largest_label=largest.label,
            largest_percentage=largest.percentage,
        )

    def write_statistics(self, out: TextIO | None = None) -> None:
        out = out if out is not None else sys.stdout
        stats = self.statistics()
        if stats is None:
            return
        out.write("Statistics:\n")
        out.write(f"  Total: {stats.total:.2f}\n")
        out.write(f"  Segments: {stats.segment_count}\n")
        out.write(f"  Largest: {stats.largest_label} ({stats.largest_percentage:.1f}%)\n")


def create_breakdown(
    labels: Sequence[str],
    values: Sequence[float],
    style: BreakdownStyle | str = BreakdownStyle.UNICODE,
    width: int = 50,
) -> BreakdownChart:
    """Build a chart pairing labels with values; extras on either side are ignored."""
    chart = BreakdownChart(style, width)
    for label, value in zip(labels, values):
        chart.add_segment(label, value)
    return chart
