"""Line charts drawn onto a character canvas."""

from __future__ import annotations

import copy
import io
import logging
import sys
from dataclasses import dataclass, replace
from typing import Sequence, TextIO

from ansi_charts.core.ansi_text import center_line
from ansi_charts.core.canvas import Canvas
from ansi_charts.core.color import ColorLike, to_escape
from ansi_charts.core.errors import LengthMismatchError
from ansi_charts.core.glyphs import LineStyle, line_glyphs
from ansi_charts.core.scale import AxisBounds, ScaleMapper, check_finite

logger = logging.getLogger(__name__)

NO_DATA_MESSAGE = "No data points to display\n"


@dataclass(frozen=True)
class DataPoint:
    """One sample of a line chart."""
    x: float
    y: float
    label: str | None = None


@dataclass(frozen=True)
class LineChartOptions:
    """Presentation settings for a LineChart."""
    style: LineStyle = LineStyle.UNICODE
    width: int = 60
    height: int = 20
    title: str | None = None
    x_label: str | None = None
    y_label: str | None = None
    color: str | None = None
    show_grid: bool = False
    show_markers: bool = True


@dataclass(frozen=True)
class LineStatistics:
    """Summary of the y-values of a chart."""
    count: int
    min_y: float
    max_y: float
    mean_y: float

    @property
    def range_y(self) -> float:
        return self.max_y - self.min_y


class LineChart:
    """
    A line chart of (x, y) points.

    Points are added in any order and drawn in ascending x order. Bounds
    follow the data (with 5% padding) until fixed explicitly.

    Configuration methods return a new chart and leave this one unchanged:

        >>> chart = LineChart(width=40, height=10).with_title("Latency")
        >>> chart.add_y_values([3, 1, 4, 1, 5])
        >>> print(chart.render())
    """

    def __init__(
        self,
        style: LineStyle | str = LineStyle.UNICODE,
        width: int = 60,
        height: int = 20,
    ):
        self.options = LineChartOptions(style=LineStyle(style), width=width, height=height)
        self.bounds = AxisBounds()
        self._points: list[DataPoint] = []

    @property
    def points(self) -> tuple[DataPoint, ...]:
        """Points in insertion order."""
        return tuple(self._points)

    def __len__(self) -> int:
        return len(self._points)

    # Data

    def add_point(self, x: float, y: float, label: str | None = None) -> None:
        """
        Add one point; recomputes bounds when auto-scaling.

        Raises:
            InvalidValueError: if x or y is NaN or infinite.
        """
        self._append(DataPoint(check_finite(x), check_finite(y), label))

    def _append(self, point: DataPoint) -> None:
        self._points.append(point)
        if self.bounds.auto_scale:
            self._update_bounds()

    def add_points(self, x_values: Sequence[float], y_values: Sequence[float]) -> None:
        """
        Add points from parallel x and y sequences.

        Raises:
            LengthMismatchError: if the sequences differ in length.
            InvalidValueError: if any value is NaN or infinite.

        Nothing is added when either error is raised.
        """
        if len(x_values) != len(y_values):
            raise LengthMismatchError(len(x_values), len(y_values))
        points = [DataPoint(check_finite(x), check_finite(y)) for x, y in zip(x_values, y_values)]
        for point in points:
            self._append(point)

    def add_y_values(self, y_values: Sequence[float]) -> None:
        """Add points with x implied as 0, 1, 2, ..."""
        self.add_points(range(len(y_values)), y_values)

    def set_bounds(self, min_x: float, max_x: float, min_y: float, max_y: float) -> None:
        """Fix the axis bounds in place and stop auto-scaling."""
        self.bounds = AxisBounds.fixed(
            check_finite(min_x), check_finite(max_x), check_finite(min_y), check_finite(max_y),
        )

    def _update_bounds(self) -> None:
        self.bounds = AxisBounds.from_points(self._points)
        logger.debug("Auto-scaled bounds to %s", self.bounds)

    # Configuration

    def _derive(self, **changes) -> "LineChart":
        chart = copy.copy(self)
        chart._points = list(self._points)
        chart.options = replace(self.options, **changes)
        return chart

    def with_title(self, title: str) -> "LineChart":
        return self._derive(title=title)

    def with_labels(self, x_label: str, y_label: str) -> "LineChart":
        return self._derive(x_label=x_label, y_label=y_label)

    def with_color(self, color: ColorLike) -> "LineChart":
        """Color the line and markers (Color, escape string or color name)."""
        return self._derive(color=to_escape(color))

    def with_grid(self, show_grid: bool = True) -> "LineChart":
        return self._derive(show_grid=show_grid)

    def with_markers(self, show_markers: bool = True) -> "LineChart":
        return self._derive(show_markers=show_markers)

    def with_style(self, style: LineStyle | str) -> "LineChart":
        return self._derive(style=LineStyle(style))

    def with_size(self, width: int, height: int) -> "LineChart":
        return self._derive(width=width, height=height)

    def with_bounds(self, min_x: float, max_x: float, min_y: float, max_y: float) -> "LineChart":
        """Return a copy with fixed bounds (auto-scaling off)."""
        chart = self._derive()
        chart.set_bounds(min_x, max_x, min_y, max_y)
        return chart

    # Rendering

    def draw(self) -> Canvas:
        """Draw grid, line and markers onto a fresh canvas."""
        opts = self.options
        glyphs = line_glyphs(opts.style)
        canvas = Canvas(opts.width, opts.height)
        mapper = ScaleMapper(self.bounds, opts.width, opts.height)

        # Stable sort keeps insertion order for equal x
        ordered = sorted(self._points, key=lambda p: p.x)
        screen = [mapper.map_point(p.x, p.y) for p in ordered]

        if opts.show_grid:
            canvas.draw_grid(glyphs.grid_horizontal, glyphs.grid_vertical)

        for (x1, y1), (x2, y2) in zip(screen, screen[1:]):
            canvas.draw_line(x1, y1, x2, y2, glyphs, opts.color)

        if opts.show_markers:
            for x, y in screen:
                canvas.draw_point(x, y, glyphs.point, opts.color)

        return canvas

    def write(self, out: TextIO | None = None) -> None:
        """Write the chart to out (stdout by default)."""
        out = out if out is not None else sys.stdout
        if not self._points:
            logger.debug("Line chart has no points")
            out.write(NO_DATA_MESSAGE)
            return

        opts = self.options
        canvas = self.draw()

        if opts.title:
            out.write(center_line(opts.title, opts.width) + "\n")
        for line in canvas.render_lines():
            out.write(line + "\n")
        if opts.x_label:
            out.write(center_line(opts.x_label, opts.width) + "\n")
        if opts.y_label:
            out.write(center_line(opts.y_label, opts.width) + "\n")

    def render(self) -> str:
        """Render the chart to a string."""
        buffer = io.StringIO()
        self.write(buffer)
        return buffer.getvalue()

    # Statistics

    def statistics(self) -> LineStatistics | None:
        """Point count and min/max/mean of y, or None without points."""
        if not self._points:
            return None
        ys = [p.y for p in self._points]
        return LineStatistics(
            count=len(ys),
            min_y=min(ys),
            max_y=max(ys),
            mean_y=sum(ys) / len(ys),
        )

    def write_statistics(self, out: TextIO | None = None) -> None:
        """Write a short statistics report."""
        out = out if out is not None else sys.stdout
        stats = self.statistics()
        if stats is None:
            out.write("No data points for statistics\n")
            return
        out.write("\nLine Chart Statistics:\n")
        out.write(f"Points: {stats.count}\n")
        out.write(f"Y Min: {stats.min_y:.2f}\n")
        out.write(f"Y Max: {stats.max_y:.2f}\n")
        out.write(f"Y Mean: {stats.mean_y:.2f}\n")
        out.write(f"Y Range: {stats.range_y:.2f}\n")


def create_simple_line_chart(
    y_values: Sequence[float],
    style: LineStyle | str = LineStyle.UNICODE,
) -> LineChart:
    """A 60x20 chart of y-values against their index."""
    chart = LineChart(style, 60, 20)
    chart.add_y_values(y_values)
    return chart


def create_line_chart(
    x_values: Sequence[float],
    y_values: Sequence[float],
    style: LineStyle | str = LineStyle.UNICODE,
    width: int = 60,
    height: int = 20,
) -> LineChart:
    """A chart of paired x/y sequences."""
    chart = LineChart(style, width, height)
    chart.add_points(x_values, y_values)
    return chart
