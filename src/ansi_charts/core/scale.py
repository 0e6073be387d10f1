"""Mapping data values to screen coordinates and cell widths."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Protocol, Sequence

from ansi_charts.core.errors import InvalidValueError

logger = logging.getLogger(__name__)

# Fraction of the data range added on each side when auto-scaling
AUTO_SCALE_PADDING = 0.05


class _Point(Protocol):
    x: float
    y: float


def check_finite(value: float) -> float:
    """Return value as a float, rejecting NaN and infinities."""
    value = float(value)
    if not math.isfinite(value):
        raise InvalidValueError(f"Value must be finite, got {value}")
    return value


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (not to even)."""
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class AxisBounds:
    """
    Data-space bounds for both axes of a chart.

    With auto_scale set, a chart recomputes its bounds from the full point
    set after every insertion. Explicit bounds have auto_scale cleared and
    are never recomputed.
    """
    min_x: float = 0.0
    max_x: float = 0.0
    min_y: float = 0.0
    max_y: float = 0.0
    auto_scale: bool = True

    @classmethod
    def from_points(
        cls,
        points: Iterable[_Point],
        padding: float = AUTO_SCALE_PADDING,
    ) -> "AxisBounds":
        """
        Compute auto-scaled bounds covering every point.

        Each axis with a nonzero range is widened by padding * range on
        both sides. A flat axis is left unpadded so the mapper can center it.
        """
        xs: list[float] = []
        ys: list[float] = []
        for point in points:
            xs.append(point.x)
            ys.append(point.y)
        if not xs:
            return cls()

        min_x, max_x = min(xs), max(xs)
        min_y, max_y = min(ys), max(ys)

        x_range = max_x - min_x
        if x_range > 0:
            min_x -= x_range * padding
            max_x += x_range * padding

        y_range = max_y - min_y
        if y_range > 0:
            min_y -= y_range * padding
            max_y += y_range * padding

        return cls(min_x, max_x, min_y, max_y, auto_scale=True)

    @classmethod
    def fixed(cls, min_x: float, max_x: float, min_y: float, max_y: float) -> "AxisBounds":
        """Explicit bounds that disable auto-scaling."""
        return cls(min_x, max_x, min_y, max_y, auto_scale=False)


def axis_ratio(value: float, low: float, high: float) -> float:
    """Position of value within [low, high] as a fraction; 0.5 for a flat range."""
    if high > low:
        return (value - low) / (high - low)
    return 0.5


class ScaleMapper:
    """
    Map data coordinates onto a width x height character grid.

    X grows to the right. Y is inverted so larger values sit higher on
    screen (row 0 is the top). Values outside the bounds map outside the
    grid; the canvas drops them.
    """

    def __init__(self, bounds: AxisBounds, width: int, height: int):
        self.bounds = bounds
        self.width = width
        self.height = height

    def map_x(self, x: float) -> int:
        ratio = axis_ratio(x, self.bounds.min_x, self.bounds.max_x)
        return round_half_up(ratio * (self.width - 1))

    def map_y(self, y: float) -> int:
        ratio = axis_ratio(y, self.bounds.min_y, self.bounds.max_y)
        return round_half_up((1.0 - ratio) * (self.height - 1))

    def map_point(self, x: float, y: float) -> tuple[int, int]:
        """Map a data point to (column, row)."""
        return self.map_x(x), self.map_y(y)


def scale_length(value: float, max_value: float, max_width: int) -> int:
    """Length in cells of a bar for value, relative to the largest value."""
    if max_value <= 0:
        return 0
    return round_half_up(value * max_width / max_value)


def allocate_widths(
    percentages: Sequence[float],
    total_width: int,
    min_segment_width: int = 1,
) -> list[int]:
    """
    Split total_width cells across segments in proportion to percentages.

    Every segment except the last gets round(pct / 100 * total_width),
    raised to min_segment_width and capped at what is still unallocated.
    The last segment takes exactly the remainder, so the widths always sum
    to total_width.
    """
    if not percentages:
        return []

    widths: list[int] = []
    remaining = total_width
    for pct in percentages[:-1]:
        ideal = round_half_up(pct / 100.0 * total_width)
        width = min(max(min_segment_width, ideal), remaining)
        widths.append(width)
        remaining -= width
    widths.append(remaining)

    logger.debug("Allocated widths %s across %d cells", widths, total_width)
    return widths
