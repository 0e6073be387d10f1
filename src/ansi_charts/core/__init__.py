"""Core building blocks shared by every chart: text measurement, glyphs, scaling, canvas."""

from ansi_charts.core.ansi_text import Alignment, visible_len, strip_ansi, align
from ansi_charts.core.canvas import Canvas
from ansi_charts.core.cell import Cell
from ansi_charts.core.color import Color, cycle_picker, random_picker
from ansi_charts.core.errors import ChartError, InvalidValueError, LengthMismatchError
from ansi_charts.core.scale import AxisBounds, ScaleMapper, allocate_widths, scale_length

__all__ = [
    "Alignment",
    "visible_len",
    "strip_ansi",
    "align",
    "Canvas",
    "Cell",
    "Color",
    "cycle_picker",
    "random_picker",
    "ChartError",
    "InvalidValueError",
    "LengthMismatchError",
    "AxisBounds",
    "ScaleMapper",
    "allocate_widths",
    "scale_length",
]
