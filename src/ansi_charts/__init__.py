"""
ansi-charts: Python library for terminal charts

Draw tables, bar charts, line charts, sparklines, trees, breakdown bars
and toast notifications as ASCII or Unicode text with optional ANSI color.

Quick Start:
    >>> import ansi_charts as charts
    >>> print(charts.sparkline([1, 5, 22, 13, 53, 29, 44, 90]), end="")
    ▁▁▂▁▅▃▄█
    >>> chart = charts.LineChart(width=40, height=10).with_grid()
    >>> chart.add_y_values([3, 1, 4, 1, 5, 9, 2, 6])
    >>> chart.write()

Features:
    - Line charts with auto-scaling axes, grid overlay and markers
    - Horizontal bar charts and proportional breakdown bars with legends
    - Sparklines from any numeric sequence
    - Boxed tables with alignment, truncation and color themes
    - Tree views with depth limits, sorting, icons and metadata
    - Toast notifications
    - Every renderer writes to an explicit text stream or returns a string
"""

__version__ = "0.1.0"

# Core types
from ansi_charts.core.ansi_text import Alignment
from ansi_charts.core.color import Color
from ansi_charts.core.errors import ChartError, InvalidValueError, LengthMismatchError
from ansi_charts.core.glyphs import BarStyle, BreakdownStyle, LineStyle, TableStyle, TreeStyle

# Charts
from ansi_charts.charts.bar import BarChart
from ansi_charts.charts.breakdown import BreakdownChart, create_breakdown
from ansi_charts.charts.line import LineChart, create_line_chart, create_simple_line_chart
from ansi_charts.charts.sparkline import Sparkline, sparkline

# Tables, trees, notifications
from ansi_charts.table import Table, TableColorTheme, create_simple_table
from ansi_charts.tree import TreeNode, TreeRenderer, create_tree
from ansi_charts.notify import Toast, ToastType

__all__ = [
    # Version
    "__version__",
    # Core types
    "Alignment",
    "Color",
    "ChartError",
    "InvalidValueError",
    "LengthMismatchError",
    "BarStyle",
    "BreakdownStyle",
    "LineStyle",
    "TableStyle",
    "TreeStyle",
    # Charts
    "BarChart",
    "BreakdownChart",
    "create_breakdown",
    "LineChart",
    "create_line_chart",
    "create_simple_line_chart",
    "Sparkline",
    "sparkline",
    # Tables, trees, notifications
    "Table",
    "TableColorTheme",
    "create_simple_table",
    "TreeNode",
    "TreeRenderer",
    "create_tree",
    "Toast",
    "ToastType",
]
