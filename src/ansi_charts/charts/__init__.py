"""Chart models: line, bar, breakdown and sparkline."""

from ansi_charts.charts.bar import BarChart
from ansi_charts.charts.breakdown import BreakdownChart, Segment, create_breakdown
from ansi_charts.charts.line import (
    DataPoint,
    LineChart,
    create_line_chart,
    create_simple_line_chart,
)
from ansi_charts.charts.sparkline import Sparkline, sparkline

__all__ = [
    "BarChart",
    "BreakdownChart",
    "Segment",
    "create_breakdown",
    "DataPoint",
    "LineChart",
    "create_line_chart",
    "create_simple_line_chart",
    "Sparkline",
    "sparkline",
]
