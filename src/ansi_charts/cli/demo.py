"""Sample output of every renderer, used by the `demo` command."""

from __future__ import annotations

import math
import sys
from typing import TextIO

from ansi_charts.charts.bar import BarChart
from ansi_charts.charts.breakdown import BreakdownChart
from ansi_charts.charts.line import LineChart
from ansi_charts.charts.sparkline import Sparkline
from ansi_charts.core.ansi_text import Alignment
from ansi_charts.core.glyphs import BreakdownStyle, LineStyle, TableStyle, TreeStyle
from ansi_charts.notify import Toast, ToastType
from ansi_charts.table import Table, create_simple_table
from ansi_charts.table.themes import BLUE
from ansi_charts.tree import TreeRenderer, create_tree


def _heading(out: TextIO, text: str) -> None:
    out.write(f"\n=== {text} ===\n")


def run_demo(width: int = 60, out: TextIO | None = None) -> None:
    """Write a sample of each chart type to out (stdout by default)."""
    out = out if out is not None else sys.stdout

    _heading(out, "Sparkline")
    Sparkline([1, 5, 22, 13, 53, 29, 44, 90]).write(out)

    _heading(out, "Bar Chart")
    bars = BarChart(max_width=max(1, width - 25))
    for label, value in (("Python", 42), ("Rust", 28), ("Go", 17), ("Zig", 9)):
        bars.add_bar(label, value)
    bars.write(out)

    _heading(out, "Line Chart")
    chart = (
        LineChart(LineStyle.UNICODE, width, 12)
        .with_title("sin(x)")
        .with_labels("x", "y")
        .with_grid()
    )
    chart.add_points(
        [i / 4 for i in range(26)],
        [math.sin(i / 4) for i in range(26)],
    )
    chart.write(out)
    chart.write_statistics(out)

    _heading(out, "Breakdown")
    breakdown = (
        BreakdownChart(BreakdownStyle.UNICODE, width)
        .with_title("Languages")
        .with_values()
    )
    for label, value in (("JavaScript", 45.2), ("TypeScript", 28.7), ("CSS", 16.1), ("HTML", 10.0)):
        breakdown.add_segment(label, value)
    breakdown.write(out)

    _heading(out, "Table")
    table = Table(TableStyle.ROUNDED).with_colors(BLUE).with_alternating_rows()
    table.add_column("Framework", 12, Alignment.LEFT)
    table.add_column("Stars", 8, Alignment.RIGHT)
    table.add_column("Language", 10, Alignment.CENTER)
    table.add_row(["React", "220k", "JavaScript"])
    table.add_row(["Vue", "206k", "JavaScript"])
    table.add_row(["Angular", "93k", "TypeScript"])
    table.write(out)
    create_simple_table(
        ["Product", "Price", "Stock"],
        [["Widget", "$10.99", "50"], ["Gadget", "$25.50", "23"], ["Tool", "$15.75", "100"]],
        TableStyle.DOUBLE_LINE,
    ).write(out)

    _heading(out, "Tree")
    root = create_tree("project")
    src = root.add_child("src", "directory")
    src.add_child("main.py", "1.2KB")
    src.add_child("lib.py", "856B")
    tests = src.add_child("tests", "directory")
    tests.add_child("test_unit.py", "2.1KB")
    root.add_child("README.md", "1.8KB")
    renderer = (
        TreeRenderer(TreeStyle.UNICODE)
        .with_metadata()
        .with_icons()
        .with_colors()
        .with_alphabetical_sort()
    )
    renderer.render(root, out)
    renderer.write_statistics(root, out)

    _heading(out, "Toasts")
    for kind in ToastType:
        Toast(f"{kind.value} message", kind).with_width(width // 2).show(out)
