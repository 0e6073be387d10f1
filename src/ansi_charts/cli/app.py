"""Typer CLI application rendering charts from command-line values."""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Annotated, Optional, TypeVar

import typer
from rich.console import Console
from rich.logging import RichHandler

from ansi_charts.cli.terminal import Terminal

E = TypeVar("E", bound=Enum)

STYLE_ENV = "ANSI_CHARTS_STYLE"
WIDTH_ENV = "ANSI_CHARTS_WIDTH"


def _parse_style(enum_cls: type[E], value: str, console: Console) -> E:
    try:
        return enum_cls(value.lower())
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        console.print(f"[red]Unknown style {value!r}. Choose from: {choices}[/]")
        raise typer.Exit(1)


def _parse_pairs(pairs: list[str], console: Console) -> list[tuple[str, float]]:
    """Split LABEL=VALUE arguments."""
    parsed: list[tuple[str, float]] = []
    for pair in pairs:
        label, sep, raw = pair.rpartition("=")
        try:
            if not sep or not label:
                raise ValueError(pair)
            parsed.append((label, float(raw)))
        except ValueError:
            console.print(f"[red]Expected LABEL=VALUE, got {pair!r}[/]")
            raise typer.Exit(1)
    return parsed


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="ansi-charts",
        help="Render charts, tables, trees and notifications in the terminal.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)

    @app.callback()
    def main(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug details to stderr")] = False,
    ) -> None:
        """Render charts, tables, trees and notifications in the terminal."""
        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format="%(message)s",
                handlers=[RichHandler(console=console, show_path=False)],
            )
        Terminal.enable_utf8_output()

    @app.command()
    def spark(
        values: Annotated[list[float], typer.Argument(help="Numeric values")],
    ) -> None:
        """Print a sparkline."""
        from ansi_charts.charts.sparkline import Sparkline
        from ansi_charts.core.errors import InvalidValueError

        try:
            chart = Sparkline(values)
        except InvalidValueError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)
        chart.write()

    @app.command()
    def bars(
        pairs: Annotated[list[str], typer.Argument(help="Bars as LABEL=VALUE")],
        style: Annotated[str, typer.Option("--style", "-s", envvar=STYLE_ENV, help="ascii or unicode")] = "unicode",
        width: Annotated[int, typer.Option("--width", "-w", envvar=WIDTH_ENV, help="Longest bar in cells")] = 40,
        random_colors: Annotated[bool, typer.Option("--random-colors", "-r", help="Color each cell randomly")] = False,
        seed: Annotated[Optional[int], typer.Option("--seed", help="Seed for random colors")] = None,
    ) -> None:
        """Print a horizontal bar chart."""
        from ansi_charts.charts.bar import BarChart
        from ansi_charts.core.color import random_picker
        from ansi_charts.core.errors import InvalidValueError
        from ansi_charts.core.glyphs import BarStyle

        picker = random_picker(rng=random.Random(seed)) if random_colors else None
        chart = BarChart(_parse_style(BarStyle, style, console), width, random_colors, picker)
        try:
            for label, value in _parse_pairs(pairs, console):
                chart.add_bar(label, value)
        except InvalidValueError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)
        chart.write()

    @app.command()
    def line(
        values: Annotated[list[float], typer.Argument(help="Y values (x is the index)")],
        style: Annotated[str, typer.Option("--style", "-s", envvar=STYLE_ENV, help="ascii, unicode or smooth")] = "unicode",
        width: Annotated[int, typer.Option("--width", "-w", envvar=WIDTH_ENV, help="Plot width")] = 60,
        height: Annotated[int, typer.Option("--height", help="Plot height")] = 20,
        title: Annotated[Optional[str], typer.Option("--title", "-t", help="Chart title")] = None,
        grid: Annotated[bool, typer.Option("--grid", "-g", help="Draw gridlines")] = False,
        stats: Annotated[bool, typer.Option("--stats", help="Print statistics after the chart")] = False,
    ) -> None:
        """Print a line chart of the values."""
        from ansi_charts.charts.line import LineChart
        from ansi_charts.core.errors import InvalidValueError
        from ansi_charts.core.glyphs import LineStyle

        chart = LineChart(_parse_style(LineStyle, style, console), width, height).with_grid(grid)
        if title:
            chart = chart.with_title(title)
        try:
            chart.add_y_values(values)
        except InvalidValueError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)
        chart.write()
        if stats:
            chart.write_statistics()

    @app.command()
    def breakdown(
        pairs: Annotated[list[str], typer.Argument(help="Segments as LABEL=VALUE")],
        style: Annotated[str, typer.Option("--style", "-s", envvar=STYLE_ENV, help="ascii, unicode, block, rounded or minimal")] = "unicode",
        width: Annotated[int, typer.Option("--width", "-w", envvar=WIDTH_ENV, help="Bar width")] = 50,
        title: Annotated[Optional[str], typer.Option("--title", "-t", help="Chart title")] = None,
        values: Annotated[bool, typer.Option("--values", help="Show raw values in the legend")] = False,
    ) -> None:
        """Print a stacked breakdown bar with legend."""
        from ansi_charts.charts.breakdown import BreakdownChart
        from ansi_charts.core.errors import InvalidValueError
        from ansi_charts.core.glyphs import BreakdownStyle

        chart = BreakdownChart(_parse_style(BreakdownStyle, style, console), width).with_values(values)
        if title:
            chart = chart.with_title(title)
        try:
            for label, value in _parse_pairs(pairs, console):
                chart.add_segment(label, value)
        except InvalidValueError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)
        chart.write()

    @app.command()
    def table(
        rows: Annotated[list[str], typer.Argument(help="Rows as comma-separated cells")],
        headers: Annotated[str, typer.Option("--headers", "-H", help="Comma-separated column headers")],
        style: Annotated[str, typer.Option("--style", "-s", envvar=STYLE_ENV, help="ascii, unicode, double_line or rounded")] = "unicode",
        theme: Annotated[Optional[str], typer.Option("--theme", help="default, dark, blue or green")] = None,
        alternate: Annotated[bool, typer.Option("--alternate", "-a", help="Alternate row colors (requires --theme)")] = False,
    ) -> None:
        """Print a table sized to its content."""
        from ansi_charts.core.glyphs import TableStyle
        from ansi_charts.table import create_simple_table, get_theme, list_themes

        table_style = _parse_style(TableStyle, style, console)
        if alternate and theme is None:
            console.print("[red]--alternate needs a color theme; pass --theme as well[/]")
            raise typer.Exit(1)
        cells = [row.split(",") for row in rows]
        result = create_simple_table(headers.split(","), cells, table_style)
        if theme is not None:
            color_theme = get_theme(theme)
            if color_theme is None:
                console.print(f"[red]Unknown theme {theme!r}. Choose from: {', '.join(list_themes())}[/]")
                raise typer.Exit(1)
            result = result.with_colors(color_theme).with_alternating_rows(alternate)
        result.write()

    @app.command()
    def tree(
        paths: Annotated[list[str], typer.Argument(help="Slash-separated paths, e.g. src/main.py")],
        root: Annotated[str, typer.Option("--root", help="Root node name")] = ".",
        style: Annotated[str, typer.Option("--style", "-s", envvar=STYLE_ENV, help="ascii, unicode, rounded or thick")] = "unicode",
        max_depth: Annotated[Optional[int], typer.Option("--max-depth", "-d", help="Levels to show below the root")] = None,
        sort: Annotated[bool, typer.Option("--sort", help="Sort children alphabetically")] = False,
        stats: Annotated[bool, typer.Option("--stats", help="Print statistics after the tree")] = False,
    ) -> None:
        """Print a tree built from path-like names."""
        from ansi_charts.core.glyphs import TreeStyle
        from ansi_charts.tree import TreeRenderer, create_tree

        node_root = create_tree(root)
        for path in paths:
            node = node_root
            for part in filter(None, path.split("/")):
                node = node.find_child(part) or node.add_child(part)

        renderer = TreeRenderer(_parse_style(TreeStyle, style, console)).with_alphabetical_sort(sort)
        renderer = renderer.with_max_depth(max_depth)
        renderer.render(node_root)
        if stats:
            renderer.write_statistics(node_root)

    @app.command()
    def toast(
        message: Annotated[str, typer.Argument(help="Notification text")],
        kind: Annotated[str, typer.Option("--kind", "-k", help="info, success, warning or error")] = "info",
        width: Annotated[Optional[int], typer.Option("--width", "-w", help="Minimum box width")] = None,
        timestamp: Annotated[bool, typer.Option("--timestamp", help="Append the current time")] = False,
        no_icon: Annotated[bool, typer.Option("--no-icon", help="Hide the type icon")] = False,
    ) -> None:
        """Print a toast notification."""
        from ansi_charts.notify import Toast, ToastType

        Toast(message, _parse_style(ToastType, kind, console)) \
            .with_width(width) \
            .with_timestamp(timestamp) \
            .with_icon(not no_icon) \
            .show()

    @app.command()
    def demo() -> None:
        """Render one of everything."""
        from ansi_charts.cli.demo import run_demo

        run_demo(width=max(20, min(60, Terminal.size().cols - 2)))

    return app
