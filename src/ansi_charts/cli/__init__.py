"""Command-line host for the chart renderers."""

from ansi_charts.cli.main import main

__all__ = ["main"]
