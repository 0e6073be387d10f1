"""Tables with box-drawing borders and optional color themes."""

from ansi_charts.table.table import Column, Table, auto_column_widths, create_simple_table
from ansi_charts.table.themes import TableColorTheme, get_theme, list_themes

__all__ = [
    "Column",
    "Table",
    "auto_column_widths",
    "create_simple_table",
    "TableColorTheme",
    "get_theme",
    "list_themes",
]
