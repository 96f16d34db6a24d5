"""Display API module - table and CSV rendering of count reports."""

from .FormatError import FormatError
from .OutputFormat import OutputFormat, parse_format
from .render_csv import render_csv
from .render_table import build_table, render_table

__all__ = [
    "FormatError",
    "OutputFormat",
    "build_table",
    "parse_format",
    "render_csv",
    "render_table",
]
