"""Render a count report as a rich table."""

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..count.CountOptions import CountOptions
from ..count.CountResult import CountResult
from ._report_rows import _header, _report_rows

_PATH_STYLES = {
    "counts": "bold green",
    "error": "bold green",
    "totals": "bold magenta",
}


def build_table(results: list[CountResult], options: CountOptions) -> Table:
    """Build the report table.

    A failed entry shows its error message in the first metric column.
    """
    table = Table(box=box.ROUNDED, header_style="bold blue")
    for header in _header(options):
        table.add_column(header, justify="left", overflow="fold")

    for kind, cells in _report_rows(results, options):
        path, *rest = cells
        row = [Text(path, style=_PATH_STYLES[kind])]
        if kind == "error":
            row.append(Text(rest[0], style="red"))
        else:
            row.extend(Text(cell) for cell in rest)
        table.add_row(*row)
    return table


def render_table(results: list[CountResult], options: CountOptions, console: Console | None = None) -> None:
    """Print the report table to ``console`` (STDOUT by default)."""
    if console is None:
        console = Console()
    console.print(build_table(results, options))
