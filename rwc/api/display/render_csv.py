"""Render a count report as CSV."""

import csv
import io

from ..count.CountOptions import CountOptions
from ..count.CountResult import CountResult
from ._report_rows import _header, _report_rows


def render_csv(results: list[CountResult], options: CountOptions) -> str:
    """Return the report as CSV text without a trailing newline.

    The header row is ``path`` plus the requested metrics. A failed entry
    carries its error message in place of its counts.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(_header(options))
    for _kind, cells in _report_rows(results, options):
        writer.writerow(cells)
    return buffer.getvalue().removesuffix("\n")
