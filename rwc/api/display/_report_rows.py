"""Rows shared by the table and CSV renderers."""

from collections.abc import Iterator

from ...constants import TOTALS_LABEL
from ..count.compute_totals import compute_totals
from ..count.CountOptions import CountOptions
from ..count.CountResult import CountResult


def _header(options: CountOptions) -> list[str]:
    return ["path", *options.requested()]


def _result_cells(result: CountResult, options: CountOptions) -> list[str]:
    """Metric cells for one entry, or a single cell holding its error message."""
    if result.counts is None:
        return [str(result.error)]
    return [result.counts.get(metric).display() for metric in options.requested()]


def _totals_cells(results: list[CountResult], options: CountOptions) -> list[str]:
    totals = compute_totals(results)
    return [str(totals[metric]) for metric in options.requested()]


def _report_rows(results: list[CountResult], options: CountOptions) -> Iterator[tuple[str, list[str]]]:
    """Yield ``(kind, cells)`` for every row after the header.

    ``kind`` is "counts", "error" or "totals".
    """
    for result in results:
        kind = "counts" if result.ok else "error"
        yield kind, [result.path, *_result_cells(result, options)]
    if options.show_totals:
        yield "totals", [TOTALS_LABEL, *_totals_cells(results, options)]
