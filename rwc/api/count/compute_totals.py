"""Sum each metric across successful result entries."""

from collections.abc import Iterable

from ...constants import METRICS
from .CountResult import CountResult


def compute_totals(results: Iterable[CountResult]) -> dict[str, int]:
    """Return the total of every metric; failed entries and absent metrics add zero."""
    totals = dict.fromkeys(METRICS, 0)
    for result in results:
        if result.counts is None:
            continue
        for metric in METRICS:
            totals[metric] = result.counts.get(metric).add_to(totals[metric])
    return totals
