"""Counts - the four metrics produced for one input."""

from dataclasses import dataclass

from ...constants import METRICS
from .Count import Count


@dataclass(frozen=True)
class Counts:
    bytes: Count
    chars: Count
    words: Count
    lines: Count

    def __post_init__(self) -> None:
        if not any(self.get(metric).is_present for metric in METRICS):
            raise ValueError("Counts must contain at least one present metric")

    def get(self, metric: str) -> Count:
        """Return the metric named ``metric`` (bytes, chars, words or lines)."""
        if metric not in METRICS:
            raise KeyError(metric)
        return getattr(self, metric)
