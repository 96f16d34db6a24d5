"""Metric selection for a counting run."""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from ...constants import METRICS


class CountOptions(BaseModel):
    """Which metrics to count and whether to add a totals row.

    When no metric is selected, bytes, words and lines are counted.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    bytes: bool = False
    chars: bool = False
    words: bool = False
    lines: bool = False
    show_totals: bool = False

    @model_validator(mode="before")
    @classmethod
    def _default_metrics(cls, data: Any) -> Any:
        if isinstance(data, dict) and not any(data.get(metric) for metric in METRICS):
            return {**data, "bytes": True, "chars": False, "words": True, "lines": True}
        return data

    def requested(self) -> tuple[str, ...]:
        """Selected metric names, in column order."""
        return tuple(metric for metric in METRICS if getattr(self, metric))

    @property
    def bytes_only(self) -> bool:
        return self.requested() == ("bytes",)

    def with_totals(self) -> "CountOptions":
        """Return a copy with the totals row forced on."""
        return self.model_copy(update={"show_totals": True})
