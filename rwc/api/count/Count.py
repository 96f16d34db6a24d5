"""Count - a single optional metric value."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Count:
    """One metric for one input.

    ``val`` is None when the metric was not requested or the scan strategy
    that produced it does not compute it.
    """

    val: int | None = None

    def __post_init__(self) -> None:
        if self.val is not None and self.val < 0:
            raise ValueError(f"Count cannot be negative: {self.val}")

    @classmethod
    def present(cls, n: int) -> "Count":
        return cls(n)

    @classmethod
    def absent(cls) -> "Count":
        return cls(None)

    @property
    def is_present(self) -> bool:
        return self.val is not None

    def add_to(self, total: int) -> int:
        """Return ``total`` plus this count; absent counts leave it unchanged."""
        if self.val is None:
            return total
        return total + self.val

    def display(self) -> str:
        """Decimal value, or ``N/A`` when absent."""
        if self.val is None:
            return "N/A"
        return str(self.val)

    def __str__(self) -> str:
        return self.display()


def accumulate(total: int, metric: Count) -> int:
    """Add ``metric`` to a plain integer accumulator."""
    return metric.add_to(total)
