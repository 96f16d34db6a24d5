"""Result entry for one counted input."""

from dataclasses import dataclass

from .CountError import CountError
from .Counts import Counts


@dataclass(frozen=True)
class CountResult:
    """Outcome for one input: either ``counts`` or ``error`` is set, never both."""

    path: str
    counts: Counts | None = None
    error: CountError | None = None

    def __post_init__(self) -> None:
        if (self.counts is None) == (self.error is None):
            raise ValueError("CountResult needs exactly one of counts or error")

    @property
    def ok(self) -> bool:
        return self.counts is not None
