"""Aggregate of several counting errors."""

from .CountError import CountError


class MultiError(CountError):
    """Raised when path-list ingestion finds one or more malformed entries.

    All failures of an ingestion phase are reported together.
    """

    def __init__(self, errors: list[CountError]):
        self.errors = list(errors)
        message = "Errors:\n" + "\n".join(f"  - {e}" for e in self.errors)
        super().__init__(message)
