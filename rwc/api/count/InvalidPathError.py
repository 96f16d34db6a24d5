"""Path-list entry that is not valid UTF-8."""

from .CountError import CountError


class InvalidPathError(CountError):
    """Raised for a path-list segment that cannot be decoded as UTF-8."""

    def __init__(self, raw: bytes):
        self.raw = raw
        super().__init__(f"Invalid Path: {raw.decode('utf-8', errors='replace')}")
