"""I/O error raised while opening, stat-ing or reading an input."""

from .CountError import CountError


class CountIOError(CountError):
    """Wraps the OSError that stopped an input from being counted."""

    def __init__(self, error: OSError):
        self.error = error
        super().__init__(f"IO Error: {error}")
