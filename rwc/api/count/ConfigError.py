"""Conflicting input specification."""

from .CountError import CountError


class ConfigError(CountError):
    """Raised when the requested inputs cannot be combined, before any counting starts."""

    def __init__(self, message: str):
        super().__init__(f"Error: {message}")
