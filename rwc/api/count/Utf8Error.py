"""Strict UTF-8 decoding error."""

from .CountError import CountError


class Utf8Error(CountError):
    """Raised when an input holds a byte sequence that is not valid UTF-8."""

    def __init__(self, offset: int | None = None):
        self.offset = offset
        message = "UTF-8 Error"
        if offset is not None:
            message = f"{message}: invalid byte sequence at byte {offset}"
        super().__init__(message)
