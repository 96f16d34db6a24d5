"""Output formats for count reports."""

from enum import Enum

from .FormatError import FormatError


class OutputFormat(str, Enum):
    TABLE = "table"
    CSV = "csv"


def parse_format(name: str) -> OutputFormat:
    """Return the OutputFormat called ``name`` (case-sensitive).

    Raises:
        FormatError: If ``name`` is not a known format
    """
    try:
        return OutputFormat(name)
    except ValueError:
        raise FormatError(name) from None
