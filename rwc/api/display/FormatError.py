"""Unknown output format."""

from ..count.CountError import CountError


class FormatError(CountError):
    """Raised when an output format name is not recognized."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Error Parsing --format: {name}")
