"""Counting engine - scan strategies, dispatch, batch counting and path-list ingestion."""

from .ConfigError import ConfigError
from .Count import Count, accumulate
from .count_input import count_input
from .count_paths import count_paths
from .CountError import CountError
from .CountIOError import CountIOError
from .CountOptions import CountOptions
from .CountResult import CountResult
from .Counts import Counts
from .InvalidPathError import InvalidPathError
from .MultiError import MultiError
from .read_paths0_from import read_paths0_from
from .run import run
from .RunReport import RunReport
from .Utf8Error import Utf8Error

__all__ = [
    "ConfigError",
    "Count",
    "CountError",
    "CountIOError",
    "CountOptions",
    "CountResult",
    "Counts",
    "InvalidPathError",
    "MultiError",
    "RunReport",
    "Utf8Error",
    "accumulate",
    "count_input",
    "count_paths",
    "read_paths0_from",
    "run",
]
