"""Length lookup - byte count from file metadata without reading."""

import os

from .Count import Count
from .CountIOError import CountIOError
from .Counts import Counts


def count_length(path: str | os.PathLike) -> Counts:
    """Return the byte size of ``path`` from ``os.stat``; no other metric is computed."""
    try:
        size = os.stat(path).st_size
    except OSError as e:
        raise CountIOError(e) from e
    return Counts(
        bytes=Count.present(size),
        chars=Count.absent(),
        words=Count.absent(),
        lines=Count.absent(),
    )
