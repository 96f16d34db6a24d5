"""Count one input - a filesystem path or an already-open byte stream."""

import logging
import os
from pathlib import Path
from typing import BinaryIO

from ...constants import BUFFER_SIZE
from .count_length import count_length
from .count_readable import count_readable
from .CountIOError import CountIOError
from .CountOptions import CountOptions
from .Counts import Counts

logger = logging.getLogger(__name__)


def count_input(
    source: str | os.PathLike | BinaryIO,
    options: CountOptions,
    buffer_size: int = BUFFER_SIZE,
) -> Counts:
    """Count ``source`` according to ``options``.

    Paths with a bytes-only selection are answered from metadata without
    opening the file. Every other case opens the path (or uses the given
    stream) and scans it.

    Args:
        source: Path-like object, or binary stream with a ``read`` method
        options: Metric selection
        buffer_size: Chunk size for streaming strategies

    Returns:
        Counts for the input

    Raises:
        CountIOError: If the path cannot be stat'ed, opened or read
        Utf8Error: If characters were requested and the input is not UTF-8
    """
    if not isinstance(source, (str, os.PathLike)):
        return count_readable(source, options, buffer_size)

    if options.bytes_only:
        logger.debug(f"Counting {os.fspath(source)} with count_length")
        return count_length(source)

    try:
        fh = Path(source).open("rb")
    except OSError as e:
        raise CountIOError(e) from e
    with fh:
        return count_readable(fh, options, buffer_size)
