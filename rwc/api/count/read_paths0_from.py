"""Path-list ingestion - read separator-delimited UTF-8 paths from a stream."""

import logging
from typing import BinaryIO

from ...constants import BUFFER_SIZE
from ._read_chunks import _read_chunks
from .CountError import CountError
from .CountIOError import CountIOError
from .InvalidPathError import InvalidPathError
from .MultiError import MultiError

logger = logging.getLogger(__name__)


def read_paths0_from(stream: BinaryIO, separators: bytes = b"\0") -> list[str]:
    """Read and return the paths listed in ``stream``.

    Ingestion runs in two phases and reports every failure of a phase at once:
    first the stream is read and split, then every segment is decoded as
    strict UTF-8. A partial list is never returned.

    A single trailing separator does not produce an empty last entry.

    Args:
        stream: Binary stream holding the path list
        separators: Bytes that each end an entry (NUL by default)

    Returns:
        Paths in stream order

    Raises:
        MultiError: If reading fails or any segment is not valid UTF-8
    """
    segments, failures = _split(stream, separators)
    if failures:
        raise MultiError(failures)

    paths: list[str] = []
    failures = []
    for raw in segments:
        try:
            paths.append(raw.decode("utf-8"))
        except UnicodeDecodeError:
            failures.append(InvalidPathError(raw))
    if failures:
        logger.warning(f"Path list has {len(failures)} undecodable entries")
        raise MultiError(failures)
    return paths


def _split(stream: BinaryIO, separators: bytes) -> tuple[list[bytes], list[CountError]]:
    if not separators:
        raise ValueError("At least one separator byte is required")

    failures: list[CountError] = []
    chunks: list[bytes] = []
    try:
        for chunk in _read_chunks(stream, BUFFER_SIZE):
            chunks.append(chunk)
    except CountIOError as e:
        failures.append(e)
        return [], failures

    data = b"".join(chunks)
    first, others = separators[:1], separators[1:]
    if others:
        data = data.translate(bytes.maketrans(others, first * len(others)))
    segments = data.split(first)
    if segments[-1] == b"":
        segments.pop()
    return segments, failures
