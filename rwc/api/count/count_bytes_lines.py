"""Byte-scan strategy counting bytes and newlines only."""

from typing import BinaryIO

from ...constants import BUFFER_SIZE
from ._read_chunks import _read_chunks
from .Count import Count
from .Counts import Counts


def count_bytes_lines(reader: BinaryIO, buffer_size: int = BUFFER_SIZE) -> Counts:
    """Count bytes and ``\\n`` bytes in ``reader``."""
    n_bytes = 0
    n_lines = 0
    for chunk in _read_chunks(reader, buffer_size):
        n_bytes += len(chunk)
        n_lines += chunk.count(b"\n")
    return Counts(
        bytes=Count.present(n_bytes),
        chars=Count.absent(),
        words=Count.absent(),
        lines=Count.present(n_lines),
    )
