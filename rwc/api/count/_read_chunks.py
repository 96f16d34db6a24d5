from collections.abc import Iterator
from typing import BinaryIO

from .CountIOError import CountIOError


def _read_chunks(reader: BinaryIO, buffer_size: int) -> Iterator[bytes]:
    """Yield ``buffer_size`` chunks from ``reader`` until EOF; read failures raise CountIOError."""
    while True:
        try:
            chunk = reader.read(buffer_size)
        except OSError as e:
            raise CountIOError(e) from e
        if not chunk:
            return
        yield chunk
