"""Byte-scan strategy counting bytes, words and newlines.

Whitespace is classified on raw bytes. ASCII whitespace bytes never occur
inside a valid multi-byte UTF-8 sequence, so the counts are exact for UTF-8
input and best-effort for anything else.
"""

from typing import BinaryIO

from ...constants import BUFFER_SIZE
from ._count_words import _count_words
from ._read_chunks import _read_chunks
from .Count import Count
from .Counts import Counts


def count_bytes_words_lines(reader: BinaryIO, buffer_size: int = BUFFER_SIZE) -> Counts:
    """Count bytes, words and ``\\n`` bytes in ``reader``."""
    n_bytes = 0
    n_words = 0
    n_lines = 0
    in_word = False
    for chunk in _read_chunks(reader, buffer_size):
        n_bytes += len(chunk)
        n_lines += chunk.count(b"\n")
        words, in_word = _count_words(chunk, in_word)
        n_words += words
    return Counts(
        bytes=Count.present(n_bytes),
        chars=Count.absent(),
        words=Count.present(n_words),
        lines=Count.present(n_lines),
    )
