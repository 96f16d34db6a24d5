"""Decode-count strategy - strict incremental UTF-8 decoding."""

import codecs
from typing import BinaryIO

from ...constants import BUFFER_SIZE
from ._count_words import _count_words
from ._read_chunks import _read_chunks
from .Count import Count
from .Counts import Counts
from .Utf8Error import Utf8Error


def count_bytes_chars_words_lines(reader: BinaryIO, buffer_size: int = BUFFER_SIZE) -> Counts:
    """Count bytes, characters (scalar values), words and newlines in ``reader``.

    A multi-byte sequence split across chunks is held by the decoder until
    the next chunk completes it. A sequence still incomplete at EOF is an
    error, like any other invalid byte sequence.

    Raises:
        Utf8Error: If the stream is not valid UTF-8.
        CountIOError: If reading fails.
    """
    decoder = codecs.getincrementaldecoder("utf-8")(errors="strict")
    n_bytes = 0
    n_chars = 0
    n_words = 0
    n_lines = 0
    in_word = False

    def decode(chunk: bytes, final: bool = False) -> str:
        pending = len(decoder.getstate()[0])
        try:
            return decoder.decode(chunk, final=final)
        except UnicodeDecodeError as e:
            raise Utf8Error(n_bytes - pending + e.start) from e

    for chunk in _read_chunks(reader, buffer_size):
        text = decode(chunk)
        n_bytes += len(chunk)
        n_chars += len(text)
        n_lines += text.count("\n")
        words, in_word = _count_words(text, in_word)
        n_words += words

    # Raises on a truncated sequence at EOF; never yields text otherwise
    decode(b"", final=True)

    return Counts(
        bytes=Count.present(n_bytes),
        chars=Count.present(n_chars),
        words=Count.present(n_words),
        lines=Count.present(n_lines),
    )
