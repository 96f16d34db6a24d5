"""Word counting over one chunk of a stream.

Whitespace is the ASCII set space, tab, newline, form feed and carriage
return. Vertical tab is not whitespace.
"""

import re

_WHITESPACE_BYTES = frozenset(b" \t\n\x0c\r")
_WHITESPACE_TEXT = frozenset(" \t\n\x0c\r")

# bytes.split() also splits on vertical tab; map it to a non-whitespace byte first
_VERTICAL_TAB = bytes.maketrans(b"\x0b", b"\x00")

_WORD_TEXT = re.compile(r"[^ \t\n\x0c\r]+")


def _count_words(chunk: bytes | str, in_word: bool) -> tuple[int, bool]:
    """Count the words that start in ``chunk``.

    Args:
        chunk: Raw bytes or decoded text.
        in_word: Whether the previous chunk ended inside a word.

    Returns:
        The number of new words and whether ``chunk`` ends inside a word.
        A word continuing from the previous chunk is not counted again.
    """
    if not chunk:
        return 0, in_word

    if isinstance(chunk, str):
        whitespace = _WHITESPACE_TEXT
        words = sum(1 for _ in _WORD_TEXT.finditer(chunk))
    else:
        whitespace = _WHITESPACE_BYTES
        words = len(chunk.translate(_VERTICAL_TAB).split())

    if in_word and chunk[0] not in whitespace:
        words -= 1
    return words, chunk[-1] not in whitespace
