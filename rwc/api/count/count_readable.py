"""Pick and run the streaming strategy for an open byte stream."""

import logging
from typing import BinaryIO

from ...constants import BUFFER_SIZE
from .count_bytes_chars_words_lines import count_bytes_chars_words_lines
from .count_bytes_lines import count_bytes_lines
from .count_bytes_words_lines import count_bytes_words_lines
from .CountOptions import CountOptions
from .Counts import Counts

logger = logging.getLogger(__name__)


def count_readable(reader: BinaryIO, options: CountOptions, buffer_size: int = BUFFER_SIZE) -> Counts:
    """Count ``reader`` with the cheapest strategy that covers ``options``.

    Streams have no queryable size, so a bytes-only selection falls through
    to the words+lines scan.
    """
    if options.chars:
        strategy = count_bytes_chars_words_lines
    elif options.lines and not options.words:
        strategy = count_bytes_lines
    else:
        strategy = count_bytes_words_lines
    logger.debug(f"Counting stream with {strategy.__name__} (buffer_size={buffer_size})")
    return strategy(reader, buffer_size)
