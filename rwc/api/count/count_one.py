"""Count one input and capture its failure as a result entry."""

import logging
import os
from typing import BinaryIO

from ...constants import BUFFER_SIZE
from .count_input import count_input
from .CountError import CountError
from .CountOptions import CountOptions
from .CountResult import CountResult

logger = logging.getLogger(__name__)


def count_one(
    source: str | os.PathLike | BinaryIO,
    label: str,
    options: CountOptions,
    buffer_size: int = BUFFER_SIZE,
) -> CountResult:
    """Count ``source`` and return its entry; CountError never escapes."""
    try:
        counts = count_input(source, options, buffer_size)
    except CountError as e:
        logger.warning(f"Failed to count {label}: {e}")
        return CountResult(path=label, error=e)
    return CountResult(path=label, counts=counts)
