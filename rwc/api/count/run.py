"""Resolve the inputs of a run and count them."""

import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import BinaryIO

from ...constants import BUFFER_SIZE, STDIN_LABEL
from .ConfigError import ConfigError
from .count_one import count_one
from .count_paths import count_paths
from .CountIOError import CountIOError
from .CountOptions import CountOptions
from .read_paths0_from import read_paths0_from
from .RunReport import RunReport

logger = logging.getLogger(__name__)

# Designator for "read the path list from standard input"
FILES0_FROM_STDIN = "-"


def run(
    options: CountOptions,
    files0_from: str | os.PathLike | None = None,
    files: Sequence[str | os.PathLike] = (),
    stdin: BinaryIO | None = None,
    max_workers: int | None = None,
    buffer_size: int = BUFFER_SIZE,
) -> RunReport:
    """Count the inputs of one run.

    Exactly one input mode applies:
    - ``files0_from``: count the paths listed in that file (NUL separated),
      or in ``stdin`` when it is ``-`` (NUL or newline separated)
    - ``files``: count those paths
    - neither: count ``stdin`` once under the label ``Stdin`` and force the
      totals row on

    Args:
        options: Metric selection (defaults already applied)
        files0_from: Path-list file, or ``-`` for standard input
        files: Explicit paths
        stdin: Binary standard input (defaults to ``sys.stdin.buffer``)
        max_workers: Thread pool size for path batches
        buffer_size: Chunk size for streaming strategies

    Returns:
        RunReport with results sorted by path and the resolved options

    Raises:
        ConfigError: If ``files0_from`` and ``files`` are both given
        CountIOError: If the path-list file cannot be opened
        MultiError: If the path list cannot be read or decoded
    """
    files = list(files)
    if stdin is None:
        stdin = sys.stdin.buffer

    if files0_from is not None:
        if files:
            raise ConfigError("file operands cannot be combined with --files0-from")
        paths = _read_path_list(files0_from, stdin)
        logger.info(f"Read {len(paths)} path(s) from {os.fspath(files0_from)}")
        results = count_paths(paths, options, max_workers, buffer_size)
    elif files:
        results = count_paths(files, options, max_workers, buffer_size)
    else:
        options = options.with_totals()
        results = [count_one(stdin, STDIN_LABEL, options, buffer_size)]

    return RunReport(results=results, options=options)


def _read_path_list(files0_from: str | os.PathLike, stdin: BinaryIO) -> list[str]:
    if os.fspath(files0_from) == FILES0_FROM_STDIN:
        return read_paths0_from(stdin, separators=b"\0\n")
    try:
        fh = Path(files0_from).open("rb")
    except OSError as e:
        raise CountIOError(e) from e
    with fh:
        return read_paths0_from(fh)
