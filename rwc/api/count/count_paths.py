"""Batch orchestrator - count many paths in parallel."""

import logging
import os
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from ...constants import BUFFER_SIZE
from .count_one import count_one
from .CountOptions import CountOptions
from .CountResult import CountResult
from .sort_results import sort_results

logger = logging.getLogger(__name__)


def count_paths(
    paths: Iterable[str | os.PathLike],
    options: CountOptions,
    max_workers: int | None = None,
    buffer_size: int = BUFFER_SIZE,
) -> list[CountResult]:
    """Count every path independently on a thread pool.

    A failing path becomes an error entry; the other paths are still counted.
    The returned list is sorted by path once every count has finished.

    Args:
        paths: Paths to count; each label is the path as given
        options: Metric selection
        max_workers: Thread pool size (None lets the executor decide)
        buffer_size: Chunk size for streaming strategies

    Returns:
        One CountResult per path, sorted by path
    """
    paths = list(paths)
    if not paths:
        return []

    logger.debug(f"Counting {len(paths)} path(s) with max_workers={max_workers}")
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        results = list(
            pool.map(
                lambda path: count_one(path, os.fspath(path), options, buffer_size),
                paths,
            )
        )
    return sort_results(results)
