"""Executor factory used by the link resolution engine."""

from __future__ import annotations

from concurrent import futures
from typing import Optional, Tuple

Executor = futures.Executor


def create_executor(workers: int) -> Tuple[Optional[Executor], bool]:
    """
    Return a thread pool for IO-bound link probing.

    Args:
        workers: Desired concurrency level.

    Returns:
        Tuple of (executor, needs_shutdown). ``(None, False)`` when ``workers``
        is 1 or less, in which case the caller runs work in the current thread.
    """
    if workers <= 1:
        return None, False
    return futures.ThreadPoolExecutor(max_workers=workers, thread_name_prefix="javadoc-links"), True
