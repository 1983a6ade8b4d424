"""Garbage collection trigger and memory profiling for the demos."""

import gc
import logging
import os
import time
import tracemalloc
from dataclasses import dataclass
from typing import Callable, Optional

import psutil

logger = logging.getLogger(__name__)


def force_collection() -> int:
    """Ask the garbage collector to run a full collection now.

    Useful during the demo to bring memory back to a baseline before the
    next example.

    Returns:
        Number of unreachable objects found
    """
    collected = gc.collect()
    logger.info(f"Garbage collection found {collected:,} unreachable objects")
    return collected


@dataclass
class ProfileStats:
    """Memory and timing statistics for one profiled operation."""

    operation: str
    elapsed_time: float = 0.0
    current_memory: int = 0
    peak_memory: int = 0
    rss: int = 0
    vms: int = 0
    memory_percent: float = 0.0
    open_files: int = 0


def format_bytes(bytes_value: float) -> str:
    """Format bytes to human-readable format."""
    for unit in ["B", "KB", "MB", "GB"]:
        if abs(bytes_value) < 1024.0:
            return f"{bytes_value:.2f} {unit}"
        bytes_value /= 1024.0
    return f"{bytes_value:.2f} TB"


class MemoryProfiler:
    """
    Profiles memory usage for operations.

    Python allocations are traced with ``tracemalloc``; process level
    figures (RSS, VMS, open files) come from ``psutil``.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize memory profiler.

        Args:
            logger: Logger instance
        """
        self._logger = logger or logging.getLogger(__name__)
        self._process = psutil.Process(os.getpid())

    def profile(self, operation_name: str, operation_func: Callable[[], object]) -> ProfileStats:
        """
        Profile memory usage of an operation.

        Args:
            operation_name: Name of the operation
            operation_func: Function to execute

        Returns:
            ProfileStats for the operation
        """
        tracemalloc.start()
        start_time = time.time()
        try:
            operation_func()
        finally:
            elapsed_time = time.time() - start_time
            current_mem, peak_mem = tracemalloc.get_traced_memory()
            tracemalloc.stop()

        stats = ProfileStats(
            operation=operation_name,
            elapsed_time=elapsed_time,
            current_memory=current_mem,
            peak_memory=peak_mem,
        )
        self._collect_process_stats(stats)
        self.report(stats)
        return stats

    def _collect_process_stats(self, stats: ProfileStats) -> None:
        """Fill in process level figures, leaving them at 0 if they cannot be read.

        Reading them needs free file descriptors, which the leaky file demo
        may have used up.
        """
        try:
            mem_info = self._process.memory_info()
            stats.rss = mem_info.rss
            stats.vms = mem_info.vms
            stats.memory_percent = self._process.memory_percent()
            stats.open_files = len(self._process.open_files())
        except (OSError, psutil.Error) as e:
            self._logger.warning(f"Could not read process stats for {stats.operation}: {e}")

    def report(self, stats: ProfileStats) -> None:
        """Log the statistics of a profiled operation."""
        self._logger.info(
            f"{stats.operation}:\n"
            f"  Elapsed time:  {stats.elapsed_time:.2f} seconds\n"
            f"  Peak traced:   {format_bytes(stats.peak_memory)}\n"
            f"  Still traced:  {format_bytes(stats.current_memory)}\n"
            f"  Process RSS:   {format_bytes(stats.rss)} ({stats.memory_percent:.1f}%)\n"
            f"  Open files:    {stats.open_files:,}"
        )
