"""File writing demos and cleanup of the demo directories."""

import logging
import shutil
from pathlib import Path

from .config import DEFAULT_ITERATIONS
from .file_writer_interface import DemoFileWriter
from .file_writers import LeakyFileWriter, ManagedFileWriter

logger = logging.getLogger(__name__)


def ensure_directory(directory: Path) -> None:
    """Create ``directory`` if it does not exist yet."""
    directory = Path(directory)
    if not directory.exists():
        directory.mkdir()
        logger.debug(f"Created directory {directory}")


def run_file_writer(writer: DemoFileWriter, iterations: int = DEFAULT_ITERATIONS) -> None:
    """Write ``iterations`` demo files with ``writer`` into its directory."""
    ensure_directory(writer.directory)
    for i in range(iterations):
        writer.write_file(i)


def bad_file_writing_example(
    writer: LeakyFileWriter, iterations: int = DEFAULT_ITERATIONS
) -> None:
    """
    Write demo files while leaking every file handle.

    Most of these files stay open for the rest of the process. On platforms
    that lock open files a second run can fail for some indexes, and on
    POSIX the run stops being able to open files once the descriptor limit
    is reached. Both show up as logged errors, not as a crash.

    Args:
        writer: Leaky writer that keeps its handles across runs
        iterations: Number of files to write
    """
    print("Starting Bad File Writing")
    run_file_writer(writer, iterations)
    logger.debug(f"Leaky writer is holding {writer.open_handle_count:,} open handles")
    print(f"Completed {iterations:,} file writes")


def good_file_writing_example(directory: Path, iterations: int = DEFAULT_ITERATIONS) -> None:
    """
    Write demo files, closing every handle before the next one is opened.

    Args:
        directory: Directory for the good demo files
        iterations: Number of files to write
    """
    print("Starting Good File Writing")
    run_file_writer(ManagedFileWriter(directory), iterations)
    print(f"Completed {iterations:,} file writes")


def clear_files(good_dir: Path, bad_dir: Path) -> None:
    """Delete both demo directories and everything in them.

    Deletion errors (for example a file still locked by the leaky writer on
    Windows) are not handled and propagate to the caller.
    """
    for directory in (Path(good_dir), Path(bad_dir)):
        if directory.exists():
            shutil.rmtree(directory)
            logger.debug(f"Deleted directory {directory}")
