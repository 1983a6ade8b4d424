"""Managed and leaky demo file writers."""

import logging
from pathlib import Path
from typing import List, Optional, TextIO

from .file_writer_interface import DemoFileWriter


class ManagedFileWriter(DemoFileWriter):
    """
    Writes demo files and closes every handle before moving on.

    The handle is released on every exit path. Errors are not caught here,
    so a failure aborts the whole run.
    """

    name_template = "{}example.txt"
    line = "I'm a good file writer!"

    def release(self, handle: TextIO) -> None:
        """Close the text writer, which also closes its descriptor."""
        handle.close()


class LeakyFileWriter(DemoFileWriter):
    """
    Writes demo files and never releases the handles.

    CPython closes a file as soon as its last reference goes away, so every
    handle is kept in ``leaked_handles`` for as long as the writer lives.
    Each line is flushed so the content reaches disk while the descriptor
    stays open. Failures for one index are logged and the run continues.
    """

    name_template = "{}-example.txt"
    line = "I'm a bad file writer"

    def __init__(self, directory: Path, logger: Optional[logging.Logger] = None):
        super().__init__(directory)
        self._logger = logger or logging.getLogger(__name__)
        self.leaked_handles: List[TextIO] = []

    def release(self, handle: TextIO) -> None:
        """Flush the handle and keep it open."""
        self.leaked_handles.append(handle)
        handle.flush()

    def write_file(self, file_number: int) -> None:
        try:
            super().write_file(file_number)
        except Exception as e:
            self._logger.error(f"Error: {e}")

    @property
    def open_handle_count(self) -> int:
        """Number of handles this writer is still holding."""
        return len(self.leaked_handles)
