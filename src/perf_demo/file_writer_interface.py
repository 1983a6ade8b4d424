"""Abstract interface for demo file writers."""

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TextIO


class DemoFileWriter(ABC):
    """Abstract base class for writing one small text file per index.

    Subclasses provide the naming scheme, the fixed line and what happens to
    a handle after the line is written. Opening and writing are shared.
    """

    name_template: str = "{}.txt"
    line: str = ""

    def __init__(self, directory: Path):
        """
        Initialize the writer.

        Args:
            directory: Directory the demo files are written into
        """
        self.directory = Path(directory)

    def file_path(self, file_number: int) -> Path:
        """Return the path of the demo file for ``file_number``."""
        return self.directory / self.name_template.format(file_number)

    def open(self, path: Path) -> TextIO:
        """Open ``path`` read-write, creating it if missing, without truncating.

        Args:
            path: File to open

        Returns:
            Text writer wrapping the underlying file descriptor
        """
        fd = os.open(path, os.O_RDWR | os.O_CREAT, 0o666)
        return open(fd, "r+", encoding="utf-8")

    def write_line(self, handle: TextIO) -> None:
        """Write the writer's fixed line to ``handle``."""
        handle.write(self.line + "\n")

    @abstractmethod
    def release(self, handle: TextIO) -> None:
        """Release the text writer and its file descriptor (or not)."""
        pass

    def write_file(self, file_number: int) -> None:
        """Open, write and release a single demo file.

        ``release`` runs on every exit path, so a subclass decides whether
        a handle is ever closed.

        Args:
            file_number: Zero-based index used to name the file
        """
        handle = self.open(self.file_path(file_number))
        try:
            self.write_line(handle)
        finally:
            self.release(handle)
