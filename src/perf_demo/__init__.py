"""Performance Demo - paired bad/good examples of string building and file handle use."""

__version__ = "0.1.0"

from .commands import CommandLoop
from .config import DemoConfig
from .file_writer_interface import DemoFileWriter
from .file_writers import LeakyFileWriter, ManagedFileWriter
from .memory import MemoryProfiler, force_collection

__all__ = [
    "CommandLoop",
    "DemoConfig",
    "DemoFileWriter",
    "LeakyFileWriter",
    "ManagedFileWriter",
    "MemoryProfiler",
    "force_collection",
]
