"""Interactive command loop that dispatches to the demos."""

import logging
from typing import Callable, Dict, Optional

from .config import DemoConfig
from .file_demos import bad_file_writing_example, clear_files, good_file_writing_example
from .file_writers import LeakyFileWriter
from .memory import MemoryProfiler, force_collection
from .string_demos import bad_string_manipulation, good_string_manipulation

EXIT_COMMAND = "x"
UNKNOWN_COMMAND_HINT = (
    "Unknown command. Please try again.  Type 'list' to see all available commands."
)
NEXT_COMMAND_PROMPT = "Please enter your next command:"


class CommandLoop:
    """
    Reads commands from the user and runs the matching demo.

    Commands are matched case-insensitively against a fixed set. The loop
    ends on ``x`` or when input runs out.
    """

    def __init__(
        self,
        config: DemoConfig,
        input_func: Optional[Callable[[], str]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the command loop.

        Args:
            config: Demo configuration
            input_func: Callable returning the next line of user input,
                defaults to ``input``
            logger: Logger instance
        """
        self.config = config
        self._input = input_func or input
        self._logger = logger or logging.getLogger(__name__)
        self.profiler = MemoryProfiler(self._logger) if config.profile else None
        # Lives as long as the loop so leaked handles pile up across runs
        self.leaky_writer = LeakyFileWriter(config.bad_dir, self._logger)

        self.commands: Dict[str, Callable[[], None]] = {
            "list": self.list_commands,
            "bad string": self._profiled("Bad string", self.bad_string),
            "good string": self._profiled("Good string", self.good_string),
            "force collection": self.force_collection,
            "good file": self._profiled("Good file", self.good_file),
            "bad file": self._profiled("Bad file", self.bad_file),
            "clear file": self.clear_files,
        }

    def _profiled(self, name: str, func: Callable[[], None]) -> Callable[[], None]:
        if self.profiler is None:
            return func
        return lambda: self.profiler.profile(name, func)

    def list_commands(self) -> None:
        """Display the commands that are available."""
        count = f"{self.config.iterations:,}"
        print("")
        print("The following commands are available:")
        print("list = Shows this listing of actions")
        print("-- Garbage Collection Helpers --")
        print("force collection = Forces the garbage collector to run")
        print("-- String Manipulation Examples --")
        print(f"bad string = Demonstrates bad string manipulation with {count} iterations")
        print(f"good string = Demonstrates good string manipulation with {count} iterations")
        print("-- File Writing Examples --")
        print(f"bad file = Demonstrates bad file writing with {count} iterations")
        print(f"good file = Demonstrates good file writing with {count} iterations")
        print("")
        print("Press X to exit")

    def bad_string(self) -> None:
        bad_string_manipulation(self.config.iterations)

    def good_string(self) -> None:
        good_string_manipulation(self.config.iterations)

    def force_collection(self) -> None:
        force_collection()

    def bad_file(self) -> None:
        bad_file_writing_example(self.leaky_writer, self.config.iterations)

    def good_file(self) -> None:
        good_file_writing_example(self.config.good_dir, self.config.iterations)

    def clear_files(self) -> None:
        clear_files(self.config.good_dir, self.config.bad_dir)

    def read_command(self) -> str:
        """Read the next command, treating end of input as ``x``."""
        try:
            command = self._input()
        except EOFError:
            self._logger.debug("End of input, exiting")
            return EXIT_COMMAND
        return command if command is not None else ""

    def dispatch(self, command: str) -> bool:
        """
        Run the demo matching ``command``.

        Args:
            command: Raw line entered by the user

        Returns:
            True if the command was recognised, False otherwise
        """
        action = self.commands.get(command.lower())
        if action is None:
            print(UNKNOWN_COMMAND_HINT)
            return False

        self._logger.debug(f"Running command '{command.lower()}'")
        action()
        return True

    def run(self) -> None:
        """Show the welcome screen, clean up old files and process commands."""
        print("Welcome to the performance demo")
        self.list_commands()
        self.clear_files()

        command = self.read_command()
        while command.lower() != EXIT_COMMAND:
            self.dispatch(command)
            print(NEXT_COMMAND_PROMPT)
            command = self.read_command()
