"""Configuration management for the demo."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_ITERATIONS = 10000
GOOD_FILE_DIR = Path("goodfile")
BAD_FILE_DIR = Path("badfile")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


@dataclass
class DemoConfig:
    """Demo configuration parameters."""

    iterations: int = DEFAULT_ITERATIONS
    good_dir: Path = field(default_factory=lambda: GOOD_FILE_DIR)
    bad_dir: Path = field(default_factory=lambda: BAD_FILE_DIR)
    profile: bool = True
    verbose: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.good_dir = Path(self.good_dir)
        self.bad_dir = Path(self.bad_dir)
        if self.iterations <= 0:
            raise ValueError("iterations must be positive")

    @classmethod
    def from_env(cls) -> "DemoConfig":
        """Load demo configuration from environment variables.

        The defaults reproduce the classic demo: 10,000 iterations writing
        into ``goodfile/`` and ``badfile/`` under the working directory.
        """
        return cls(
            iterations=int(os.getenv("PERF_DEMO_ITERATIONS", str(DEFAULT_ITERATIONS))),
            good_dir=Path(os.getenv("PERF_DEMO_GOOD_DIR", str(GOOD_FILE_DIR))),
            bad_dir=Path(os.getenv("PERF_DEMO_BAD_DIR", str(BAD_FILE_DIR))),
            profile=_env_flag("PERF_DEMO_PROFILE", "true"),
            verbose=_env_flag("PERF_DEMO_VERBOSE", "false"),
        )


def get_demo_config() -> DemoConfig:
    """Get demo configuration."""
    return DemoConfig.from_env()
