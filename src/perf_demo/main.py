"""Main entry point for the performance demo."""

import logging
import sys

from .commands import CommandLoop
from .config import get_demo_config

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging level.

    Args:
        verbose: Enable verbose logging
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(logging.INFO)


def main():
    """Main execution function."""
    try:
        config = get_demo_config()
        setup_logging(config.verbose)

        logger.debug(f"Iterations: {config.iterations:,}")
        logger.debug(f"Good file directory: {config.good_dir}")
        logger.debug(f"Bad file directory: {config.bad_dir}")
        logger.debug(f"Profiling: {config.profile}")

        CommandLoop(config).run()
        return 0

    except KeyboardInterrupt:
        logger.warning("\nExecution interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"\nError during execution: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
