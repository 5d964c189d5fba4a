"""Command-line entry point: ``python -m taskify`` or the ``taskify`` script."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from taskify import __version__
from taskify.config import Config
from taskify.logging_config import LOG_LEVELS, get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taskify",
        description="Track tasks in High, Medium and Low priority columns.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Log level (default: env TASKIFY_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Send logs to the Textual devtools console instead of the log file",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config.ini (default: ~/.taskify/config.ini)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(args: Optional[List[str]] = None) -> int:
    """Parse arguments, configure logging and run the app.

    Returns:
        Exit code (0 for success, 1 if the app crashed)
    """
    options = build_parser().parse_args(args)
    setup_logging(log_level=options.log_level, dev=options.dev)

    from taskify.ui.app import TaskifyApp

    try:
        TaskifyApp(config=Config(options.config)).run()
    except KeyboardInterrupt:
        logger.info("Interrupted, exiting")
        return 0
    except Exception:
        logger.error("Taskify crashed", exc_info=True)
        return 1

    logger.info("Taskify exited")
    return 0


if __name__ == "__main__":
    sys.exit(main())
