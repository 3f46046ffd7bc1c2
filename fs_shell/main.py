"""
Entry point: load the settings, configure logging and run the shell.
"""

import argparse
import logging

from fs_shell.config.settings import Settings
from fs_shell.container import container
from fs_shell.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fs-shell",
        description="Interactive shell for basic filesystem commands (type 'help' at the prompt).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level for diagnostics (default: FS_SHELL_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write diagnostics to this file (default: FS_SHELL_LOG_FILE, otherwise disabled)",
    )
    args = parser.parse_args(argv)

    problem: ConfigurationError | None = None
    try:
        settings = Settings(log_level=args.log_level, log_file=args.log_file)
    except ConfigurationError as e:
        problem = e
        settings = Settings(log_level="INFO", log_file=args.log_file)

    settings.configure_logging()
    if problem is not None:
        logger.warning(f"{problem}; using INFO")
    logger.info("Starting fs-shell")
    return container.get_shell().run()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
