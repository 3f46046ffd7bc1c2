"""
Configuration settings for the application.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from fs_shell.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(
        self, log_level: Optional[str] = None, log_file: Optional[str] = None
    ):
        self.log_level: str = self._parse_log_level(
            log_level or self._get_env("FS_SHELL_LOG_LEVEL", "INFO")
        )
        self.log_file: Optional[str] = log_file or os.getenv("FS_SHELL_LOG_FILE") or None

    def _parse_log_level(self, value: str) -> str:
        """Normalize a log level name, raise error if unknown."""
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level {value!r}; expected one of {', '.join(_LOG_LEVELS)}"
            )
        return level

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def configure_logging(self) -> None:
        """
        Configure the root logger.

        Standard output and standard error belong to the shell, so records go
        to the log file when one is set and are discarded otherwise.
        """
        if self.log_file:
            logging.basicConfig(
                filename=self.log_file,
                level=getattr(logging, self.log_level),
                format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                force=True,
            )
        else:
            logging.basicConfig(handlers=[logging.NullHandler()], force=True)
