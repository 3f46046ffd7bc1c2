"""
Use case for searching entries by name below the working directory.
"""

import logging
from collections.abc import Callable
from typing import Optional

from fs_shell.exceptions import FileSystemError, ShellError
from fs_shell.ports.files.file_system_port import FileSystemPort


class SearchFilesUseCase:
    """Use case for searching entries by name below the working directory."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_system: Port for file system operations
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, pattern: str, on_match: Callable[[str], None]) -> int:
        """
        Report every entry under the working directory whose name contains a pattern.

        Matches are handed to ``on_match`` as soon as they are found, so
        matches reported before a failure stay reported.

        Args:
            pattern: Substring to look for in filenames
            on_match: Callback receiving each match, relative to the working directory

        Returns:
            Number of matches

        Raises:
            FileSystemError: If the walk fails
        """
        root = self._file_system.current_directory()
        count = 0
        try:
            self._logger.info(
                f"Searching for entries containing '{pattern}' in directory: {root}"
            )
            for match in self._file_system.iter_matches(root, pattern):
                on_match(match)
                count += 1
            self._logger.info(f"Found {count} entries matching '{pattern}'")
            return count
        except ShellError:
            raise
        except Exception as e:
            self._logger.error(f"Error searching entries: {e}")
            raise FileSystemError()
