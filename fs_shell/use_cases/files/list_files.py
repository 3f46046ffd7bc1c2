"""
Use case for listing the entries of a directory.
"""

import logging
from typing import Optional

from fs_shell.exceptions import FileSystemError, ShellError
from fs_shell.ports.files.file_system_port import FileSystemPort


class ListFilesUseCase:
    """Use case for listing the entries of a directory."""

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

    def execute(self, path: Optional[str] = None) -> list[str]:
        """
        List the entry names of a directory.

        Args:
            path: Path to list, the working directory if None

        Returns:
            Entry names; a single filename when the path is not a directory

        Raises:
            FileSystemError: If listing fails
        """
        target = path if path is not None else self._file_system.current_directory()
        try:
            self._logger.info(f"Listing entries of: {target}")
            entries = self._file_system.list_entries(target)
            self._logger.info(f"Found {len(entries)} entries")
            return entries
        except ShellError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing entries: {e}")
            raise FileSystemError()
