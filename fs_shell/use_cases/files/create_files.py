"""
Use cases for creating directories and empty files.
"""

import logging
from typing import Optional

from fs_shell.exceptions import FileSystemError, ShellError
from fs_shell.ports.files.file_system_port import FileSystemPort


class MakeDirectoryUseCase:
    """Use case for creating a directory together with its missing parents."""

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

    def execute(self, path: str) -> None:
        """
        Create ``path``; an existing directory is left as it is.

        Raises:
            FileSystemError: If the directory cannot be created
        """
        try:
            self._logger.info(f"Creating directory: {path}")
            self._file_system.make_directories(path)
        except ShellError:
            raise
        except Exception as e:
            self._logger.error(f"Error creating directory {path}: {e}")
            raise FileSystemError(str(e))


class TouchFileUseCase:
    """Use case for creating a file if it does not exist yet."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> None:
        """
        Create ``path`` without truncating existing content.

        Raises:
            FileSystemError: If the file cannot be opened for appending
        """
        try:
            self._logger.info(f"Touching file: {path}")
            self._file_system.touch(path)
        except ShellError:
            raise
        except Exception as e:
            self._logger.error(f"Error touching {path}: {e}")
            raise FileSystemError(str(e))
