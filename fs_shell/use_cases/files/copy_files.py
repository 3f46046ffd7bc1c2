"""
Use case for copying files and directory trees.
"""

import logging
from typing import Optional

from fs_shell.exceptions import FileSystemError, ShellError
from fs_shell.ports.files.file_system_port import FileSystemPort


class CopyFilesUseCase:
    """Use case for copying a file or a whole directory tree."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, source: str, destination: str) -> None:
        """
        Copy ``source`` to ``destination``.

        Raises:
            FileSystemError: If the source is missing or the copy fails
        """
        try:
            self._logger.info(f"Copying {source} to {destination}")
            self._file_system.copy(source, destination)
        except ShellError:
            self._logger.error(f"Copy of {source} to {destination} failed")
            raise
        except Exception as e:
            self._logger.error(f"Error copying {source}: {e}")
            raise FileSystemError()
