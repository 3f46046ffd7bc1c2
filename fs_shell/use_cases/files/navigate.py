"""
Use case for reading and changing the working directory.
"""

import logging
from typing import Optional

from fs_shell.exceptions import FileSystemError, ShellError
from fs_shell.ports.files.file_system_port import FileSystemPort
from fs_shell.utils.workspace import home_directory


class NavigateUseCase:
    """Use case for the working directory, the shell's only state."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def current(self) -> str:
        """Return the working directory, or "<unknown>" if it cannot be determined."""
        return self._file_system.current_directory()

    def change(self, path: Optional[str] = None) -> str:
        """
        Change the working directory.

        Args:
            path: Target directory; HOME, or "/" when HOME is unset, if None

        Returns:
            The new working directory

        Raises:
            FileSystemError: If the target cannot be entered; the working directory is unchanged
        """
        target = path if path is not None else home_directory()
        try:
            self._logger.info(f"Changing directory to: {target}")
            return self._file_system.change_directory(target)
        except ShellError:
            raise
        except Exception as e:
            self._logger.error(f"Error changing directory: {e}")
            raise FileSystemError(str(e))
