"""
Use case for changing permission bits.
"""

import logging
from typing import Optional

from fs_shell.entities.Mode import Mode
from fs_shell.exceptions import FileSystemError, ShellError
from fs_shell.ports.files.file_system_port import FileSystemPort


class ChangeModeUseCase:
    """Use case for setting the permission bits of an entry from octal text."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, mode_text: str, path: str) -> Mode:
        """
        Parse ``mode_text`` and apply it to ``path``.

        The file system is not touched when the mode is invalid.

        Returns:
            The applied mode

        Raises:
            InvalidModeError: If ``mode_text`` is not 1 to 4 octal digits
            FileSystemError: If the permissions cannot be changed
        """
        mode = Mode.parse(mode_text)
        try:
            self._logger.info(f"Changing mode of {path} to {mode}")
            self._file_system.change_mode(path, mode)
            return mode
        except ShellError:
            raise
        except Exception as e:
            self._logger.error(f"Error changing mode of {path}: {e}")
            raise FileSystemError(str(e))
