import logging
from typing import Optional

from fs_shell.exceptions import FileSystemError, ShellError
from fs_shell.ports.files.file_system_port import FileSystemPort


class RemoveFilesUseCase:
    """Use case for removing an entry, recursively for directories."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> None:
        try:
            self._logger.info(f"Removing {path}")
            self._file_system.remove(path)
        except ShellError:
            raise
        except Exception as e:
            self._logger.error(f"Error removing {path}: {e}")
            raise FileSystemError(str(e))
