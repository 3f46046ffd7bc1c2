import logging
from typing import Optional

from fs_shell.exceptions import FileSystemError, ShellError
from fs_shell.ports.files.file_system_port import FileSystemPort


class MoveFilesUseCase:
    """Use case for renaming or moving an entry."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, source: str, destination: str) -> None:
        try:
            self._logger.info(f"Moving {source} to {destination}")
            self._file_system.move(source, destination)
        except ShellError:
            raise
        except Exception as e:
            self._logger.error(f"Error moving {source}: {e}")
            raise FileSystemError(str(e))
