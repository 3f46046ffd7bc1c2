"""
Dependency injection container for managing application dependencies.
"""

import logging
import sys
from typing import Optional, TextIO

from rich.console import Console

from fs_shell.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from fs_shell.ports.files.file_system_port import FileSystemPort
from fs_shell.ports.shell.commands_port import CommandsHandlerPort
from fs_shell.shell.commands import FilesCommandsHandler
from fs_shell.shell.repl import Shell
from fs_shell.use_cases.files.change_mode import ChangeModeUseCase
from fs_shell.use_cases.files.copy_files import CopyFilesUseCase
from fs_shell.use_cases.files.create_files import MakeDirectoryUseCase, TouchFileUseCase
from fs_shell.use_cases.files.list_files import ListFilesUseCase
from fs_shell.use_cases.files.move_files import MoveFilesUseCase
from fs_shell.use_cases.files.navigate import NavigateUseCase
from fs_shell.use_cases.files.remove_files import RemoveFilesUseCase
from fs_shell.use_cases.files.search_files import SearchFilesUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_console(self) -> Console:
        """
        Get the console receiving normal output (listings, prompt, help).

        Returns:
            Console bound to standard output
        """
        if "console" not in self._instances:
            self._instances["console"] = Console(soft_wrap=True, highlight=False)
        return self._instances["console"]

    def get_error_console(self) -> Console:
        """
        Get the console receiving error lines.

        Returns:
            Console bound to standard error
        """
        if "error_console" not in self._instances:
            self._instances["error_console"] = Console(
                stderr=True, soft_wrap=True, highlight=False
            )
        return self._instances["error_console"]

    def get_input_stream(self) -> TextIO:
        if "input_stream" not in self._instances:
            self._instances["input_stream"] = sys.stdin
        return self._instances["input_stream"]

    def get_file_system(self) -> FileSystemPort:
        """
        Get file system adapter instance.

        Returns:
            FileSystemPort implementation
        """
        if "file_system" not in self._instances:
            self._instances["file_system"] = LocalFileSystemAdapter(self._logger)
        return self._instances["file_system"]

    def _get_use_case(self, key: str, factory):
        if key not in self._instances:
            self._instances[key] = factory(self.get_file_system(), self._logger)
        return self._instances[key]

    def get_navigate_use_case(self) -> NavigateUseCase:
        return self._get_use_case("navigate_use_case", NavigateUseCase)

    def get_list_files_use_case(self) -> ListFilesUseCase:
        """
        Get list files use case with injected dependencies.

        Returns:
            Configured ListFilesUseCase
        """
        return self._get_use_case("list_files_use_case", ListFilesUseCase)

    def get_copy_files_use_case(self) -> CopyFilesUseCase:
        return self._get_use_case("copy_files_use_case", CopyFilesUseCase)

    def get_move_files_use_case(self) -> MoveFilesUseCase:
        return self._get_use_case("move_files_use_case", MoveFilesUseCase)

    def get_remove_files_use_case(self) -> RemoveFilesUseCase:
        return self._get_use_case("remove_files_use_case", RemoveFilesUseCase)

    def get_make_directory_use_case(self) -> MakeDirectoryUseCase:
        return self._get_use_case("make_directory_use_case", MakeDirectoryUseCase)

    def get_touch_file_use_case(self) -> TouchFileUseCase:
        return self._get_use_case("touch_file_use_case", TouchFileUseCase)

    def get_search_files_use_case(self) -> SearchFilesUseCase:
        """
        Get search files use case with injected dependencies.

        Returns:
            Configured SearchFilesUseCase
        """
        return self._get_use_case("search_files_use_case", SearchFilesUseCase)

    def get_change_mode_use_case(self) -> ChangeModeUseCase:
        return self._get_use_case("change_mode_use_case", ChangeModeUseCase)

    def get_commands_handler(self) -> CommandsHandlerPort:
        """
        Command table of the shell backed by the Files use cases.
        """
        if "commands_handler" not in self._instances:
            self._instances["commands_handler"] = FilesCommandsHandler(
                navigate_uc=self.get_navigate_use_case(),
                list_files_uc=self.get_list_files_use_case(),
                copy_files_uc=self.get_copy_files_use_case(),
                move_files_uc=self.get_move_files_use_case(),
                remove_files_uc=self.get_remove_files_use_case(),
                make_directory_uc=self.get_make_directory_use_case(),
                touch_file_uc=self.get_touch_file_use_case(),
                search_files_uc=self.get_search_files_use_case(),
                change_mode_uc=self.get_change_mode_use_case(),
                console=self.get_console(),
                logger=self._logger,
            )
        return self._instances["commands_handler"]

    def get_shell(self) -> Shell:
        """
        Get the interactive shell with injected dependencies.

        Returns:
            Configured Shell
        """
        if "shell" not in self._instances:
            self._instances["shell"] = Shell(
                commands=self.get_commands_handler(),
                navigate_uc=self.get_navigate_use_case(),
                console=self.get_console(),
                error_console=self.get_error_console(),
                stdin=self.get_input_stream(),
                logger=self._logger,
            )
        return self._instances["shell"]

    def use_streams(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ) -> None:
        """Bind the shell to the given streams instead of the process ones."""
        if stdin is not None:
            self._instances["input_stream"] = stdin
        if stdout is not None:
            self._instances["console"] = Console(
                file=stdout, soft_wrap=True, highlight=False
            )
        if stderr is not None:
            self._instances["error_console"] = Console(
                file=stderr, soft_wrap=True, highlight=False
            )

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
