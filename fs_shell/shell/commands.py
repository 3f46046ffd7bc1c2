"""
Commands "ls", "cp", "search", ... mapped to the Files use cases.
"""

import logging
from collections.abc import Callable
from typing import Optional

from rich.console import Console

from fs_shell.entities.CommandLine import CommandLine
from fs_shell.exceptions import CommandError
from fs_shell.ports.shell.commands_port import CommandsHandlerPort, CommandSpec
from fs_shell.use_cases.files.change_mode import ChangeModeUseCase
from fs_shell.use_cases.files.copy_files import CopyFilesUseCase
from fs_shell.use_cases.files.create_files import MakeDirectoryUseCase, TouchFileUseCase
from fs_shell.use_cases.files.list_files import ListFilesUseCase
from fs_shell.use_cases.files.move_files import MoveFilesUseCase
from fs_shell.use_cases.files.navigate import NavigateUseCase
from fs_shell.use_cases.files.remove_files import RemoveFilesUseCase
from fs_shell.use_cases.files.search_files import SearchFilesUseCase

Handler = Callable[[CommandLine], bool]


class FilesCommandsHandler(CommandsHandlerPort):
    """Handler for the fixed set of filesystem commands typed at the prompt."""

    def __init__(
        self,
        navigate_uc: NavigateUseCase,
        list_files_uc: ListFilesUseCase,
        copy_files_uc: CopyFilesUseCase,
        move_files_uc: MoveFilesUseCase,
        remove_files_uc: RemoveFilesUseCase,
        make_directory_uc: MakeDirectoryUseCase,
        touch_file_uc: TouchFileUseCase,
        search_files_uc: SearchFilesUseCase,
        change_mode_uc: ChangeModeUseCase,
        console: Console,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the commands handler.

        Args:
            navigate_uc: Use case for the working directory (pwd, cd)
            list_files_uc: Use case for listing entries (ls)
            copy_files_uc: Use case for copying (cp)
            move_files_uc: Use case for renaming (mv)
            remove_files_uc: Use case for removal (rm)
            make_directory_uc: Use case for directory creation (mkdir)
            touch_file_uc: Use case for file creation (touch)
            search_files_uc: Use case for name search (search)
            change_mode_uc: Use case for permissions (chmod)
            console: Console receiving normal output
            logger: Logger instance to use for logging
        """
        self._navigate_uc = navigate_uc
        self._list_files_uc = list_files_uc
        self._copy_files_uc = copy_files_uc
        self._move_files_uc = move_files_uc
        self._remove_files_uc = remove_files_uc
        self._make_directory_uc = make_directory_uc
        self._touch_file_uc = touch_file_uc
        self._search_files_uc = search_files_uc
        self._change_mode_uc = change_mode_uc
        self._console = console
        self._logger = logger or logging.getLogger(__name__)

        self._table: dict[str, tuple[CommandSpec, Handler]] = {}
        self._register("ls", "ls [path]", 1, self._ls)
        self._register("cd", "cd [path]", 1, self._cd)
        self._register("pwd", "pwd", 1, self._pwd)
        self._register("cp", "cp <src> <dst>", 3, self._cp)
        self._register("mv", "mv <src> <dst>", 3, self._mv)
        self._register("rm", "rm <path>", 2, self._rm)
        self._register("mkdir", "mkdir <path>", 2, self._mkdir)
        self._register("touch", "touch <file>", 2, self._touch)
        self._register("search", "search <pattern>", 2, self._search)
        self._register("chmod", "chmod <octal> <path>", 3, self._chmod)
        self._register("exit", "exit", 1, self._exit)
        self._register("help", None, 1, self._help)

    # ------------------------- internal helpers -------------------------
    def _register(
        self, name: str, usage: Optional[str], min_args: int, handler: Handler
    ) -> None:
        spec: CommandSpec = {"name": name, "usage": usage, "min_args": min_args}
        self._table[name] = (spec, handler)

    def _echo(self, text: str) -> None:
        # Written raw: names reach the terminal byte for byte, tabs and control characters included.
        self._console.file.write(f"{text}\n")

    def _ls(self, line: CommandLine) -> bool:
        for name in self._list_files_uc.execute(line.arg(1)):
            self._echo(name)
        return True

    def _cd(self, line: CommandLine) -> bool:
        self._navigate_uc.change(line.arg(1))
        return True

    def _pwd(self, line: CommandLine) -> bool:
        self._echo(self._navigate_uc.current())
        return True

    def _cp(self, line: CommandLine) -> bool:
        self._copy_files_uc.execute(line.tokens[1], line.tokens[2])
        return True

    def _mv(self, line: CommandLine) -> bool:
        self._move_files_uc.execute(line.tokens[1], line.tokens[2])
        return True

    def _rm(self, line: CommandLine) -> bool:
        self._remove_files_uc.execute(line.tokens[1])
        return True

    def _mkdir(self, line: CommandLine) -> bool:
        self._make_directory_uc.execute(line.tokens[1])
        return True

    def _touch(self, line: CommandLine) -> bool:
        self._touch_file_uc.execute(line.tokens[1])
        return True

    def _search(self, line: CommandLine) -> bool:
        # Only the pattern is used; the walk is always rooted at the working directory.
        self._search_files_uc.execute(line.tokens[1], self._echo)
        return True

    def _chmod(self, line: CommandLine) -> bool:
        self._change_mode_uc.execute(line.tokens[1], line.tokens[2])
        return True

    def _exit(self, line: CommandLine) -> bool:
        return False

    def _help(self, line: CommandLine) -> bool:
        for spec in self.available_commands():
            if spec["usage"]:
                self._echo(spec["usage"])
        return True

    def available_commands(self) -> list[CommandSpec]:
        return [spec for spec, _ in self._table.values()]

    def dispatch(self, line: CommandLine) -> bool:
        entry = self._table.get(line.name)
        if entry is None:
            self._logger.info(f"Unknown command: {line.name}")
            raise CommandError()
        spec, handler = entry
        if line.argc < spec["min_args"]:
            self._logger.info(
                f"Command {line.name} needs {spec['min_args'] - 1} argument(s), got {len(line.args)}"
            )
            raise CommandError()
        return handler(line)
