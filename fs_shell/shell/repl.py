"""
Read-evaluate-print loop of the shell.
"""

import logging
import sys
from typing import Optional, TextIO

from rich.console import Console

from fs_shell.entities.CommandLine import CommandLine
from fs_shell.exceptions import ShellError
from fs_shell.ports.shell.commands_port import CommandsHandlerPort
from fs_shell.use_cases.files.navigate import NavigateUseCase

PROMPT_SUFFIX = " > "


class Shell:
    """
    Interactive loop: prompt, read one line, tokenize, dispatch, report.

    Each line runs to completion before the next prompt. Failures are
    printed as one line on the error console and never end the loop; only
    `exit` or the end of input does.
    """

    def __init__(
        self,
        commands: CommandsHandlerPort,
        navigate_uc: NavigateUseCase,
        console: Console,
        error_console: Console,
        stdin: Optional[TextIO] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._commands = commands
        self._navigate_uc = navigate_uc
        self._console = console
        self._error_console = error_console
        self._stdin = stdin
        self._logger = logger or logging.getLogger(__name__)

    def _prompt(self) -> None:
        stream = self._console.file
        stream.write(f"{self._navigate_uc.current()}{PROMPT_SUFFIX}")
        stream.flush()

    def _read_line(self) -> Optional[str]:
        stream = self._stdin or sys.stdin
        line = stream.readline()
        if not line:
            return None
        return line.rstrip("\n")

    def _report(self, message: str) -> None:
        self._error_console.out(message, highlight=False)

    def execute(self, raw: str) -> bool:
        """
        Run one input line.

        Returns:
            False when the shell should stop, True otherwise
        """
        line = CommandLine.parse(raw)
        if line.is_blank:
            return True
        try:
            return self._commands.dispatch(line)
        except ShellError as e:
            self._logger.info(f"Command {line.name!r} failed: {e.render()}")
            self._report(e.render())
        except Exception as e:
            self._logger.exception(f"Unexpected error running {line.name!r}: {e}")
            self._report("err")
        return True

    def run(self) -> int:
        """
        Loop until `exit` or end of input.

        Returns:
            Process exit status, always 0
        """
        self._logger.info("Shell started")
        while True:
            self._prompt()
            raw = self._read_line()
            if raw is None:
                break
            if not self.execute(raw):
                break
        self._logger.info("Shell stopped")
        return 0
