"""
Port and types describing the shell's command table, independent of the I/O used.
"""

from abc import ABC, abstractmethod
from typing import Optional, TypedDict

from fs_shell.entities.CommandLine import CommandLine


class CommandSpec(TypedDict):
    """Specification for a command that can be typed at the prompt."""

    name: str
    usage: Optional[str]  # line shown by `help`; None keeps it out of the summary
    min_args: int  # total tokens, command name included


class CommandsHandlerPort(ABC):
    """
    Port interface for handling shell commands.

    This port exposes the command table and dispatches tokenized lines to the appropriate use cases.
    """

    @abstractmethod
    def available_commands(self) -> list[CommandSpec]:
        """
        Get the command table, in the order used by `help`.

        Returns:
            List of command specifications
        """
        pass

    @abstractmethod
    def dispatch(self, line: CommandLine) -> bool:
        """
        Dispatch a tokenized line to the matching command.

        Args:
            line: Non-blank command line

        Returns:
            False when the shell should stop, True otherwise

        Raises:
            CommandError: If the command is unknown or lacks arguments
            ShellError: If the command itself fails
        """
        pass
