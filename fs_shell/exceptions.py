"""
Custom exceptions for the application.
"""

from typing import Optional


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ShellError(BaseAppError):
    """
    Exception reported to the user on the shell's error stream.

    A bare error renders as ``err``; an error carrying a detail renders as
    ``err: <detail>``.
    """

    default_detail: Optional[str] = None

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail if detail is not None else self.default_detail
        super().__init__(self.detail or "")

    def render(self) -> str:
        """Render the single error-stream line for this error."""
        if self.detail:
            return f"err: {self.detail}"
        return "err"


class CommandError(ShellError):
    """Exception raised for unknown commands or missing arguments."""

    pass


class InvalidModeError(ShellError):
    """Exception raised when a permission string is not a valid octal mode."""

    default_detail = "bad mode"


class FileSystemError(ShellError):
    """Exception raised for file system operation errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass
