"""
Permission mode value object.
"""

from fs_shell.exceptions import InvalidModeError

MAX_MODE = 0o7777
_OCTAL_DIGITS = frozenset("01234567")


class Mode:
    """
    POSIX permission bits parsed from their octal text form.
    """

    def __init__(self, value: int):
        """
        Initialize the Mode.

        Args:
            value: Permission bits, between 1 and 0o7777

        Raises:
            InvalidModeError: If the value is zero or out of range
        """
        if not 0 < value <= MAX_MODE:
            raise InvalidModeError()
        self.value = value

    @classmethod
    def parse(cls, text: str) -> "Mode":
        """
        Parse a string of 1 to 4 octal digits, e.g. "755" or "0644".

        Raises:
            InvalidModeError: If the string is empty, too long, not octal or zero
        """
        if not text or len(text) > 4:
            raise InvalidModeError()
        if not set(text) <= _OCTAL_DIGITS:
            raise InvalidModeError()
        return cls(int(text, 8))

    def __int__(self) -> int:
        return self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mode):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return f"{self.value:04o}"

    def __repr__(self) -> str:
        return f"Mode(0o{self.value:o})"
