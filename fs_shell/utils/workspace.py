from __future__ import annotations

import os

"""Working-directory utilities shared by the prompt and the commands.

Environment variables:
- HOME: target of a bare ``cd``. Falls back to the filesystem root when unset.
"""

UNKNOWN_DIRECTORY = "<unknown>"


def current_directory() -> str:
    """Return the absolute working directory, or ``<unknown>`` if it is gone."""
    try:
        return os.getcwd()
    except OSError:
        return UNKNOWN_DIRECTORY


def home_directory() -> str:
    home = os.getenv("HOME")
    if home is None:
        return os.path.abspath(os.sep)
    return home


def relative_to(path: str, root: str) -> str:
    return os.path.relpath(path, root)
