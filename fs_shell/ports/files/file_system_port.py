"""
File system port interface defining the contract for the shell's file operations.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from fs_shell.entities.Mode import Mode


class FileSystemPort(ABC):
    """Port interface for file system operations."""

    @abstractmethod
    def current_directory(self) -> str:
        """
        Get the working directory.

        Returns:
            Absolute path of the working directory, or "<unknown>"
        """
        pass

    @abstractmethod
    def change_directory(self, path: str) -> str:
        """
        Change the working directory.

        Args:
            path: Directory to switch to

        Returns:
            The new working directory

        Raises:
            FileSystemError: If the directory cannot be entered
        """
        pass

    @abstractmethod
    def list_entries(self, path: str) -> list[str]:
        """
        List the bare names of the entries of a directory.

        A path naming anything other than a directory lists its own filename.

        Args:
            path: Path to list

        Returns:
            Entry names

        Raises:
            FileSystemError: If the path does not exist or cannot be read
        """
        pass

    @abstractmethod
    def copy(self, source: str, destination: str) -> None:
        """
        Copy a file or a directory tree, overwriting existing files.

        Args:
            source: Existing file or directory
            destination: Target path

        Raises:
            FileSystemError: If any step of the copy fails
        """
        pass

    @abstractmethod
    def move(self, source: str, destination: str) -> None:
        """
        Rename an entry.

        Raises:
            FileSystemError: If the rename fails
        """
        pass

    @abstractmethod
    def remove(self, path: str) -> None:
        """
        Remove an entry, recursively for directories.

        Raises:
            FileSystemError: If removal fails
        """
        pass

    @abstractmethod
    def make_directories(self, path: str) -> None:
        """
        Create a directory and all missing parents.

        Raises:
            FileSystemError: If creation fails
        """
        pass

    @abstractmethod
    def touch(self, path: str) -> None:
        """
        Create a file if it does not exist, leaving existing content untouched.

        Raises:
            FileSystemError: If the file cannot be opened
        """
        pass

    @abstractmethod
    def iter_matches(self, root: str, pattern: str) -> Iterator[str]:
        """
        Walk a tree and yield entries whose filename contains a pattern.

        Args:
            root: Directory to walk
            pattern: Substring to look for in filenames

        Yields:
            Paths relative to the root, as they are found

        Raises:
            FileSystemError: If the walk fails
        """
        pass

    @abstractmethod
    def change_mode(self, path: str, mode: Mode) -> None:
        """
        Set the permission bits of an entry.

        Raises:
            FileSystemError: If the permissions cannot be changed
        """
        pass
