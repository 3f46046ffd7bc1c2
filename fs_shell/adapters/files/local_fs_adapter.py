"""
Local file system adapter implementation for the shell's file operations.
"""

import logging
import os
import shutil
from collections.abc import Iterator

from typing_extensions import override

from fs_shell.entities.Mode import Mode
from fs_shell.exceptions import FileSystemError
from fs_shell.ports.files.file_system_port import FileSystemPort
from fs_shell.utils.workspace import current_directory, relative_to


class LocalFileSystemAdapter(FileSystemPort):
    """Local file system implementation of the file system port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @staticmethod
    def _describe(error: OSError) -> str:
        """Return the operating system's description of an error."""
        return error.strerror or str(error)

    def _walk(self, root: str) -> Iterator[os.DirEntry[str]]:
        """
        Yield every entry below a directory, parents before children.

        Symlinked directories are yielded but not descended into.
        """
        with os.scandir(root) as it:
            for entry in it:
                yield entry
                if entry.is_dir(follow_symlinks=False):
                    yield from self._walk(entry.path)

    def _make_parent(self, path: str) -> None:
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)

    def _discard(self, path: str) -> None:
        """Remove a single entry if present (empty directories included)."""
        if not os.path.lexists(path):
            return
        if os.path.isdir(path) and not os.path.islink(path):
            os.rmdir(path)
        else:
            os.remove(path)

    def _copy_file(self, source: str, destination: str) -> None:
        shutil.copyfile(source, destination)
        shutil.copymode(source, destination)

    def _copy_tree(self, source: str, destination: str) -> None:
        os.makedirs(destination, exist_ok=True)
        for entry in self._walk(source):
            out = os.path.join(destination, relative_to(entry.path, source))
            if entry.is_symlink():
                target = os.readlink(entry.path)
                self._make_parent(out)
                self._discard(out)
                os.symlink(target, out)
            elif entry.is_dir():
                os.makedirs(out, exist_ok=True)
            else:
                self._make_parent(out)
                self._copy_file(entry.path, out)

    @override
    def current_directory(self) -> str:
        return current_directory()

    @override
    def change_directory(self, path: str) -> str:
        try:
            os.chdir(path)
        except OSError as e:
            raise FileSystemError(self._describe(e))
        return current_directory()

    @override
    def list_entries(self, path: str) -> list[str]:
        """
        List the bare names of the entries of a directory, sorted by name.

        Args:
            path: Path to list

        Returns:
            Entry names, or the path's own filename if it is not a directory

        Raises:
            FileSystemError: If the path does not exist or cannot be read
        """
        if not os.path.exists(path):
            raise FileSystemError("no such file or directory")

        if not os.path.isdir(path):
            return [os.path.basename(path)]

        try:
            with os.scandir(path) as it:
                return sorted(entry.name for entry in it)
        except OSError as e:
            self._logger.warning(f"Could not read directory {path}: {e}")
            raise FileSystemError()

    @override
    def copy(self, source: str, destination: str) -> None:
        """
        Copy a file or a directory tree, overwriting existing files.

        Symlinks inside a copied tree are recreated with their original
        target. Files already copied are kept if a later step fails.

        Args:
            source: Existing file or directory
            destination: Target path

        Raises:
            FileSystemError: If the source is missing or any step fails
        """
        if not os.path.exists(source):
            raise FileSystemError()

        try:
            if os.path.isdir(source):
                self._copy_tree(source, destination)
            else:
                self._make_parent(destination)
                self._copy_file(source, destination)
        except OSError as e:
            self._logger.warning(f"Copy of {source} to {destination} aborted: {e}")
            raise FileSystemError()

    @override
    def move(self, source: str, destination: str) -> None:
        try:
            os.rename(source, destination)
        except OSError as e:
            raise FileSystemError(self._describe(e))

    @override
    def remove(self, path: str) -> None:
        """
        Remove an entry, recursively for directories.

        A symlink is removed itself, never its target. A missing path is not an error.

        Raises:
            FileSystemError: If removal fails
        """
        try:
            if os.path.isdir(path) and not os.path.islink(path):
                shutil.rmtree(path)
            else:
                os.remove(path)
        except FileNotFoundError:
            self._logger.info(f"Nothing to remove at {path}")
        except OSError as e:
            raise FileSystemError(self._describe(e))

    @override
    def make_directories(self, path: str) -> None:
        try:
            os.makedirs(path, exist_ok=True)
        except OSError as e:
            raise FileSystemError(self._describe(e))

    @override
    def touch(self, path: str) -> None:
        try:
            with open(path, "a"):
                pass
        except OSError as e:
            raise FileSystemError(self._describe(e))

    @override
    def iter_matches(self, root: str, pattern: str) -> Iterator[str]:
        """
        Walk a tree and yield entries whose filename contains a pattern.

        Args:
            root: Directory to walk
            pattern: Substring to look for in filenames

        Yields:
            Paths relative to the root, as they are found

        Raises:
            FileSystemError: If the root is missing or the walk fails
        """
        if not os.path.exists(root):
            raise FileSystemError()

        try:
            for entry in self._walk(root):
                if pattern in entry.name:
                    yield relative_to(entry.path, root)
        except OSError as e:
            self._logger.warning(f"Search under {root} aborted: {e}")
            raise FileSystemError()

    @override
    def change_mode(self, path: str, mode: Mode) -> None:
        try:
            os.chmod(path, int(mode))
        except OSError as e:
            raise FileSystemError(self._describe(e))
