"""
Pytest configuration and shared fixtures.
"""

import io
import os
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from fs_shell.container import DependencyContainer


@pytest.fixture
def temp_directory(tmp_path):
    """
    Create a temporary directory tree for testing file operations.

    Returns:
        Path to the temporary directory
    """
    temp_dir = str(tmp_path)
    with open(os.path.join(temp_dir, "test1.txt"), "w") as f:
        f.write("This is a test file.")

    with open(os.path.join(temp_dir, "test2.py"), "w") as f:
        f.write("print('Hello, world!')")

    # Create a subdirectory with a file
    subdir = os.path.join(temp_dir, "subdir")
    os.makedirs(subdir)
    with open(os.path.join(subdir, "test3.md"), "w") as f:
        f.write("# Test Markdown\n\nThis is a test.")

    return temp_dir


@pytest.fixture
def in_temp_directory(temp_directory, monkeypatch):
    """Run the test with the temporary tree as working directory."""
    monkeypatch.chdir(temp_directory)
    return temp_directory


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def output():
    """In-memory console capturing normal output."""
    stream = io.StringIO()
    return stream, Console(file=stream, soft_wrap=True, highlight=False)


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with mocked logger for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container


@pytest.fixture
def run_shell(dependency_container):
    """
    Feed lines to a shell wired by the container.

    Returns:
        Function taking input lines and returning (stdout, stderr, exit status)
    """

    def _run(*lines: str):
        stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        stdout = io.StringIO()
        stderr = io.StringIO()
        dependency_container.reset()
        dependency_container.use_streams(stdin=stdin, stdout=stdout, stderr=stderr)
        status = dependency_container.get_shell().run()
        return stdout.getvalue(), stderr.getvalue(), status

    return _run
