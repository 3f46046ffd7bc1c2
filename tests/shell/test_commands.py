"""
Tests for the FilesCommandsHandler command table.
"""

from unittest.mock import MagicMock

import pytest

from fs_shell.entities.CommandLine import CommandLine
from fs_shell.exceptions import CommandError
from fs_shell.shell.commands import FilesCommandsHandler
from fs_shell.use_cases.files.change_mode import ChangeModeUseCase
from fs_shell.use_cases.files.copy_files import CopyFilesUseCase
from fs_shell.use_cases.files.create_files import MakeDirectoryUseCase, TouchFileUseCase
from fs_shell.use_cases.files.list_files import ListFilesUseCase
from fs_shell.use_cases.files.move_files import MoveFilesUseCase
from fs_shell.use_cases.files.navigate import NavigateUseCase
from fs_shell.use_cases.files.remove_files import RemoveFilesUseCase
from fs_shell.use_cases.files.search_files import SearchFilesUseCase

HELP_LINES = [
    "ls [path]",
    "cd [path]",
    "pwd",
    "cp <src> <dst>",
    "mv <src> <dst>",
    "rm <path>",
    "mkdir <path>",
    "touch <file>",
    "search <pattern>",
    "chmod <octal> <path>",
    "exit",
]


@pytest.fixture
def use_cases():
    return {
        "navigate_uc": MagicMock(spec=NavigateUseCase),
        "list_files_uc": MagicMock(spec=ListFilesUseCase),
        "copy_files_uc": MagicMock(spec=CopyFilesUseCase),
        "move_files_uc": MagicMock(spec=MoveFilesUseCase),
        "remove_files_uc": MagicMock(spec=RemoveFilesUseCase),
        "make_directory_uc": MagicMock(spec=MakeDirectoryUseCase),
        "touch_file_uc": MagicMock(spec=TouchFileUseCase),
        "search_files_uc": MagicMock(spec=SearchFilesUseCase),
        "change_mode_uc": MagicMock(spec=ChangeModeUseCase),
    }


@pytest.fixture
def handler(use_cases, output, mock_logger):
    _, console = output
    return FilesCommandsHandler(**use_cases, console=console, logger=mock_logger)


def _dispatch(handler, raw):
    return handler.dispatch(CommandLine.parse(raw))


class TestFilesCommandsHandler:
    """Test cases for the FilesCommandsHandler."""

    def test_available_commands(self, handler):
        specs = {spec["name"]: spec for spec in handler.available_commands()}

        assert set(specs) == {
            "ls", "cd", "pwd", "cp", "mv", "rm", "mkdir",
            "touch", "search", "chmod", "exit", "help",
        }
        assert specs["cp"]["min_args"] == 3
        assert specs["rm"]["min_args"] == 2
        assert specs["ls"]["min_args"] == 1
        assert specs["help"]["usage"] is None

    def test_help_output(self, handler, output):
        stream, _ = output

        assert _dispatch(handler, "help") is True
        assert stream.getvalue().splitlines() == HELP_LINES

    def test_exit_stops(self, handler):
        assert _dispatch(handler, "exit") is False
        assert _dispatch(handler, "exit now") is False

    def test_pwd(self, handler, use_cases, output):
        stream, _ = output
        use_cases["navigate_uc"].current.return_value = "/some/where"

        _dispatch(handler, "pwd")

        assert stream.getvalue() == "/some/where\n"

    def test_ls_default_and_explicit(self, handler, use_cases, output):
        stream, _ = output
        use_cases["list_files_uc"].execute.return_value = ["a", "[b].txt"]

        _dispatch(handler, "ls")
        _dispatch(handler, "ls 'my dir'")

        assert use_cases["list_files_uc"].execute.call_args_list[0].args == (None,)
        assert use_cases["list_files_uc"].execute.call_args_list[1].args == ("my dir",)
        assert stream.getvalue() == "a\n[b].txt\na\n[b].txt\n"

    def test_cd_default(self, handler, use_cases):
        _dispatch(handler, "cd")
        _dispatch(handler, "cd /tmp")

        assert use_cases["navigate_uc"].change.call_args_list[0].args == (None,)
        assert use_cases["navigate_uc"].change.call_args_list[1].args == ("/tmp",)

    @pytest.mark.parametrize(
        "raw, use_case, expected",
        [
            ("cp a b", "copy_files_uc", ("a", "b")),
            ('mv "a b" c extra', "move_files_uc", ("a b", "c")),
            ("rm old", "remove_files_uc", ("old",)),
            ("mkdir foo/bar/baz", "make_directory_uc", ("foo/bar/baz",)),
            ("touch notes.txt", "touch_file_uc", ("notes.txt",)),
            ("chmod 755 run.sh", "change_mode_uc", ("755", "run.sh")),
        ],
    )
    def test_dispatch_arguments(self, handler, use_cases, raw, use_case, expected):
        assert _dispatch(handler, raw) is True

        use_cases[use_case].execute.assert_called_once_with(*expected)

    def test_search_prints_matches(self, handler, use_cases, output):
        stream, _ = output

        def _search(pattern, on_match):
            on_match("a/b/a_xyz_b.txt")
            return 1

        use_cases["search_files_uc"].execute.side_effect = _search

        _dispatch(handler, "search xyz ignored/path")

        assert stream.getvalue() == "a/b/a_xyz_b.txt\n"
        assert use_cases["search_files_uc"].execute.call_args.args[0] == "xyz"

    def test_unknown_command(self, handler, mock_logger):
        with pytest.raises(CommandError) as exc_info:
            _dispatch(handler, "frobnicate")

        assert exc_info.value.render() == "err"
        mock_logger.info.assert_called_once_with("Unknown command: frobnicate")

    @pytest.mark.parametrize(
        "raw", ["cp a", "mv a", "rm", "mkdir", "touch", "search", "chmod 755", 'rm ""']
    )
    def test_missing_arguments(self, handler, use_cases, raw):
        """Test that commands below their minimum argument count are generic errors."""
        with pytest.raises(CommandError):
            _dispatch(handler, raw)

        for name, use_case in use_cases.items():
            if name != "navigate_uc":
                use_case.execute.assert_not_called()
