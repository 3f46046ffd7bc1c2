from fs_shell.entities.CommandLine import CommandLine


def test_parse_splits_name_and_args():
    line = CommandLine.parse('cp "a b" dest')

    assert line.name == "cp"
    assert line.args == ("a b", "dest")
    assert line.argc == 3


def test_blank_line():
    line = CommandLine.parse("   \t ")

    assert line.is_blank
    assert line.name == ""
    assert line.argc == 0


def test_arg_default():
    line = CommandLine.parse("ls")

    assert line.arg(1) is None
    assert line.arg(1, "/") == "/"
    assert CommandLine.parse("ls sub").arg(1) == "sub"
