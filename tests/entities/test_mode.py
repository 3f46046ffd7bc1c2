"""
Tests for the Mode value object.
"""

import pytest

from fs_shell.entities.Mode import Mode
from fs_shell.exceptions import InvalidModeError


class TestMode:
    """Test cases for the Mode value object."""

    @pytest.mark.parametrize(
        "text, expected",
        [("755", 0o755), ("0644", 0o644), ("7", 0o7), ("7777", 0o7777), ("1", 1)],
    )
    def test_parse_valid(self, text, expected):
        """Test parsing well-formed octal strings."""
        assert int(Mode.parse(text)) == expected

    @pytest.mark.parametrize(
        "text", ["", "07555", "89a", "8", "-1", "+7", " 7", "0", "0000", "7a"]
    )
    def test_parse_invalid(self, text):
        """Test rejection of malformed, too long, or zero mode strings."""
        with pytest.raises(InvalidModeError):
            Mode.parse(text)

    def test_invalid_mode_renders_bad_mode(self):
        """Test the error line for an invalid mode."""
        with pytest.raises(InvalidModeError) as exc_info:
            Mode.parse("89a")

        assert exc_info.value.render() == "err: bad mode"

    def test_out_of_range_value(self):
        with pytest.raises(InvalidModeError):
            Mode(0o10000)

    def test_str_and_equality(self):
        assert str(Mode.parse("644")) == "0644"
        assert Mode.parse("0644") == Mode(0o644)
        assert repr(Mode(0o755)) == "Mode(0o755)"
