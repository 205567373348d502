"""Tests for command parsing."""

import pytest

from sheettally.pipeline import ParsedCommand, parse_command


class TestParseCommand:
    """Test parse_command."""

    def test_parses_name_and_value(self):
        """Test a plain NAME/VALUE command."""
        command = parse_command("alice/42")

        assert command == ParsedCommand(name="ALICE", value="42")

    def test_name_is_trimmed_and_upper_cased(self):
        """Test that surrounding whitespace is removed from the name."""
        command = parse_command("  Bob Smith  /7")

        assert command.name == "BOB SMITH"
        assert command.value == "7"

    def test_value_keeps_leading_zeros(self):
        """Test the value stays the exact digit string."""
        command = parse_command("carol/007")

        assert command.value == "007"
        assert isinstance(command.value, str)

    def test_splits_at_last_slash(self):
        """Test names may themselves contain slashes."""
        command = parse_command("team a/b/15")

        assert command.name == "TEAM A/B"
        assert command.value == "15"

    @pytest.mark.parametrize(
        "text",
        [
            None,
            "",
            "alice",
            "alice 42",
            "alice/",
            "/42",
            "   /42",
            "alice/42x",
            "alice/4 2",
            "alice/42 ",
            "alice/-3",
            "alice/4.5",
            "alice/42\n",
            "ali\nce/42",
            "alice/٤٢",
        ],
    )
    def test_rejects_non_commands(self, text):
        """Test that anything other than NAME/DIGITS yields no match."""
        assert parse_command(text) is None
