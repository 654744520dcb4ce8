"""Tests for the command line entry point."""

from argparse import Namespace
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from main import print_description


def make_args(expression, **overrides):
    args = {
        "expression": expression,
        "scope": "full",
        "verbose": False,
        "twelve_hour": False,
        "alternate_dow": False,
    }
    args.update(overrides)
    return Namespace(**args)


class TestDescribeMode:
    """Test describing expressions from the command line."""

    def test_prints_description(self, capsys):
        """Test a valid expression is printed."""
        assert print_description(make_args("0 9 * * 1-5")) == 0
        assert capsys.readouterr().out.strip() == "At 09:00, Monday through Friday"

    def test_flags_become_options(self, capsys):
        """Test command line flags override the defaults."""
        args = make_args("0 0 12 ? * 7", twelve_hour=True, alternate_dow=True)

        assert print_description(args) == 0
        assert capsys.readouterr().out.strip() == "At 12:00PM, only on Sunday"

    def test_scope(self, capsys):
        """Test describing one part of an expression."""
        assert print_description(make_args("0 9 * * 1-5", scope="time_of_day")) == 0
        assert capsys.readouterr().out.strip() == "At 09:00"

    def test_invalid_expression(self, capsys):
        """Test invalid expressions exit with status 2."""
        assert print_description(make_args("0 24 * * *")) == 2

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Invalid hour" in captured.err
