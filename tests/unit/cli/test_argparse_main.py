##############################################################################
# Copyright (c) Hammertime Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Hammertime.
##############################################################################

"""
Tests for the `argparse_main.py` module of the `cli/` directory.
"""

import pytest
from _pytest.capture import CaptureFixture

from hammertime import VERSION
from hammertime.cli.argparse_main import DEFAULT_LOG_LEVEL, HelpParser, build_main_parser


def test_help_parser_error(capsys: CaptureFixture):
    """
    Test that a usage error prints the message and the help, then exits with 2.

    Args:
        capsys: PyTest capsys fixture.
    """
    parser = HelpParser(prog="test")
    with pytest.raises(SystemExit) as excinfo:
        parser.error("something went wrong")
    assert excinfo.value.code == 2

    captured = capsys.readouterr()
    assert "error: something went wrong" in captured.err
    assert "usage: test" in captured.out


def test_build_main_parser_registers_commands():
    """
    Test that every command is reachable from the main parser.
    """
    parser = build_main_parser()
    for command in ("create", "delete", "get", "list"):
        args = parser.parse_args([command])
        assert callable(args.func)
        assert args.level == DEFAULT_LOG_LEVEL


def test_build_main_parser_log_level():
    """
    Test that the log level is read before the command.
    """
    args = build_main_parser().parse_args(["-lvl", "debug", "list"])
    assert args.level == "debug"


def test_build_main_parser_version(capsys: CaptureFixture):
    """
    Test that `--version` prints the package version.

    Args:
        capsys: PyTest capsys fixture.
    """
    with pytest.raises(SystemExit):
        build_main_parser().parse_args(["--version"])
    assert VERSION in capsys.readouterr().out


def test_build_main_parser_requires_command():
    """
    Test that leaving out the command is a usage error.
    """
    with pytest.raises(SystemExit) as excinfo:
        build_main_parser().parse_args([])
    assert excinfo.value.code == 2
