##############################################################################
# Copyright (c) Hammertime Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Hammertime.
##############################################################################

"""
Fixtures for files in this `cli/` test directory.
"""

from argparse import ArgumentParser, Namespace

import pytest
from pytest_mock import MockerFixture

from hammertime.cli.commands.command_entry_point import CommandEntryPoint
from hammertime.stores.reference_store import ReferenceStore
from tests.fixture_types import FixtureCallable, FixtureReferenceStore


@pytest.fixture
def create_parser() -> FixtureCallable:
    """
    A fixture to help create a parser for any command.

    Returns:
        A function that creates a parser.
    """

    def _create_parser(cmd: CommandEntryPoint) -> ArgumentParser:
        """
        Returns an `ArgumentParser` configured with the `cmd` command and its subcommands.

        Returns:
            Parser with the `cmd` command and its subcommands registered.
        """
        parser = ArgumentParser()
        subparsers = parser.add_subparsers(dest="main_command")
        cmd.add_parser(subparsers)
        return parser

    return _create_parser


@pytest.fixture
def cli_store(mocker: MockerFixture, reference_store: FixtureReferenceStore) -> FixtureReferenceStore:
    """
    Make every command module use the same in-memory store.

    Commands close the store when they're done, which is a no-op for the
    reference store, so the same instance can be inspected afterwards.

    Args:
        mocker: PyTest mocker fixture.
        reference_store: An empty in-memory store.

    Returns:
        The store the commands will use.
    """
    for module in ("create", "delete", "get", "list"):
        mocker.patch(f"hammertime.cli.commands.{module}.get_store", return_value=reference_store)
    return reference_store


@pytest.fixture
def command_args() -> FixtureCallable:
    """
    A fixture to build the `Namespace` a command's `process_command` receives.

    Returns:
        A function that takes overrides for the default arguments.
    """

    def _command_args(**overrides) -> Namespace:
        defaults = {
            "address": None,
            "token": None,
            "store": None,
            "uid": None,
            "name": None,
            "namespace": None,
            "file": None,
            "all": False,
            "quiet": False,
            "state": False,
            "public_key_path": None,
        }
        defaults.update(overrides)
        return Namespace(**defaults)

    return _command_args
