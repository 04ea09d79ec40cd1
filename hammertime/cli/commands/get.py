##############################################################################
# Copyright (c) Hammertime Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Hammertime.
##############################################################################

"""
CLI module for showing MicroVMs.

This module defines the `GetCommand` class, which implements the `get`
subcommand.
"""

import logging
from argparse import ArgumentParser, Namespace

from hammertime.cli.commands.command_entry_point import CommandEntryPoint
from hammertime.cli.utils import add_selection_arguments, add_store_arguments, get_selection_from_args, get_store
from hammertime.display import display_matches, display_microvm
from hammertime.exceptions import MicroVMNotFoundError
from hammertime.microvm.locator import ResourceLocator


LOG = logging.getLogger("hammertime")


class GetCommand(CommandEntryPoint):
    """
    Handles `get` CLI command for showing a MicroVM.

    Methods:
        add_parser: Adds the `get` command to the CLI parser.
        process_command: Processes the CLI input and prints the matching MicroVM(s).
    """

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `get` command parser to the CLI argument parser.

        Parameters:
            subparsers: The subparsers object to which the `get` command parser will be added.
        """
        get: ArgumentParser = subparsers.add_parser("get", help="get a microvm")
        get.set_defaults(func=self.process_command)
        add_store_arguments(get)
        add_selection_arguments(get)
        get.add_argument(
            "-s",
            "--state",
            action="store_true",
            default=False,
            help="print only the state of the microvm",
        )

    def process_command(self, args: Namespace):
        """
        CLI command for showing a MicroVM.

        A single match is printed in full (or only its state with `--state`).
        When several MicroVMs match, their uids are listed instead.

        Args:
            args: Parsed CLI arguments.

        Raises:
            MicroVMNotFoundError: If nothing matches the selection.
        """
        selection = get_selection_from_args(args)
        with get_store(args) as store:
            matches = ResourceLocator(store).resolve(selection)

        if not matches:
            raise MicroVMNotFoundError(f"MicroVM {selection.name or ''}/{selection.namespace or ''} not found")

        if len(matches) == 1:
            display_microvm(matches[0], state_only=args.state)
        else:
            display_matches(matches, selection.namespace, selection.name)
