##############################################################################
# Copyright (c) Hammertime Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Hammertime.
##############################################################################

"""
CLI module for listing MicroVMs.
"""

import logging
from argparse import ArgumentParser, Namespace

from hammertime.cli.commands.command_entry_point import CommandEntryPoint
from hammertime.cli.utils import add_selection_arguments, add_store_arguments, get_store
from hammertime.display import pretty_print


LOG = logging.getLogger("hammertime")


class ListCommand(CommandEntryPoint):
    """
    Handles `list` CLI command for listing MicroVMs.

    Methods:
        add_parser: Adds the `list` command to the CLI parser.
        process_command: Processes the CLI input and prints the MicroVMs found.
    """

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `list` command parser to the CLI argument parser.

        Parameters:
            subparsers: The subparsers object to which the `list` command parser will be added.
        """
        list_parser: ArgumentParser = subparsers.add_parser("list", help="list microvms")
        list_parser.set_defaults(func=self.process_command)
        add_store_arguments(list_parser)
        add_selection_arguments(list_parser, with_id=False, with_file=False)

    def process_command(self, args: Namespace):
        """
        CLI command for listing MicroVMs.

        Args:
            args: Parsed CLI arguments containing the optional `name` and `namespace` filters.
        """
        with get_store(args) as store:
            microvms = store.list(name=args.name or "", namespace=args.namespace or "")
        LOG.debug(f"Found {len(microvms)} MicroVMs.")
        pretty_print(microvms)
