##############################################################################
# Copyright (c) Hammertime Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Hammertime.
##############################################################################

"""
CLI module for deleting MicroVMs.

This module defines the `DeleteCommand` class, which implements the `delete`
subcommand. A delete by name and namespace that matches more than one MicroVM
only goes ahead when `--all` is given; otherwise the matches are listed and
nothing is deleted.
"""

import logging
from argparse import ArgumentParser, Namespace

from hammertime.cli.commands.command_entry_point import CommandEntryPoint
from hammertime.cli.utils import add_selection_arguments, add_store_arguments, get_selection_from_args, get_store
from hammertime.display import DELETE_ALL_HINT, display_matches
from hammertime.microvm.bulk import BulkOperationExecutor


LOG = logging.getLogger("hammertime")


class DeleteCommand(CommandEntryPoint):
    """
    Handles `delete` CLI command for deleting MicroVMs.

    Methods:
        add_parser: Adds the `delete` command to the CLI parser.
        process_command: Processes the CLI input and deletes the selected MicroVM(s).
    """

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `delete` command parser to the CLI argument parser.

        Parameters:
            subparsers: The subparsers object to which the `delete` command parser will be added.
        """
        delete: ArgumentParser = subparsers.add_parser("delete", help="delete a microvm")
        delete.set_defaults(func=self.process_command)
        add_store_arguments(delete)
        add_selection_arguments(delete)
        delete.add_argument(
            "--all",
            action="store_true",
            default=False,
            help="delete all microvms in the given namespace with the given name",
        )
        delete.add_argument(
            "-q",
            "--quiet",
            action="store_true",
            default=False,
            help="do not print the uids of deleted microvms",
        )

    def process_command(self, args: Namespace):
        """
        CLI command for deleting MicroVMs.

        Args:
            args: Parsed CLI arguments containing:\n
                - `uid`, `name`, `namespace`, `file`: The MicroVM selection.
                - `all`: If True, delete every MicroVM matching the name and namespace.
                - `quiet`: If True, don't print the deleted uids.

        Raises:
            MissingScopeError: If the selection doesn't narrow things down enough.
            Exception: Whatever stopped a delete part way through, after the
                uids deleted before it have been logged.
        """
        selection = get_selection_from_args(args)
        with get_store(args) as store:
            result = BulkOperationExecutor(store).delete(selection)

        if result.is_ambiguous:
            display_matches(result.candidates, selection.namespace, selection.name, hint=DELETE_ALL_HINT)
            return

        if not args.quiet:
            for uid in result.deleted:
                print(uid)

        if result.error is not None:
            if result.deleted:
                LOG.info(f"Deleted before the failure: {', '.join(result.deleted)}")
            raise result.error
