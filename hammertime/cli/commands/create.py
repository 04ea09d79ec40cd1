##############################################################################
# Copyright (c) Hammertime Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Hammertime.
##############################################################################

"""
CLI module for creating MicroVMs.

This module defines the `CreateCommand` class, which implements the `create`
subcommand. Without a spec file the MicroVM is built from the default
template; with one, the file's spec is sent as-is.
"""

import logging
from argparse import ArgumentParser, Namespace

from hammertime.cli.commands.command_entry_point import CommandEntryPoint
from hammertime.cli.utils import add_selection_arguments, add_store_arguments, get_store
from hammertime.display import pretty_print
from hammertime.microvm.data_models import MicroVM
from hammertime.microvm.defaults import DEFAULT_NAME, DEFAULT_NAMESPACE, new_microvm
from hammertime.microvm.selection import is_set
from hammertime.microvm.spec_file import load_spec_from_file


LOG = logging.getLogger("hammertime")


class CreateCommand(CommandEntryPoint):
    """
    Handles `create` CLI command for creating a new MicroVM.

    Methods:
        add_parser: Adds the `create` command to the CLI parser.
        process_command: Processes the CLI input and creates the MicroVM.
    """

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `create` command parser to the CLI argument parser.

        Parameters:
            subparsers: The subparsers object to which the `create` command parser will be added.
        """
        create: ArgumentParser = subparsers.add_parser("create", help="create a microvm")
        create.set_defaults(func=self.process_command)
        add_store_arguments(create)
        add_selection_arguments(
            create, with_id=False, name_default=DEFAULT_NAME, namespace_default=DEFAULT_NAMESPACE
        )
        create.add_argument(
            "-k",
            "--public-key-path",
            dest="public_key_path",
            type=str,
            default=None,
            help="path to a public ssh key to add to the microvm's root user",
        )
        create.add_argument(
            "-q",
            "--quiet",
            action="store_true",
            default=False,
            help="do not print the created microvm",
        )

    def build_microvm(self, args: Namespace) -> MicroVM:
        """
        Build the MicroVM to create from the parsed arguments.

        Args:
            args: Parsed CLI arguments.

        Returns:
            The MicroVM loaded from `--file` if one was given, else the default template.
        """
        if is_set(args.file):
            LOG.debug(f"Loading MicroVM spec from '{args.file}'.")
            return MicroVM.from_spec(load_spec_from_file(args.file))
        return new_microvm(name=args.name, namespace=args.namespace, ssh_key_path=args.public_key_path)

    def process_command(self, args: Namespace):
        """
        CLI command for creating a MicroVM.

        Args:
            args: Parsed CLI arguments containing:\n
                - `file`: Optional spec file to create the MicroVM from.
                - `name` / `namespace`: Identity for the default template.
                - `public_key_path`: Optional SSH key for the default template.
                - `quiet`: If True, don't print the created MicroVM.
        """
        microvm = self.build_microvm(args)
        with get_store(args) as store:
            created = store.create(microvm)
        LOG.info(f"Created MicroVM {created.namespace}/{created.name} with uid '{created.uid}'.")

        if not args.quiet:
            pretty_print(created)
