##############################################################################
# Copyright (c) Hammertime Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Hammertime.
##############################################################################

"""
Hammertime CLI Commands Package.

Each module in this package holds the argument parsing and logic for one
`hammertime` command, built around the `CommandEntryPoint` interface.

Modules:
    command_entry_point: Defines the abstract base class `CommandEntryPoint` for all CLI commands.
    create: Implements the `create` command for creating a MicroVM.
    delete: Implements the `delete` command for deleting one or many MicroVMs.
    get: Implements the `get` command for showing a MicroVM or its state.
    list: Implements the `list` command for listing MicroVMs.
"""

from hammertime.cli.commands.create import CreateCommand
from hammertime.cli.commands.delete import DeleteCommand
from hammertime.cli.commands.get import GetCommand
from hammertime.cli.commands.list import ListCommand


# Keep these in alphabetical order
ALL_COMMANDS = [
    CreateCommand(),
    DeleteCommand(),
    GetCommand(),
    ListCommand(),
]
