##############################################################################
# Copyright (c) Hammertime Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Hammertime.
##############################################################################

"""
Hammertime CLI Package.

This package defines the entry point parser for the `hammertime` CLI tool,
its subcommands, and the helpers they share.

Subpackages:
    commands: Contains all command implementations for the Hammertime CLI.

Modules:
    argparse_main: Sets up the top-level argument parser and integrates all
        registered CLI subcommands into the `hammertime` CLI interface.
    utils: Shared helpers for adding common arguments, building selections,
        and connecting to a store.
"""
