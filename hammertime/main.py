##############################################################################
# Copyright (c) Hammertime Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Hammertime.
##############################################################################

"""
Main entry point into Hammertime's codebase.
"""

import logging
import sys
import traceback

from hammertime.cli.argparse_main import build_main_parser
from hammertime.common.enums import ReturnCode
from hammertime.log_formatter import setup_logging


LOG = logging.getLogger("hammertime")


def main():
    """
    Entry point for the Hammertime command-line interface (CLI) operations.

    This function sets up the argument parser, handles command-line arguments,
    initializes logging, and executes the appropriate function based on the
    provided command. Any error raised by a command is logged and turned into
    a non-zero exit code.
    """
    parser = build_main_parser()
    if len(sys.argv) == 1:
        parser.print_help(sys.stdout)
        return ReturnCode.ERROR
    args = parser.parse_args()

    setup_logging(logger=LOG, log_level=args.level.upper(), colors=True)

    try:
        args.func(args)
        # Being at the literal top of the program stack, a broad except is ok here.
    except Exception as excpt:  # pylint: disable=broad-except
        LOG.debug(traceback.format_exc())
        LOG.error(str(excpt))
        sys.exit(ReturnCode.ERROR)

    sys.exit(ReturnCode.OK)


if __name__ == "__main__":
    main()
