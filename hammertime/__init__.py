##############################################################################
# Copyright (c) Hammertime Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Hammertime.
##############################################################################

"""
Hammertime: a basic command-line client to flintlock.

This module contains the source code for Hammertime.
"""

__version__ = "0.1.0"
VERSION = __version__
