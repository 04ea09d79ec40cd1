##############################################################################
# Copyright (c) Hammertime Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Hammertime.
##############################################################################

"""
Common pieces shared across Hammertime.

Modules:
    enums.py: Enumerations for return codes and MicroVM states.
"""
