##############################################################################
# Copyright (c) Hammertime Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Hammertime.
##############################################################################

"""
The `microvm` package holds everything Hammertime knows about MicroVMs
independent of how they are stored or how the user asked for them.

Modules:
    data_models.py: Dataclasses for MicroVMs and their wire format.
    selection.py: The `SelectionDescriptor` built from a single command invocation.
    locator.py: Resolves a selection into the MicroVMs it refers to.
    bulk.py: Applies deletes across a resolved set while enforcing safety policy.
    spec_file.py: Loading MicroVM specs from JSON files.
    defaults.py: The default MicroVM template and its cloud-init data.
"""
