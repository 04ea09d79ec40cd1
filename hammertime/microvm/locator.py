##############################################################################
# Copyright (c) Hammertime Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Hammertime.
##############################################################################

"""
This module defines the `ResourceLocator`, which turns what a user typed into
the MicroVMs it refers to.

Resolution follows a fixed precedence:

1. A uid selects exactly that MicroVM (name and namespace are ignored). An
   unknown uid is an error.
2. Otherwise the store is asked to list by name/namespace, and whatever comes
   back (none, one, or many) is the result.

The locator has no side effects and never retries; errors from the store
propagate unchanged.
"""

import logging
from typing import List

from hammertime.microvm.data_models import MicroVM
from hammertime.microvm.selection import SelectionDescriptor
from hammertime.stores.store_base import StoreBase


LOG = logging.getLogger("hammertime")


class ResourceLocator:
    """
    Resolves a `SelectionDescriptor` into the MicroVMs it selects.

    Attributes:
        store: The store to query.

    Methods:
        resolve: Return the MicroVMs matching a selection.
    """

    def __init__(self, store: StoreBase):
        """
        Initialize the locator.

        Args:
            store: The store to query.
        """
        self.store: StoreBase = store

    def resolve(self, selection: SelectionDescriptor) -> List[MicroVM]:
        """
        Return the MicroVMs matching a selection.

        Args:
            selection: What the user asked for.

        Returns:
            The matching MicroVMs, in the order the store returned them.

        Raises:
            MicroVMNotFoundError: If a uid was given and no MicroVM has it.
        """
        if selection.has_uid:
            LOG.debug(f"Resolving MicroVM by uid '{selection.uid}'.")
            return [self.store.get(selection.uid)]

        LOG.debug(f"Resolving MicroVMs under '{selection.describe()}'.")
        matches = self.store.list(name=selection.name or "", namespace=selection.namespace or "")
        LOG.debug(f"Found {len(matches)} MicroVM(s) under '{selection.describe()}'.")
        return matches
