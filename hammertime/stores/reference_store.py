##############################################################################
# Copyright (c) Hammertime Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Hammertime.
##############################################################################

"""
An in-memory implementation of `StoreBase`.

The `ReferenceStore` stands in for a flintlock server so that resolution and
bulk-deletion logic can be exercised deterministically without a live backend.
It owns its collection of MicroVMs and guards it with a lock for the duration
of every call.
"""

import logging
import threading
import uuid
from typing import List

from hammertime.common.enums import MicroVMState
from hammertime.exceptions import MicroVMNotFoundError
from hammertime.microvm.data_models import MicroVM
from hammertime.microvm.selection import is_set
from hammertime.stores.store_base import StoreBase


LOG = logging.getLogger(__name__)


def matches_filter(microvm: MicroVM, name: str, namespace: str) -> bool:
    """
    Decide whether a MicroVM should be returned by a list call.

    Args:
        microvm: The MicroVM to check.
        name: The name filter. Ignored unless `namespace` is set.
        namespace: The namespace filter.

    Returns:
        True if the MicroVM matches the filter, False otherwise.
    """
    if not is_set(namespace):
        return True
    if microvm.namespace != namespace:
        return False
    return not is_set(name) or microvm.name == name


class ReferenceStore(StoreBase):
    """
    In-memory MicroVM store.

    Attributes:
        strict_delete: If True, deleting an unknown uid raises `MicroVMNotFoundError`
            like a real server. If False, it succeeds silently.

    Methods:
        create: Assign a uid to a MicroVM and store it.
        get: Retrieve a MicroVM by uid.
        list: Retrieve the MicroVMs matching a name/namespace filter.
        delete: Remove a MicroVM by uid.
    """

    def __init__(self, strict_delete: bool = True):
        """
        Initialize an empty store.

        Args:
            strict_delete: Whether deleting an unknown uid is an error.
        """
        self.strict_delete: bool = strict_delete
        self._microvms: List[MicroVM] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._microvms)

    def create(self, microvm: MicroVM) -> MicroVM:
        """
        Store a copy of the MicroVM under a freshly generated uid.

        Args:
            microvm: The MicroVM to create.

        Returns:
            A copy of the stored MicroVM with its uid and a CREATED state.
        """
        stored = microvm.copy()
        stored.uid = str(uuid.uuid4())
        stored.state = MicroVMState.CREATED

        with self._lock:
            self._microvms.append(stored)

        LOG.debug(f"Created MicroVM {stored.namespace}/{stored.name} with uid '{stored.uid}'.")
        return stored.copy()

    def get(self, uid: str) -> MicroVM:
        """
        Retrieve a copy of the MicroVM with this uid.

        Args:
            uid: The uid to look up.

        Returns:
            A copy of the matching MicroVM.

        Raises:
            MicroVMNotFoundError: If no MicroVM has this uid.
        """
        with self._lock:
            for microvm in self._microvms:
                if microvm.uid == uid:
                    return microvm.copy()

        raise MicroVMNotFoundError(f"MicroVM with uid '{uid}' not found.")

    def list(self, name: str = "", namespace: str = "") -> List[MicroVM]:
        """
        Retrieve copies of the MicroVMs matching the filter, in insertion order.

        Args:
            name: The name filter. Ignored unless `namespace` is set.
            namespace: The namespace filter.

        Returns:
            A new list of matching MicroVMs.
        """
        with self._lock:
            return [microvm.copy() for microvm in self._microvms if matches_filter(microvm, name, namespace)]

    def delete(self, uid: str):
        """
        Remove the first MicroVM with this uid.

        Args:
            uid: The uid of the MicroVM to delete.

        Raises:
            MicroVMNotFoundError: If no MicroVM has this uid and `strict_delete` is set.
        """
        with self._lock:
            for i, microvm in enumerate(self._microvms):
                if microvm.uid == uid:
                    del self._microvms[i]
                    LOG.debug(f"Deleted MicroVM with uid '{uid}'.")
                    return

        if self.strict_delete:
            raise MicroVMNotFoundError(f"MicroVM with uid '{uid}' not found.")
        LOG.debug(f"No MicroVM with uid '{uid}' to delete; ignoring.")
