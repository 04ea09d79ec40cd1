##############################################################################
# Copyright (c) Hammertime Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Hammertime.
##############################################################################

"""
This module defines the abstract base class for all MicroVM store implementations
in Hammertime.

This module provides the `StoreBase` class, which outlines the required interface for
creating, retrieving, listing, and deleting MicroVMs held by a remote service. All
concrete stores (the flintlock HTTP client and the in-memory reference store) must
inherit from this class and implement its abstract methods.

Every implementation must honour the same list filtering rules:

- name and namespace both set: MicroVMs matching both exactly.
- namespace set, name empty: every MicroVM in that namespace.
- namespace empty: every MicroVM, whatever the name. Namespaces are the
  top-level scoping unit, so a name on its own does not filter anything.
"""

from abc import ABC, abstractmethod
from typing import List

from hammertime.microvm.data_models import MicroVM


class StoreBase(ABC):
    """
    Base class for all MicroVM stores supported in Hammertime.

    Methods:
        create: Create a MicroVM and return it with its assigned uid.
        get: Retrieve a MicroVM by uid.
        list: Retrieve the MicroVMs matching a name/namespace filter.
        delete: Delete a MicroVM by uid.
        close: Release any resources held by the store.
    """

    @abstractmethod
    def create(self, microvm: MicroVM) -> MicroVM:
        """
        Create a MicroVM.

        Args:
            microvm: The MicroVM to create. Its `uid` is ignored.

        Returns:
            The stored MicroVM, including the uid assigned to it.
        """
        raise NotImplementedError("Subclasses of `StoreBase` must implement a `create` method.")

    @abstractmethod
    def get(self, uid: str) -> MicroVM:
        """
        Retrieve a MicroVM by its uid.

        Args:
            uid: The uid of the MicroVM to retrieve.

        Returns:
            The MicroVM with this uid.

        Raises:
            MicroVMNotFoundError: If no MicroVM has this uid.
        """
        raise NotImplementedError("Subclasses of `StoreBase` must implement a `get` method.")

    @abstractmethod
    def list(self, name: str = "", namespace: str = "") -> List[MicroVM]:
        """
        Retrieve every MicroVM matching the filter.

        Args:
            name: The name to filter on. Only applied when `namespace` is set.
            namespace: The namespace to filter on.

        Returns:
            A new list of matching MicroVMs, in store order.
        """
        raise NotImplementedError("Subclasses of `StoreBase` must implement a `list` method.")

    @abstractmethod
    def delete(self, uid: str):
        """
        Delete a MicroVM by its uid.

        Args:
            uid: The uid of the MicroVM to delete.
        """
        raise NotImplementedError("Subclasses of `StoreBase` must implement a `delete` method.")

    def close(self):
        """
        Release any resources held by the store. Does nothing by default.
        """

    def __enter__(self) -> "StoreBase":
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
