##############################################################################
# Copyright (c) Hammertime Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Hammertime.
##############################################################################

"""
Store factory for selecting and instantiating MicroVM stores in Hammertime.

Hammertime ships two stores: `flintlock` (alias `http`), which talks to a
flintlock server, and `reference` (alias `memory`), which keeps MicroVMs in
memory. Asking for anything else raises `StoreNotSupportedError`.
"""

import logging
from typing import Dict, List, Type

from hammertime.exceptions import StoreNotSupportedError
from hammertime.stores.flintlock_store import FlintlockStore
from hammertime.stores.reference_store import ReferenceStore
from hammertime.stores.store_base import StoreBase


LOG = logging.getLogger("hammertime")


class StoreFactory:
    """
    Maps store names and aliases to `StoreBase` implementations.

    Attributes:
        _stores: Canonical store names mapped to their classes.
        _aliases: Aliases mapped to canonical store names.

    Methods:
        register: Add a store class under a name and optional aliases.
        get_canonical_name: Resolve an alias to its store name.
        list_available: Return the canonical store names.
        create: Instantiate a store by name or alias.
    """

    def __init__(self):
        self._stores: Dict[str, Type[StoreBase]] = {}
        self._aliases: Dict[str, str] = {}

        self.register("flintlock", FlintlockStore, aliases=["http"])
        self.register("reference", ReferenceStore, aliases=["memory"])

    def register(self, name: str, store_class: Type[StoreBase], aliases: List[str] = None):
        """
        Add a store class under `name` and any `aliases`.

        Args:
            name: The canonical name of the store.
            store_class: A `StoreBase` subclass.
            aliases: Other names the store can be asked for by.

        Raises:
            TypeError: If `store_class` is not a `StoreBase` subclass.
        """
        if not isinstance(store_class, type) or not issubclass(store_class, StoreBase):
            raise TypeError(f"{store_class} must inherit from StoreBase")

        self._stores[name] = store_class
        for alias in aliases or []:
            self._aliases[alias] = name

    def get_canonical_name(self, store_type: str) -> str:
        """
        Resolve an alias to the store name it stands for.

        Args:
            store_type: A store name or alias.

        Returns:
            The canonical name, or `store_type` unchanged if it isn't an alias.
        """
        return self._aliases.get(store_type, store_type)

    def list_available(self) -> List[str]:
        """
        Return the canonical names of the registered stores.
        """
        return list(self._stores)

    def create(self, store_type: str, config: Dict = None) -> StoreBase:
        """
        Instantiate a store by name or alias.

        Args:
            store_type: The store name or alias.
            config: Keyword arguments for the store's constructor.

        Returns:
            A new store instance.

        Raises:
            StoreNotSupportedError: If no store is registered under `store_type`.
            ValueError: If the store's constructor rejects `config`.
        """
        name = self.get_canonical_name(store_type)
        store_class = self._stores.get(name)
        if store_class is None:
            raise StoreNotSupportedError(
                f"Store '{store_type}' is not supported. Available stores: {', '.join(self.list_available())}"
            )

        try:
            store = store_class(**(config or {}))
        except TypeError as exc:
            raise ValueError(f"Failed to create store '{name}': {exc}") from exc

        LOG.debug(f"Created '{name}' store.")
        return store


store_factory = StoreFactory()
