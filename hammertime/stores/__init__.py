##############################################################################
# Copyright (c) Hammertime Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Hammertime.
##############################################################################

"""
Store infrastructure for Hammertime.

The `stores` package provides a single interface (`StoreBase`) for creating,
getting, listing, and deleting MicroVMs, along with its implementations.

Modules:
    store_base: Provides the abstract `StoreBase` class, the contract every store honours.
    flintlock_store: `FlintlockStore`, which talks to a flintlock server over its HTTP gateway.
    reference_store: `ReferenceStore`, an in-memory store used to validate resolution logic.
    store_factory: Contains `StoreFactory`, used to select and instantiate a store by name.
"""
