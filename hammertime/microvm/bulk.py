##############################################################################
# Copyright (c) Hammertime Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Hammertime.
##############################################################################

"""
This module defines the `BulkOperationExecutor`, which deletes the MicroVMs a
selection resolves to while enforcing Hammertime's safety policy.

The policy, evaluated in order:

1. A uid deletes exactly that MicroVM, whatever `apply_to_all` says.
2. A name always needs a namespace. Without `apply_to_all`, both a name
   and a namespace are required.
3. The selection is resolved through a `ResourceLocator`.
4. Without `apply_to_all`, more than one match deletes nothing and the
   matches are handed back as candidates.
5. Otherwise each match is deleted in list order. The first failing delete
   stops the batch; MicroVMs already deleted stay deleted.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from hammertime.exceptions import MissingScopeError
from hammertime.microvm.data_models import MicroVM
from hammertime.microvm.locator import ResourceLocator
from hammertime.microvm.selection import SelectionDescriptor
from hammertime.stores.store_base import StoreBase


LOG = logging.getLogger("hammertime")


@dataclass
class DeleteResult:
    """
    The outcome of a bulk delete.

    Attributes:
        deleted: The uids that were deleted, in order.
        candidates: The MicroVMs that matched an ambiguous selection. Only set
            when nothing was deleted because of the disambiguation guard.
        error: The exception raised by the delete call that stopped the batch, if any.
    """

    deleted: List[str] = field(default_factory=list)
    candidates: List[MicroVM] = field(default_factory=list)
    error: Optional[Exception] = None

    @property
    def is_ambiguous(self) -> bool:
        """True if the disambiguation guard stopped the delete."""
        return bool(self.candidates)

    @property
    def candidate_uids(self) -> List[str]:
        """The uids of the candidate MicroVMs."""
        return [candidate.uid for candidate in self.candidates]


def check_scope(selection: SelectionDescriptor):
    """
    Make sure a selection without a uid is scoped enough to delete from.

    Args:
        selection: The selection to check.

    Raises:
        MissingScopeError: If a name is given without a namespace, or if
            `apply_to_all` is unset and the name or namespace is missing.
    """
    if selection.has_uid:
        return

    if selection.has_name and not selection.has_namespace:
        raise MissingScopeError("required: --namespace")

    if selection.apply_to_all:
        return

    missing = []
    if not selection.has_namespace:
        missing.append("--namespace")
    if not selection.has_name:
        missing.append("--name")

    if missing:
        raise MissingScopeError(f"required: {', '.join(missing)}")


class BulkOperationExecutor:
    """
    Deletes the MicroVMs a selection resolves to.

    Attributes:
        store: The store to delete from.
        locator: The locator used to resolve selections.

    Methods:
        delete: Apply the delete policy to a selection.
    """

    def __init__(self, store: StoreBase, locator: ResourceLocator = None):
        """
        Initialize the executor.

        Args:
            store: The store to delete from.
            locator: The locator used to resolve selections. Defaults to one
                over `store`.
        """
        self.store: StoreBase = store
        self.locator: ResourceLocator = locator or ResourceLocator(store)

    def _delete_uids(self, uids: List[str]) -> DeleteResult:
        """
        Delete MicroVMs one at a time, stopping at the first failure.

        Args:
            uids: The uids to delete, in order.

        Returns:
            A `DeleteResult` with the uids that were deleted and the error
            that stopped the batch, if any.
        """
        result = DeleteResult()
        for uid in uids:
            LOG.debug(f"Deleting MicroVM with uid '{uid}'.")
            try:
                self.store.delete(uid)
            except Exception as exc:  # pylint: disable=broad-exception-caught
                # Handed back untouched so the caller can report what succeeded first
                LOG.debug(f"Deleting MicroVM '{uid}' failed after {len(result.deleted)} deletion(s): {exc}")
                result.error = exc
                return result
            result.deleted.append(uid)
        return result

    def delete(self, selection: SelectionDescriptor) -> DeleteResult:
        """
        Apply the delete policy to a selection.

        Args:
            selection: What the user asked to delete.

        Returns:
            A `DeleteResult`. Either `candidates` is set (nothing was deleted),
            or `deleted` lists what was deleted and `error` holds the failure
            that stopped the batch, if any.

        Raises:
            MissingScopeError: If the selection isn't scoped enough.
        """
        if selection.has_uid:
            return self._delete_uids([selection.uid])

        check_scope(selection)

        matches = self.locator.resolve(selection)

        if not selection.apply_to_all and len(matches) > 1:
            LOG.info(f"{len(matches)} MicroVMs match '{selection.describe()}'; refusing to delete without --all.")
            return DeleteResult(candidates=matches)

        if not matches:
            LOG.info(f"No MicroVMs found under '{selection.describe()}'; nothing to delete.")

        return self._delete_uids([microvm.uid for microvm in matches])
