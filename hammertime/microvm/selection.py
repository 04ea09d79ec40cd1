##############################################################################
# Copyright (c) Hammertime Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Hammertime.
##############################################################################

"""
Defines the `SelectionDescriptor`, the description of which MicroVM(s) a single
command invocation refers to.
"""

from dataclasses import dataclass
from typing import Optional


def is_set(value: Optional[str]) -> bool:
    """
    Check whether a selection value was actually supplied.

    Args:
        value: The value to check.

    Returns:
        True if `value` is a non-empty string, False otherwise.
    """
    return bool(value)


@dataclass(frozen=True)
class SelectionDescriptor:
    """
    What the user asked a command to operate on.

    Attributes:
        uid: The uid of a single MicroVM. Takes precedence over everything else.
        name: The name to filter on. Only applied together with `namespace`.
        namespace: The namespace to filter on.
        apply_to_all: Allow a destructive operation to act on every match.
    """

    uid: Optional[str] = None
    name: Optional[str] = None
    namespace: Optional[str] = None
    apply_to_all: bool = False

    @property
    def has_uid(self) -> bool:
        """True if a uid was supplied."""
        return is_set(self.uid)

    @property
    def has_name(self) -> bool:
        """True if a name was supplied."""
        return is_set(self.name)

    @property
    def has_namespace(self) -> bool:
        """True if a namespace was supplied."""
        return is_set(self.namespace)

    def describe(self) -> str:
        """
        Describe the filter part of this selection for messages.

        Returns:
            A string of the form `namespace/name`.
        """
        return f"{self.namespace or ''}/{self.name or ''}"
