##############################################################################
# Copyright (c) Hammertime Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Hammertime.
##############################################################################

"""
This module houses dataclasses that define the format of the MicroVM data
exchanged with a flintlock server.
"""

import copy
import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Optional, Type, TypeVar

from hammertime.common.enums import MicroVMState


LOG = logging.getLogger("hammertime")
T = TypeVar("T", bound="BaseDataModel")

# Keys of a flintlock MicroVMSpec that are lifted out into MicroVM fields
IDENTITY_KEYS = ("id", "namespace", "uid")


@dataclass
class BaseDataModel(ABC):
    """
    A base class for dataclasses that provides common serialization and
    deserialization functionality.

    Subclasses decide what their dictionary form looks like by implementing
    `to_dict` and `from_dict`; `to_json` and `copy` build on those.

    Methods:
        to_dict: Convert the dataclass instance to a dictionary.
        to_json: Serialize the dataclass instance to a JSON string.
        from_dict (classmethod): Create an instance of the dataclass from a dictionary.
        copy: Return a deep, independent copy of this instance.
    """

    @abstractmethod
    def to_dict(self) -> Dict:
        """
        Convert the dataclass to a dictionary.

        Returns:
            The dataclass as a dictionary.
        """
        raise NotImplementedError("Subclasses of `BaseDataModel` must implement a `to_dict` method.")

    def to_json(self, indent: int = None) -> str:
        """
        Serialize the dataclass to a JSON string.

        Args:
            indent: Optional indentation level passed to `json.dumps`.

        Returns:
            The dataclass as a JSON string.
        """
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    @abstractmethod
    def from_dict(cls: Type[T], data: Dict) -> T:
        """
        Create an instance of the dataclass from a dictionary.

        Args:
            data: A dictionary to turn into an instance of this dataclass.

        Returns:
            An instance of the dataclass that called this.
        """
        raise NotImplementedError("Subclasses of `BaseDataModel` must implement a `from_dict` method.")

    def copy(self: T) -> T:
        """
        Return a deep copy of this instance so callers can't mutate shared state.

        Returns:
            A new instance equal to this one.
        """
        return copy.deepcopy(self)


@dataclass
class MicroVM(BaseDataModel):
    """
    A dataclass representing a single MicroVM.

    Only `uid`, `name`, and `namespace` take part in resolving which MicroVMs a
    command applies to. Everything else in the flintlock spec (vcpu, memory,
    kernel, volumes, interfaces, metadata) is kept as an opaque dictionary.

    Attributes:
        name: The user supplied name of the MicroVM (`spec.id` on the wire). Not unique.
        namespace: The user supplied namespace of the MicroVM. Not unique.
        uid: The globally unique identifier assigned by the store on creation.
            None until the MicroVM has been created.
        spec: The rest of the flintlock MicroVMSpec.
        state: The state most recently reported by the backend.
        version: The version of the MicroVM reported by the backend.

    Methods:
        to_spec: Build the flintlock MicroVMSpec dictionary for this MicroVM.
        from_spec (classmethod): Create a MicroVM from a flintlock MicroVMSpec dictionary.
        to_dict: Convert this MicroVM to the flintlock MicroVM wire format.
        from_dict (classmethod): Create a MicroVM from the flintlock MicroVM wire format.
    """

    name: str = ""
    namespace: str = ""
    uid: Optional[str] = None
    spec: Dict = field(default_factory=dict)
    state: MicroVMState = MicroVMState.PENDING
    version: int = 0

    def to_spec(self) -> Dict:
        """
        Build the flintlock MicroVMSpec dictionary for this MicroVM.

        Returns:
            The opaque spec with the identity fields merged back in.
        """
        spec = copy.deepcopy(self.spec)
        spec["id"] = self.name
        spec["namespace"] = self.namespace
        if self.uid is not None:
            spec["uid"] = self.uid
        return spec

    @classmethod
    def from_spec(cls, spec: Dict, state: MicroVMState = MicroVMState.PENDING, version: int = 0) -> "MicroVM":
        """
        Create a MicroVM from a flintlock MicroVMSpec dictionary.

        Args:
            spec: The MicroVMSpec, e.g. as loaded from a JSON spec file.
            state: The state to record for the MicroVM.
            version: The version to record for the MicroVM.

        Returns:
            A new MicroVM instance.
        """
        spec = spec or {}
        return cls(
            name=spec.get("id") or "",
            namespace=spec.get("namespace") or "",
            uid=spec.get("uid") or None,
            spec={key: copy.deepcopy(val) for key, val in spec.items() if key not in IDENTITY_KEYS},
            state=state,
            version=version,
        )

    def to_dict(self) -> Dict:
        """
        Convert this MicroVM to the flintlock MicroVM wire format.

        Returns:
            A dictionary of the form `{"version": ..., "spec": {...}, "status": {"state": ...}}`.
        """
        return {
            "version": self.version,
            "spec": self.to_spec(),
            "status": {"state": self.state.value},
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "MicroVM":
        """
        Create a MicroVM from the flintlock MicroVM wire format.

        Args:
            data: A dictionary with `spec`, and optionally `status` and `version`, keys.

        Returns:
            A new MicroVM instance.
        """
        status = data.get("status") or {}
        return cls.from_spec(
            data.get("spec") or {},
            state=MicroVMState.from_value(status.get("state")),
            version=int(data.get("version") or 0),
        )

    def __str__(self) -> str:
        """Return a user-friendly string representation of the MicroVM."""
        return f"MicroVM {self.namespace}/{self.name} (uid: {self.uid}, state: {self.state.value})"
