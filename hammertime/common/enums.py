##############################################################################
# Copyright (c) Hammertime Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Hammertime.
##############################################################################

"""This module provides enumerations for interfaces."""
from enum import Enum, IntEnum


__all__ = ("MicroVMState", "ReturnCode")


class ReturnCode(IntEnum):
    """
    Enum for Hammertime return codes.

    Attributes:
        OK (int): Indicates a successful operation. Numeric value: 0.
        ERROR (int): Indicates a general error occurred. Numeric value: 1.
    """

    OK: int = 0
    ERROR: int = 1


class MicroVMState(Enum):
    """
    Lifecycle states of a MicroVM as reported by the backend.

    Hammertime only ever reads these; the backend owns every transition.
    """

    PENDING = "PENDING"
    CREATED = "CREATED"
    FAILED = "FAILED"
    DELETING = "DELETING"
    DELETED = "DELETED"

    @classmethod
    def from_value(cls, value) -> "MicroVMState":
        """
        Convert a state as found on the wire into a `MicroVMState`.

        Flintlock serialises enums by name, but older gateways send the
        numeric value, so both are accepted. Missing values mean PENDING.

        Args:
            value: A state name, its numeric index, or None.

        Returns:
            The matching `MicroVMState`.

        Raises:
            ValueError: If `value` is not a known state.
        """
        if value is None or value == "":
            return cls.PENDING
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            try:
                return list(cls)[value]
            except IndexError as exc:
                raise ValueError(f"Unknown MicroVM state: {value}") from exc
        return cls(str(value).upper())
