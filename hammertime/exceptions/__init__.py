##############################################################################
# Copyright (c) Hammertime Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Hammertime.
##############################################################################

"""
Module of all Hammertime-specific exception types.
"""

__all__ = (
    "MicroVMNotFoundError",
    "MissingScopeError",
    "SpecFileError",
    "StoreNotSupportedError",
    "TransportError",
)


class MicroVMNotFoundError(Exception):
    """
    Exception to signal that no MicroVM matches a lookup.
    """


class MissingScopeError(Exception):
    """
    Exception to signal that an operation was not given enough
    identifying information (neither a uid nor a full name/namespace).
    """


class TransportError(Exception):
    """
    Exception for failures talking to the remote store (connectivity
    problems or a rejection from the server).

    Attributes:
        status_code: The HTTP status code returned by the server, if any.
    """

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code


class SpecFileError(Exception):
    """
    Exception to signal that a MicroVM spec file (or a file it refers to)
    could not be read or parsed.
    """


class StoreNotSupportedError(Exception):
    """
    Exception to signal that the requested store implementation is not supported.
    """
