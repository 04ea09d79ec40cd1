##############################################################################
# Copyright (c) Hammertime Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Hammertime.
##############################################################################

"""
Functions for loading flintlock MicroVM specs from JSON files.

A spec file can be used in place of `--id`/`--name`/`--namespace` flags. When
one is given, its values replace those flags entirely.
"""

import json
import logging
from typing import Dict, Tuple

from hammertime.exceptions import MissingScopeError, SpecFileError
from hammertime.microvm.selection import is_set


LOG = logging.getLogger("hammertime")


def load_spec_from_file(filepath: str) -> Dict:
    """
    Read the given JSON file and produce a MicroVMSpec dictionary.

    Args:
        filepath: The path to the JSON spec file.

    Returns:
        The parsed spec.

    Raises:
        SpecFileError: If the file can't be read, isn't valid JSON, or isn't a JSON object.
    """
    LOG.debug(f"Loading MicroVM spec from '{filepath}'.")
    try:
        with open(filepath, "r") as spec_file:
            spec = json.load(spec_file)
    except OSError as exc:
        raise SpecFileError(f"Could not read spec file '{filepath}': {exc}") from exc
    except json.JSONDecodeError as exc:
        raise SpecFileError(f"Could not parse spec file '{filepath}': {exc}") from exc

    if not isinstance(spec, dict):
        raise SpecFileError(f"Spec file '{filepath}' must contain a JSON object.")

    return spec


def process_file(filepath: str) -> Tuple[str, str, str]:
    """
    Open the given spec file and pull out the fields used to select a MicroVM.

    Args:
        filepath: The path to the JSON spec file.

    Returns:
        A tuple of `(uid, name, namespace)`. Missing values are empty strings.

    Raises:
        SpecFileError: If the file can't be loaded.
        MissingScopeError: If the file has no uid and lacks a name or a namespace.
    """
    spec = load_spec_from_file(filepath)

    uid = spec.get("uid") or ""
    name = spec.get("id") or ""
    namespace = spec.get("namespace") or ""

    if not is_set(uid) and not (is_set(name) and is_set(namespace)):
        raise MissingScopeError("required: uid or name/namespace")

    return uid, name, namespace
