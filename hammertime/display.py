##############################################################################
# Copyright (c) Hammertime Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Hammertime.
##############################################################################

"""
Functions for writing command output to stdout.

Logs go to stderr, so everything printed here is the command's actual result.
"""

import json
from typing import Any, List

from hammertime.microvm.data_models import MicroVM


DELETE_ALL_HINT = "To delete all microvms in this list, re-run command with `--all`."


def pretty_print(response: Any):
    """
    Print a response as indented JSON.

    Args:
        response: A JSON serializable object, or a `MicroVM` / list of `MicroVM`s.
    """
    if isinstance(response, MicroVM):
        print(response.to_json(indent=2))
        return
    if isinstance(response, list):
        response = [item.to_dict() if isinstance(item, MicroVM) else item for item in response]
    print(json.dumps(response, indent=2))


def display_microvm(microvm: MicroVM, state_only: bool = False):
    """
    Print a single MicroVM, or just its state.

    Args:
        microvm: The MicroVM to print.
        state_only: If True only print the state string.
    """
    if state_only:
        print(microvm.state.value)
    else:
        pretty_print(microvm)


def display_matches(microvms: List[MicroVM], namespace: str, name: str, hint: str = None):
    """
    Print how many MicroVMs matched a filter followed by their uids.

    Args:
        microvms: The MicroVMs that matched.
        namespace: The namespace that was searched.
        name: The name that was searched.
        hint: Optional line to print after the uids.
    """
    print(f"{len(microvms)} MicroVMs found under {namespace or ''}/{name or ''}:")
    for microvm in microvms:
        print(microvm.uid)
    if hint:
        print(f"\n{hint}")
