##############################################################################
# Copyright (c) Hammertime Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Hammertime.
##############################################################################

"""
Utility functions to support Hammertime CLI command handlers.

Every command that talks to flintlock shares the same handful of arguments
(where the server is, how to authenticate, which MicroVM(s) to act on). The
helpers here add those arguments to a parser and turn the parsed values into
a store and a `SelectionDescriptor`.
"""

import logging
from argparse import ArgumentParser, Namespace
from typing import Dict

from hammertime.config import configfile
from hammertime.microvm.selection import SelectionDescriptor, is_set
from hammertime.microvm.spec_file import process_file
from hammertime.stores.flintlock_store import DEFAULT_TIMEOUT
from hammertime.stores.store_base import StoreBase
from hammertime.stores.store_factory import store_factory


LOG = logging.getLogger("hammertime")


def add_store_arguments(parser: ArgumentParser):
    """
    Add the arguments that decide which store to use and how to reach it.

    Args:
        parser: The command parser to add the arguments to.
    """
    parser.add_argument(
        "-a",
        "--address",
        type=str,
        default=None,
        help="flintlock server address + port [Default: taken from app.yaml, else 127.0.0.1:8090]",
    )
    parser.add_argument(
        "-t",
        "--basic-auth-token",
        dest="token",
        type=str,
        default=None,
        help="basic authentication token for the flintlock server",
    )
    parser.add_argument(
        "--store",
        type=str,
        default=None,
        help="store implementation to use (e.g. flintlock, reference) [Default: taken from app.yaml, else flintlock]",
    )


def add_selection_arguments(
    parser: ArgumentParser,
    with_id: bool = True,
    with_file: bool = True,
    name_default: str = None,
    namespace_default: str = None,
):
    """
    Add the arguments used to pick which MicroVM(s) a command acts on.

    Args:
        parser: The command parser to add the arguments to.
        with_id: Whether to add the `--id` argument.
        with_file: Whether to add the `--file` argument.
        name_default: Default value for `--name`.
        namespace_default: Default value for `--namespace`.
    """
    parser.add_argument("-n", "--name", type=str, default=name_default, help="microvm name")
    parser.add_argument("-ns", "--namespace", type=str, default=namespace_default, help="microvm namespace")
    if with_id:
        parser.add_argument("-i", "--id", dest="uid", type=str, default=None, help="microvm uuid")
    if with_file:
        parser.add_argument(
            "-f",
            "--file",
            type=str,
            default=None,
            help="path to json file containing full flintlock spec. will override other flags",
        )


def get_selection_from_args(args: Namespace) -> SelectionDescriptor:
    """
    Build a `SelectionDescriptor` from parsed CLI arguments.

    If a spec file was given, its uid, name, and namespace replace the
    `--id`, `--name`, and `--namespace` arguments.

    Args:
        args: Parsed CLI arguments.

    Returns:
        The selection the command should act on.

    Raises:
        SpecFileError: If the spec file can't be loaded.
        MissingScopeError: If the spec file has neither a uid nor a name and namespace.
    """
    uid = getattr(args, "uid", None)
    name = getattr(args, "name", None)
    namespace = getattr(args, "namespace", None)

    spec_file = getattr(args, "file", None)
    if is_set(spec_file):
        LOG.debug(f"Taking the MicroVM selection from '{spec_file}'.")
        uid, name, namespace = process_file(spec_file)

    return SelectionDescriptor(
        uid=uid or None,
        name=name or None,
        namespace=namespace or None,
        apply_to_all=bool(getattr(args, "all", False)),
    )


def get_store_options(args: Namespace, store_name: str) -> Dict:
    """
    Work out the keyword arguments to create a store with.

    Command-line values win over the values in `app.yaml`.

    Args:
        args: Parsed CLI arguments.
        store_name: The canonical name of the store being created.

    Returns:
        The keyword arguments for the store's constructor.
    """
    store_config = configfile.CONFIG.store

    if store_name == "reference":
        return {"strict_delete": getattr(store_config, "strict_delete", True)}

    timeout = getattr(store_config, "timeout", None)
    return {
        "address": getattr(args, "address", None) or store_config.address,
        "token": getattr(args, "token", None) or getattr(store_config, "token", None),
        "timeout": DEFAULT_TIMEOUT if timeout is None else float(timeout),
    }


def get_store(args: Namespace) -> StoreBase:
    """
    Create the store a command should talk to.

    Args:
        args: Parsed CLI arguments.

    Returns:
        A `StoreBase` instance. Callers are responsible for closing it.

    Raises:
        StoreNotSupportedError: If the requested store isn't registered.
    """
    requested = getattr(args, "store", None) or configfile.CONFIG.store.name
    store_name = store_factory.get_canonical_name(requested)
    LOG.debug(f"Using the '{store_name}' store.")
    return store_factory.create(store_name, get_store_options(args, store_name))
