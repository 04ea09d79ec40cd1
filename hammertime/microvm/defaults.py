##############################################################################
# Copyright (c) Hammertime Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Hammertime.
##############################################################################

"""
The default MicroVM template used by `hammertime create` when no spec file is
given, along with the cloud-init data flintlock passes to the guest.
"""

import base64
import copy
import logging
from typing import Dict, Optional

import yaml

from hammertime.exceptions import SpecFileError
from hammertime.microvm.data_models import MicroVM
from hammertime.microvm.selection import is_set


LOG = logging.getLogger("hammertime")

DEFAULT_NAME = "mvm0"
DEFAULT_NAMESPACE = "ns0"

KERNEL_IMAGE = "ghcr.io/weaveworks-liquidmetal/flintlock-kernel:5.10.77"
CLOUD_IMAGE = "ghcr.io/weaveworks-liquidmetal/capmvm-kubernetes:1.21.8"

BASE_SPEC = {
    "vcpu": 2,
    "memoryInMb": 2048,
    "kernel": {
        "image": KERNEL_IMAGE,
        "filename": "boot/vmlinux",
        "addNetworkConfig": True,
    },
    "rootVolume": {
        "id": "root",
        "isReadOnly": False,
        "mountPoint": "/",
        "source": {"containerSource": CLOUD_IMAGE},
    },
    "interfaces": [
        {"deviceId": "eth1", "type": 0},
    ],
}


def _encode(data: Dict, header: str = "") -> str:
    """
    Dump `data` as YAML and base64 encode it.

    Args:
        data: The data to dump.
        header: Text to put before the YAML document.

    Returns:
        The base64 encoded document.
    """
    document = header + yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    return base64.b64encode(document.encode("utf-8")).decode("utf-8")


def create_metadata(name: str, namespace: str) -> str:
    """
    Build the cloud-init instance metadata for a MicroVM.

    Args:
        name: The name of the MicroVM.
        namespace: The namespace of the MicroVM.

    Returns:
        The base64 encoded metadata.
    """
    metadata = {
        "instance_id": f"{namespace}/{name}",
        "local_hostname": name,
        "platform": "liquid_metal",
    }
    return _encode(metadata)


def create_user_data(name: str, ssh_key_path: Optional[str] = None) -> str:
    """
    Build the cloud-init user data for a MicroVM.

    Args:
        name: The name of the MicroVM, used as its hostname.
        ssh_key_path: Optional path to a public SSH key to authorize for the root user.

    Returns:
        The base64 encoded `#cloud-config` document.

    Raises:
        SpecFileError: If the SSH key file can't be read.
    """
    root_user = {"name": "root"}
    if is_set(ssh_key_path):
        try:
            with open(ssh_key_path, "r") as key_file:
                root_user["ssh_authorized_keys"] = [key_file.read().strip()]
        except OSError as exc:
            raise SpecFileError(f"Could not read public key file '{ssh_key_path}': {exc}") from exc

    # TODO: drop the resolv.conf boot command once the base images ship a working resolver link
    user_data = {
        "hostname": name,
        "users": [root_user],
        "final_message": "The Liquid Metal booted system is good to go after $UPTIME seconds",
        "bootcmd": ["ln -sf /run/systemd/resolve/stub-resolv.conf /etc/resolv.conf"],
    }
    return _encode(user_data, header="#cloud-config\n")


def new_microvm(name: str = DEFAULT_NAME, namespace: str = DEFAULT_NAMESPACE, ssh_key_path: str = None) -> MicroVM:
    """
    Build a MicroVM from the default template.

    Args:
        name: The name of the MicroVM.
        namespace: The namespace of the MicroVM.
        ssh_key_path: Optional path to a public SSH key to add to the root user.

    Returns:
        A MicroVM ready to be created.
    """
    LOG.debug(f"Building default MicroVM spec for {namespace}/{name}.")
    spec = copy.deepcopy(BASE_SPEC)
    spec["metadata"] = {
        "meta-data": create_metadata(name, namespace),
        "user-data": create_user_data(name, ssh_key_path),
    }
    return MicroVM(name=name, namespace=namespace, spec=spec)
