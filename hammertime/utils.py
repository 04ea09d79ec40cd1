##############################################################################
# Copyright (c) Hammertime Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Hammertime.
##############################################################################

"""
Module for project-wide utility functions.
"""
import logging
from copy import deepcopy
from types import SimpleNamespace
from typing import Dict

import yaml


LOG = logging.getLogger(__name__)


def load_yaml(filepath: str) -> Dict:
    """
    Safely read a YAML file and return its contents.

    Args:
        filepath: The file path to the YAML file to be read.

    Returns:
        A dict representing the contents of the YAML file.
    """
    with open(filepath, "r") as _file:
        return yaml.safe_load(_file)


def nested_dict_to_namespaces(dic: Dict) -> SimpleNamespace:
    """
    Convert a nested dictionary into a nested SimpleNamespace structure.

    Args:
        dic: The nested dictionary to be converted.

    Returns:
        A SimpleNamespace object representing the nested structure of the input dictionary.

    Raises:
        TypeError: If the input is not a dictionary.
    """

    def recurse(dic):
        if not isinstance(dic, dict):
            return dic
        for key, val in list(dic.items()):
            dic[key] = recurse(val)
        return SimpleNamespace(**dic)

    if not isinstance(dic, dict):
        raise TypeError(f"{dic} is not a dict")

    new_dic = deepcopy(dic)
    return recurse(new_dic)


def dict_deep_merge(dict_a: Dict, dict_b: Dict) -> Dict:
    """
    Recursively merge `dict_b` into `dict_a`. Values in `dict_b` win on conflicts.

    Args:
        dict_a: The dictionary to merge into. Modified in place.
        dict_b: The dictionary whose values take precedence.

    Returns:
        `dict_a`, for convenience.
    """
    for key, val in dict_b.items():
        if isinstance(val, dict) and isinstance(dict_a.get(key), dict):
            dict_deep_merge(dict_a[key], val)
        else:
            dict_a[key] = deepcopy(val)
    return dict_a
