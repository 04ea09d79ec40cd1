##############################################################################
# Copyright (c) Hammertime Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Hammertime.
##############################################################################

"""
This module provides functionality for locating and loading Hammertime's
`app.yaml` configuration file and filling in default settings.

It houses the `CONFIG` object that's used throughout Hammertime's codebase.
"""
import logging
import os
from typing import Dict, Optional

import yaml

from hammertime.config import Config
from hammertime.config.config_filepaths import APP_FILENAME, HAMMERTIME_HOME
from hammertime.stores.flintlock_store import DEFAULT_ADDRESS, DEFAULT_TIMEOUT
from hammertime.utils import dict_deep_merge, load_yaml


LOG: logging.Logger = logging.getLogger(__name__)

CONFIG: Optional[Config] = None


def get_default_config() -> Dict:
    """
    Creates the default configuration used when no `app.yaml` is found.

    Returns:
        A configuration dictionary with essential default values.
    """
    return {
        "store": {
            "name": "flintlock",
            "address": DEFAULT_ADDRESS,
            "token": None,
            "timeout": DEFAULT_TIMEOUT,
            "strict_delete": True,
        },
    }


def find_config_file(path: str = None) -> Optional[str]:
    """
    Locate the Hammertime application configuration file (`app.yaml`).

    If no directory is provided, the current working directory is checked first,
    then the `HAMMERTIME_HOME` directory.

    Args:
        path: A specific directory to look for `app.yaml`.

    Returns:
        The full path to the `app.yaml` file if found, otherwise `None`.
    """
    if path is None:
        local_app = os.path.join(os.getcwd(), APP_FILENAME)
        if os.path.isfile(local_app):
            return local_app

        path_app = os.path.join(HAMMERTIME_HOME, APP_FILENAME)
        if os.path.isfile(path_app):
            return path_app

        return None

    app_path = os.path.join(path, APP_FILENAME)
    if os.path.isfile(app_path):
        return app_path

    return None


def load_config(filepath: str) -> Optional[Dict]:
    """
    Reads a Hammertime YAML configuration file and returns its contents as a dictionary.

    Args:
        filepath: The path to the YAML configuration file.

    Returns:
        A dictionary containing the contents of the YAML file or None if file doesn't exist.
    """
    if not os.path.isfile(filepath):
        LOG.info(f"No app config file at {filepath}")
        return None
    LOG.debug(f"Reading app config from file {filepath}")
    return load_yaml(filepath) or {}


def get_config(path: Optional[str] = None) -> Dict:
    """
    Load the configuration, falling back to defaults for anything it leaves out.

    Args:
        path: The directory to search for the configuration file. If `None`,
            default search paths are used.

    Returns:
        A dictionary containing all the configuration data.
    """
    config = get_default_config()

    filepath = find_config_file(path)
    if filepath is None:
        LOG.debug("No app.yaml found; using the default configuration.")
        return config

    app_config = load_config(filepath)
    if not isinstance(app_config, dict):
        raise ValueError(f"The configuration file '{filepath}' must contain a mapping.")

    return dict_deep_merge(config, app_config)


def initialize_config(path: Optional[str] = None) -> Config:
    """
    Initializes and returns the Hammertime configuration.

    Args:
        path: Directory to look for the configuration file in.

    Returns:
        The initialized configuration object.
    """
    global CONFIG  # pylint: disable=global-statement

    try:
        CONFIG = Config(get_config(path))
    except (OSError, ValueError, yaml.YAMLError) as e:
        LOG.warning(f"Error loading configuration: {e}. Falling back to default configuration.")
        CONFIG = Config(get_default_config())

    return CONFIG


initialize_config()
