##############################################################################
# Copyright (c) Hammertime Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Hammertime.
##############################################################################

"""
Used to store the application configuration.

The `config` package loads the `app.yaml` file (if there is one), fills in
defaults, and exposes the result as a `Config` object.

Modules:
    config_filepaths.py: Constants for where configuration files live.
    configfile.py: Locating, loading, and defaulting the configuration file.
"""
from types import SimpleNamespace
from typing import Dict, List, Optional

from hammertime.utils import nested_dict_to_namespaces


class Config:  # pylint: disable=R0903
    """
    The Config class, meant to store all Hammertime config settings in one place.

    Attributes:
        store (Optional[SimpleNamespace]): A namespace containing the store settings
            (`name`, `address`, `token`, `timeout`, `strict_delete`).

    Methods:
        load_app_into_namespaces: Converts the provided configuration dictionary into namespaces
            and assigns them to the Config instance's attributes.
    """

    def __init__(self, app_dict: Dict):
        """
        Initializes the Config instance with configuration data from a dictionary.

        Args:
            app_dict: A dictionary containing configuration data for the application.
        """
        self.store: Optional[SimpleNamespace] = None
        self.load_app_into_namespaces(app_dict)

    def __str__(self) -> str:
        """
        Returns a formatted string representation of the Config instance.

        Returns:
            str: A string containing the values of the `store` attribute.
        """
        formatted_str = "config:"
        if self.store is not None:
            items = (f"    {k}: {v!r}" for k, v in self.store.__dict__.items() if k != "token")
            formatted_str += "\n  store:\n" + "\n".join(items)
        else:
            formatted_str += "\n  store:\n    None"
        return formatted_str

    def load_app_into_namespaces(self, app_dict: Dict):
        """
        Converts the provided application dictionary into namespaces and assigns them
        to the Config instance's attributes.

        Args:
            app_dict: A dictionary containing configuration data for the application.
        """
        fields: List[str] = ["store"]
        for field in fields:
            try:
                setattr(self, field, nested_dict_to_namespaces(app_dict[field]))
            except KeyError:
                # The keywords are optional
                pass
