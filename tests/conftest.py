##############################################################################
# Copyright (c) Hammertime Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Hammertime.
##############################################################################

"""
This module contains pytest fixtures to be used throughout the entire test suite.
"""
import os
from glob import glob

import pytest
from pytest_mock import MockerFixture

from hammertime.config import Config
from hammertime.config.configfile import get_default_config
from tests.fixture_types import FixtureCallable, FixtureModification


# pylint: disable=redefined-outer-name


#######################################
# Loading in Module Specific Fixtures #
#######################################

fixture_glob = os.path.join("tests", "fixtures", "**", "*.py")
pytest_plugins = [
    fixture_file.replace(os.sep, ".").replace(".py", "")
    for fixture_file in glob(fixture_glob, recursive=True)
    if not fixture_file.endswith("__init__.py")
]


#######################################
######### Fixture Definitions #########
#######################################


@pytest.fixture
def default_config(mocker: MockerFixture) -> FixtureModification:
    """
    Swap the global `CONFIG` object for one built from the default settings so
    that an `app.yaml` on the machine running the tests can't leak in.

    Args:
        mocker: PyTest mocker fixture.

    Returns:
        The `Config` object that's now in place.
    """
    config = Config(get_default_config())
    mocker.patch("hammertime.config.configfile.CONFIG", config)
    return config


@pytest.fixture
def write_app_yaml(tmp_path) -> FixtureCallable:
    """
    A fixture to write an `app.yaml` file into a temporary directory.

    Returns:
        A function that takes the text of the file and returns the directory it was written to.
    """

    def _write_app_yaml(contents: str) -> str:
        app_yaml = tmp_path / "app.yaml"
        app_yaml.write_text(contents)
        return str(tmp_path)

    return _write_app_yaml
