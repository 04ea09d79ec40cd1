##############################################################################
# Copyright (c) Hammertime Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Hammertime.
##############################################################################

import os

from setuptools import find_packages, setup


version = __import__("hammertime").VERSION

extras = ["dev"]


def readme():
    with open("README.md") as f:
        return f.read()


def _strip_comments(line: str):
    """Removes comments from a line passed in from _reqs()."""
    return line.split("#", 1)[0].strip()


def _pip_requirement(req):
    if req.startswith("-r "):
        _, path = req.split()
        return reqs(*path.split(os.path.sep))
    return [req]


def _reqs(*f):
    with open(os.path.join(os.path.dirname(os.path.abspath(__file__)), "requirements", *f)) as req_file:
        lines = req_file.readlines()
    return [_pip_requirement(r) for r in (_strip_comments(line) for line in lines) if r]


def reqs(*f):
    """Parse requirement file.
    Example:
        reqs('release.txt')          # requirements/release.txt
    Returns:
        List[str]: list of requirements specified in the file.
    """
    trl = [req for subreq in _reqs(*f) for req in subreq]
    return [r for r in trl if "-e" not in r]


def install_requires():
    """Get list of requirements required for installation."""
    return reqs("release.txt")


def extras_require():
    """Get map of all extra requirements."""
    return {x: reqs(x + ".txt") for x in extras}


setup(
    name="hammertime",
    author="Hammertime Dev team",
    version=version,
    description="A basic command-line client to flintlock MicroVM servers",
    long_description=readme(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
    keywords="flintlock microvm firecracker cli",
    license="MIT",
    packages=find_packages(exclude=["tests.*", "tests"]),
    python_requires=">=3.9",
    install_requires=install_requires(),
    extras_require=extras_require(),
    entry_points={
        "console_scripts": [
            "hammertime=hammertime.main:main",
        ]
    },
    include_package_data=True,
    zip_safe=False,
)
