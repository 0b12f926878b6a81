"""Tests for package metadata."""

from importlib import metadata

import pytest

import t3


def test_installed_version_comes_from_package():
    try:
        installed = metadata.version("t3")
    except metadata.PackageNotFoundError:
        pytest.skip("t3 is not installed")
    assert installed == t3.__version__
