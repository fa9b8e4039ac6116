"""Shared fixtures for core unit tests"""

import pytest

from mdjsx.core.options import build_config


@pytest.fixture(name="config")
def config_fixture():
    """Default compiler configuration."""
    return build_config()
