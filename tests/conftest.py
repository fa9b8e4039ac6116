"""Root test configuration: isolate tests from MDJSX_* environment settings"""

import os

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove MDJSX_* env vars so settings come from each test alone."""
    for name in list(os.environ):
        if name.startswith("MDJSX_"):
            monkeypatch.delenv(name)
