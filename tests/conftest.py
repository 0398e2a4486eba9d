"""Pytest configuration and fixtures."""

import os
import pytest
import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def clear_settings_env(monkeypatch):
    """Keep PARAMETER_TYPES_* variables from the outer environment out of tests."""
    for key in list(os.environ):
        if key.startswith("PARAMETER_TYPES_"):
            monkeypatch.delenv(key)


@pytest.fixture
def registry():
    """A registry seeded with the built-in parameter types."""
    from parameter_types import ParameterTypeRegistry, RegistrySettings

    return ParameterTypeRegistry(RegistrySettings(locale="en"))


@pytest.fixture
def empty_registry():
    """A registry without any parameter types."""
    from parameter_types import ParameterTypeRegistry, RegistrySettings

    return ParameterTypeRegistry(RegistrySettings(seed_builtins=False))
