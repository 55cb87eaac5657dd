"""Pytest configuration and fixtures for test suite."""

import json

import pytest
from core.config_loader import config_loader


@pytest.fixture(autouse=True)
def reset_config():
    """Ensure every test starts and ends with the repository configuration.

    Tests that load a temporary configuration file leave the singleton pointing
    at it; this fixture points it back at config/sensors_config.json.
    """
    config_loader._config_path = None
    config_loader.load_config()

    yield

    config_loader._config_path = None
    config_loader.load_config()


@pytest.fixture
def write_config(tmp_path):
    """Write a configuration dict to a temporary file and load it."""
    def _write(data, raw=None):
        config_path = tmp_path / "sensors_config.json"
        config_path.write_text(raw if raw is not None else json.dumps(data), encoding="utf-8")
        config_loader.load_config(config_path)
        return config_path
    return _write
