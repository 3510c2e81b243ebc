# tests/conftest.py
import copy

import pytest

from domain.car import Car
from domain.object_pool import ResourcePool


@pytest.fixture(scope="session")
def mock_config():
    """Provides a session-wide mock configuration dictionary."""
    return {
        "pool": {"strict_release": False, "initial_rentals": 0},
        "logging": {"max_log_messages": 5},
        "display": {"log_lines": 3},
    }


class MockConfig:
    def __init__(self, data):
        self.data = data

    def get(self, *keys, default=None):
        value = self.data
        try:
            for key in keys:
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default


@pytest.fixture
def config_factory(mock_config, monkeypatch):
    """
    Returns a function that installs a MockConfig with optional overrides in
    every module that reads the global config.
    """

    def _install(**sections):
        data = copy.deepcopy(mock_config)
        for section, values in sections.items():
            data.setdefault(section, {}).update(values)
        mock = MockConfig(data)
        monkeypatch.setattr("application.rental_service.config", mock)
        monkeypatch.setattr("presentation.main.config", mock)
        return mock

    return _install


@pytest.fixture
def car_pool():
    """A lenient pool that builds Car instances."""
    return ResourcePool(factory=Car)


@pytest.fixture
def strict_car_pool():
    return ResourcePool(factory=Car, strict=True)
