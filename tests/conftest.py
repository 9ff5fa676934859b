"""Shared fixtures for the passforge test suite."""

import itertools
from unittest.mock import Mock

import pytest

from passforge.generators.secure_random import SecureRandom
from shared.config import PassforgeConfig


def _to_bytes(value: int) -> bytes:
    return value.to_bytes(4, "big")


@pytest.fixture
def scripted_source():
    """Factory for a byte source that replays the given 32-bit values in order."""

    def factory(*values: int) -> Mock:
        it = iter(values)
        return Mock(side_effect=lambda n: _to_bytes(next(it)))

    return factory


@pytest.fixture
def counting_rng():
    """Factory for a deterministic SecureRandom fed 0, 1, 2, ... as raw draws."""

    def factory() -> SecureRandom:
        counter = itertools.count()
        return SecureRandom(source=lambda n: _to_bytes(next(counter)))

    return factory


@pytest.fixture
def quiet_config() -> PassforgeConfig:
    config = PassforgeConfig()
    config.global_settings.console_logging = False
    return config
