"""Pytest configuration and fixtures for the foxes-and-rabbits tests."""

import random

import pytest

from foxes_rabbits.field import Field


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def field3(seeded_rng):
    return Field(3, 3, seeded_rng)
