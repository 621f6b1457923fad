from __future__ import annotations

import random

import pytest

from ad_infinitum.models.names import clear_name_cache

NAMES = ("Alpha", "Bravo", "Charlie", "Delta")


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def names() -> tuple[str, ...]:
    return NAMES


@pytest.fixture(autouse=True)
def _fresh_name_cache():
    clear_name_cache()
    yield
    clear_name_cache()
