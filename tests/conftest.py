"""Global pytest fixtures for querylab."""

from __future__ import annotations

import pytest

from querylab.adapters.orm import start_mappers

pytest_plugins = [
    "tests.fixtures.sqlite",
    "tests.fixtures.datagen",
]


@pytest.fixture(scope="session", autouse=True)
def mappers() -> None:
    """Map the entity classes once for the whole run."""
    start_mappers()
