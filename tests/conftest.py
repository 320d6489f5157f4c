"""Shared fixtures for Serenemind tests."""

import pytest

from serenemind.shared.infrastructure.persistence import InMemoryStorage, JsonFileStorage


@pytest.fixture
def memory_storage():
    return InMemoryStorage()


@pytest.fixture
def storage_path(tmp_path):
    return tmp_path / "storage" / "preferences.json"


@pytest.fixture
def file_storage(storage_path):
    return JsonFileStorage(storage_path)
