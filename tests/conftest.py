"""Shared fixtures."""
from __future__ import annotations

import pytest

from core.state_store import JsonFileStateStore, MemoryStateStore
from tests.fakes import RecordingGateway


@pytest.fixture
def memory_store() -> MemoryStateStore:
    return MemoryStateStore()


@pytest.fixture
def file_store(tmp_path) -> JsonFileStateStore:
    return JsonFileStateStore(tmp_path / "artifacts" / "last_message.json")


@pytest.fixture
def gateway() -> RecordingGateway:
    return RecordingGateway()
