"""Shared fixtures for unit tests."""

from typing import Any

import pytest

from infrastructure.storage.memory_kv_store import InMemoryKeyValueStore
from infrastructure.storage.task_storage import TaskStorage

STORAGE_KEY = "todo.tasks.v1"


class FakeClock:
    """Deterministic millisecond clock; every reading advances by ``step``."""

    def __init__(self, start: int = 1_700_000_000_000, step: int = 1000) -> None:
        self.now = start
        self.step = step
        self.calls = 0

    def __call__(self) -> int:
        current = self.now
        self.now += self.step
        self.calls += 1
        return current


class FrozenClock:
    """Clock that never moves."""

    def __init__(self, now: int = 1_700_000_000_000) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now


class SequentialIds:
    """Predictable task ids: task-1, task-2, ..."""

    def __init__(self) -> None:
        self.issued = 0

    def __call__(self) -> str:
        self.issued += 1
        return f"task-{self.issued}"


class BrokenKeyValueStore:
    """Key/value store that raises on every call, like a disabled browser store."""

    def __init__(self, exc: Exception | None = None) -> None:
        self.exc = exc or OSError("store disabled")
        self.calls: list[str] = []

    def get(self, key: str) -> str | None:
        self.calls.append("get")
        raise self.exc

    def set(self, key: str, value: str) -> None:
        self.calls.append("set")
        raise self.exc

    def delete(self, key: str) -> None:
        self.calls.append("delete")
        raise self.exc

    def close(self) -> None:
        self.calls.append("close")
        raise self.exc


class RecordingKeyValueStore(InMemoryKeyValueStore):
    """In-memory store that remembers every write."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        super().__init__(initial)
        self.writes: list[tuple[str, str]] = []

    def set(self, key: str, value: str) -> None:
        self.writes.append((key, value))
        super().set(key, value)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def ids() -> SequentialIds:
    return SequentialIds()


@pytest.fixture
def kv_store() -> RecordingKeyValueStore:
    """A healthy in-memory store."""
    return RecordingKeyValueStore()


@pytest.fixture
def broken_store() -> BrokenKeyValueStore:
    """A store that fails every call."""
    return BrokenKeyValueStore()


@pytest.fixture
def storage(kv_store: RecordingKeyValueStore) -> TaskStorage:
    return TaskStorage(kv_store, STORAGE_KEY)


def make_record(**overrides: Any) -> dict[str, Any]:
    """A valid stored task record."""
    record: dict[str, Any] = {
        "id": "stored-1",
        "name": "Buy milk",
        "description": "2%, 1 gallon",
        "completed": False,
        "createdAt": 1_700_000_000_000,
        "updatedAt": 1_700_000_000_000,
    }
    record.update(overrides)
    return record
