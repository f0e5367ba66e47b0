"""Task storage protocol and its result values."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol

from core.exceptions import AppException
from domain.entities.task import Task, TaskCollection


@dataclass(frozen=True)
class SaveResult:
    """Outcome of a best-effort write."""

    ok: bool
    error: AppException | None = None

    @classmethod
    def success(cls) -> "SaveResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, error: AppException) -> "SaveResult":
        return cls(ok=False, error=error)


class LoadStatus(StrEnum):
    """How a load resolved."""

    LOADED = "loaded"
    EMPTY = "empty"
    CORRUPT = "corrupt"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class LoadResult:
    """Outcome of a load. ``tasks`` is empty for every status but LOADED."""

    status: LoadStatus
    tasks: tuple[Task, ...] = ()
    error: AppException | None = None

    @property
    def recovered(self) -> bool:
        """True when a failure was absorbed by falling back to an empty list."""
        return self.status in (LoadStatus.CORRUPT, LoadStatus.UNAVAILABLE)


class ITaskStorage(Protocol):
    """Repository interface for the persisted task collection."""

    last_load: LoadResult | None

    def save(self, collection: TaskCollection) -> SaveResult:
        """Persist the collection. Never raises."""
        ...

    def load(self) -> list[Task]:
        """Read the persisted collection, or [] on any problem. Never raises."""
        ...

    def clear(self) -> SaveResult:
        """Remove the persisted collection. Never raises."""
        ...

    def close(self) -> None:
        """Release the underlying store."""
        ...
