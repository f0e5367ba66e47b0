"""View projector: derived, filtered and searched views of the collection."""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum

from core.exceptions import InvalidFilterError
from domain.entities.task import Task, TaskCollection


class FilterMode(StrEnum):
    """Which tasks a view shows by completion state."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: "str | FilterMode") -> "FilterMode":
        try:
            return cls(raw)
        except ValueError:
            raise InvalidFilterError(str(raw)) from None


class TaskView:
    """Lazy, restartable sequence of the tasks matching a filter and search.

    Each iteration re-reads the captured collection; nothing is cached.
    """

    __slots__ = ("_tasks", "_mode", "_needle")

    def __init__(self, tasks: TaskCollection, mode: FilterMode, search: str) -> None:
        self._tasks = tasks
        self._mode = mode
        # Blank text disables search; otherwise the raw text is matched as typed.
        self._needle = search.lower() if search.strip() else None

    @property
    def filter_mode(self) -> FilterMode:
        return self._mode

    @property
    def search(self) -> str | None:
        """Lower-cased search text, or None when search is inactive."""
        return self._needle

    def matches(self, task: Task) -> bool:
        """Check whether a task passes both the filter and the search."""
        if self._mode is FilterMode.ACTIVE and task.completed:
            return False
        if self._mode is FilterMode.COMPLETED and not task.completed:
            return False
        if self._needle is None:
            return True
        return self._needle in task.name.lower() or self._needle in task.description.lower()

    def __iter__(self) -> Iterator[Task]:
        return (task for task in self._tasks if self.matches(task))

    def __bool__(self) -> bool:
        return any(True for _ in self)

    def to_list(self) -> list[Task]:
        return list(self)

    def __repr__(self) -> str:
        return f"TaskView(filter={self._mode.value!r}, search={self._needle!r})"


def project(
    collection: TaskCollection,
    filter_mode: str | FilterMode = FilterMode.ALL,
    search: str = "",
) -> TaskView:
    """Build the view of ``collection`` for a filter mode and search text.

    Raises:
        InvalidFilterError: if ``filter_mode`` is not all/active/completed.
    """
    return TaskView(tuple(collection), FilterMode.parse(filter_mode), search or "")


@dataclass(frozen=True)
class TaskCounts:
    """Counters over the canonical collection (not the filtered view)."""

    total: int
    completed: int

    @property
    def active(self) -> int:
        return self.total - self.completed

    @property
    def label(self) -> str:
        return f"{self.completed} / {self.total} done"


def count_tasks(collection: TaskCollection) -> TaskCounts:
    """Reduce the collection to total and completed counts."""
    return TaskCounts(
        total=len(collection),
        completed=sum(1 for task in collection if task.completed),
    )
