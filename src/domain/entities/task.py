"""Task domain entity."""

import time
from dataclasses import dataclass, field, replace
from uuid import uuid4


def now_ms() -> int:
    """Current wall-clock time as integer epoch milliseconds."""
    return time.time_ns() // 1_000_000


def new_task_id() -> str:
    """Generate an opaque unique task identifier."""
    return str(uuid4())


@dataclass(frozen=True, slots=True)
class Task:
    """Domain entity for a single to-do item.

    Tasks are immutable values; every transition returns a new instance.
    Timestamps are integer epoch milliseconds.
    """

    name: str
    description: str
    id: str = field(default_factory=new_task_id)
    completed: bool = False
    created_at: int = field(default_factory=now_ms)
    updated_at: int = -1

    def __post_init__(self) -> None:
        """Ensure updated_at is always at least as recent as created_at."""
        if self.updated_at < self.created_at:
            object.__setattr__(self, "updated_at", self.created_at)

    def _touched_at(self, now: int) -> int:
        # Strictly after the previous mutation, even within one millisecond.
        return max(now, self.updated_at + 1)

    def edit(self, name: str, description: str, now: int) -> "Task":
        """Return a copy with new trimmed text and a refreshed updated_at."""
        return replace(
            self,
            name=name.strip(),
            description=description.strip(),
            updated_at=self._touched_at(now),
        )

    def toggle(self, now: int) -> "Task":
        """Return a copy with completion flipped and a refreshed updated_at."""
        return replace(self, completed=not self.completed, updated_at=self._touched_at(now))


TaskCollection = tuple[Task, ...]
