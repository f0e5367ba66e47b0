"""Commands accepted by the task state engine."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Hydrate:
    """Replace the whole collection with previously persisted tasks.

    The payload is taken verbatim; a payload that is not a sequence of
    Task values is discarded in favour of an empty collection.
    """

    tasks: Any


@dataclass(frozen=True)
class AddTask:
    """Append a new task."""

    name: str
    description: str


@dataclass(frozen=True)
class UpdateTask:
    """Replace the name and description of an existing task."""

    id: str
    name: str
    description: str


@dataclass(frozen=True)
class ToggleTask:
    """Flip the completion flag of an existing task."""

    id: str


@dataclass(frozen=True)
class DeleteTask:
    """Remove an existing task."""

    id: str


Command = Hydrate | AddTask | UpdateTask | ToggleTask | DeleteTask
