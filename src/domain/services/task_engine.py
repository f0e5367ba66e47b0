"""Task state engine: the pure transition function over the task collection."""

from collections.abc import Callable, Sequence

import structlog

from domain.commands import AddTask, Command, DeleteTask, Hydrate, ToggleTask, UpdateTask
from domain.entities.task import Task, TaskCollection, new_task_id, now_ms

logger = structlog.get_logger()

Clock = Callable[[], int]
IdFactory = Callable[[], str]


def apply(
    collection: TaskCollection,
    command: Command,
    *,
    clock: Clock = now_ms,
    id_factory: IdFactory = new_task_id,
) -> TaskCollection:
    """Apply a command and return the resulting collection.

    The input collection is never mutated. Unknown ids on UPDATE, TOGGLE and
    DELETE are silent no-ops that return the input unchanged. Text on ADD and
    UPDATE is trimmed but not validated; see ``domain.validation``.
    """
    if isinstance(command, Hydrate):
        return _hydrate(command.tasks)
    if isinstance(command, AddTask):
        return _add(collection, command, clock, id_factory)
    if isinstance(command, UpdateTask):
        return _replace(
            collection,
            command.id,
            lambda task: task.edit(command.name, command.description, clock()),
        )
    if isinstance(command, ToggleTask):
        return _replace(collection, command.id, lambda task: task.toggle(clock()))
    if isinstance(command, DeleteTask):
        return _delete(collection, command.id)
    raise TypeError(f"Unsupported command: {type(command).__name__}")


def _hydrate(tasks: object) -> TaskCollection:
    if not isinstance(tasks, Sequence) or isinstance(tasks, (str, bytes)):
        logger.warning("hydrate_payload_discarded", reason="not_a_sequence")
        return ()
    if not all(isinstance(task, Task) for task in tasks):
        logger.warning("hydrate_payload_discarded", reason="non_task_element")
        return ()
    return tuple(tasks)


def _add(
    collection: TaskCollection, command: AddTask, clock: Clock, id_factory: IdFactory
) -> TaskCollection:
    now = clock()
    task = Task(
        id=id_factory(),
        name=command.name.strip(),
        description=command.description.strip(),
        completed=False,
        created_at=now,
        updated_at=now,
    )
    return (*collection, task)


def _replace(
    collection: TaskCollection, task_id: str, change: Callable[[Task], Task]
) -> TaskCollection:
    if not any(task.id == task_id for task in collection):
        return collection
    return tuple(change(task) if task.id == task_id else task for task in collection)


def _delete(collection: TaskCollection, task_id: str) -> TaskCollection:
    remaining = tuple(task for task in collection if task.id != task_id)
    if len(remaining) == len(collection):
        return collection
    return remaining
