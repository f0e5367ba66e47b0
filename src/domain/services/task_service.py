"""Task service: owns the canonical collection and keeps storage in step."""

import structlog

from core.exceptions import AlreadyHydratedError, NotHydratedError
from domain.commands import AddTask, Command, DeleteTask, Hydrate, ToggleTask, UpdateTask
from domain.entities.task import Task, TaskCollection, new_task_id, now_ms
from domain.repositories.task_storage import ITaskStorage, LoadStatus, SaveResult
from domain.services import task_engine
from domain.services.task_engine import Clock, IdFactory
from domain.services.view_projector import FilterMode, TaskCounts, TaskView, count_tasks, project
from domain.validation import validate_task_input

logger = structlog.get_logger()


class TaskService:
    """Single owner of the task collection for one process.

    Every command goes through ``task_engine.apply``; whenever the result
    differs from the current collection it becomes canonical and is handed to
    storage before the call returns. Storage failures do not interrupt the
    session and are visible through ``last_save``.
    """

    def __init__(
        self,
        storage: ITaskStorage,
        *,
        clock: Clock = now_ms,
        id_factory: IdFactory = new_task_id,
    ) -> None:
        self._storage = storage
        self._clock = clock
        self._id_factory = id_factory
        self._tasks: TaskCollection = ()
        self._hydrated = False
        self._filter_mode = FilterMode.ALL
        self._search = ""
        self.last_save: SaveResult | None = None

    # --- Lifecycle ---

    def hydrate(self) -> TaskCollection:
        """Load the persisted collection. Must run exactly once, before any command."""
        if self._hydrated:
            raise AlreadyHydratedError()
        loaded = self._storage.load()
        self._tasks = task_engine.apply(self._tasks, Hydrate(loaded))
        self._hydrated = True
        last_load = self._storage.last_load
        if last_load is not None and last_load.status is LoadStatus.CORRUPT:
            # Replace the unreadable value with the empty collection now.
            self._persist()
        logger.info("task_service_hydrated", count=len(self._tasks))
        return self._tasks

    @property
    def is_hydrated(self) -> bool:
        return self._hydrated

    @property
    def storage(self) -> ITaskStorage:
        return self._storage

    def close(self) -> None:
        self._storage.close()

    # --- Commands ---

    def dispatch(self, command: Command) -> TaskCollection:
        """Validate if needed, apply a command and persist the result.

        Raises:
            TaskValidationError: for ADD/UPDATE with blank name or description.
            NotHydratedError: if called before ``hydrate``.
        """
        if isinstance(command, Hydrate):
            raise AlreadyHydratedError() if self._hydrated else NotHydratedError()
        self._require_hydrated()

        if isinstance(command, AddTask):
            draft = validate_task_input(command.name, command.description)
            command = AddTask(name=draft.name, description=draft.description)
        elif isinstance(command, UpdateTask):
            draft = validate_task_input(command.name, command.description)
            command = UpdateTask(id=command.id, name=draft.name, description=draft.description)

        updated = task_engine.apply(
            self._tasks, command, clock=self._clock, id_factory=self._id_factory
        )
        if updated is self._tasks:
            logger.debug("task_command_noop", command=type(command).__name__)
            return self._tasks

        self._tasks = updated
        self._persist()
        return self._tasks

    def add(self, name: str, description: str) -> Task:
        """Create a task and return it."""
        tasks = self.dispatch(AddTask(name=name, description=description))
        created = tasks[-1]
        logger.info("task_added", task_id=created.id)
        return created

    def update(self, task_id: str, name: str, description: str) -> Task | None:
        """Edit a task's text. Returns None if no task has that id."""
        before = self._tasks
        self.dispatch(UpdateTask(id=task_id, name=name, description=description))
        if self._tasks is before:
            return None
        logger.info("task_updated", task_id=task_id)
        return self.get(task_id)

    def toggle(self, task_id: str) -> Task | None:
        """Flip a task's completion. Returns None if no task has that id."""
        before = self._tasks
        self.dispatch(ToggleTask(id=task_id))
        if self._tasks is before:
            return None
        task = self.get(task_id)
        logger.info("task_toggled", task_id=task_id, completed=task.completed if task else None)
        return task

    def delete(self, task_id: str) -> bool:
        """Remove a task. Returns False if no task had that id."""
        before = self._tasks
        self.dispatch(DeleteTask(id=task_id))
        deleted = self._tasks is not before
        if deleted:
            logger.info("task_deleted", task_id=task_id)
        return deleted

    # --- Queries ---

    @property
    def tasks(self) -> TaskCollection:
        return self._tasks

    def get(self, task_id: str) -> Task | None:
        return next((task for task in self._tasks if task.id == task_id), None)

    @property
    def counts(self) -> TaskCounts:
        return count_tasks(self._tasks)

    # --- View state ---

    @property
    def filter_mode(self) -> FilterMode:
        return self._filter_mode

    @filter_mode.setter
    def filter_mode(self, value: str | FilterMode) -> None:
        self._filter_mode = FilterMode.parse(value)

    @property
    def search(self) -> str:
        return self._search

    @search.setter
    def search(self, value: str) -> None:
        self._search = value or ""

    def visible(self) -> TaskView:
        """Project the current collection through the current filter and search."""
        return project(self._tasks, self._filter_mode, self._search)

    # --- Internals ---

    def _require_hydrated(self) -> None:
        if not self._hydrated:
            raise NotHydratedError()

    def _persist(self) -> None:
        self.last_save = self._storage.save(self._tasks)
        if not self.last_save.ok:
            logger.warning(
                "task_collection_not_persisted",
                count=len(self._tasks),
                error_code=self.last_save.error.error_code.value if self.last_save.error else None,
            )
