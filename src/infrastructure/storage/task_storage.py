"""Best-effort persistence adapter for the task collection."""

import structlog
from pydantic import ValidationError

from core.exceptions import StorageCorruptError, StorageError
from domain.entities.task import Task, TaskCollection
from domain.repositories.kv_store import IKeyValueStore
from domain.repositories.task_storage import LoadResult, LoadStatus, SaveResult
from infrastructure.storage.schemas import TaskRecord, TaskRecordList

logger = structlog.get_logger()

DEFAULT_STORAGE_KEY = "todo.tasks.v1"


class TaskStorage:
    """Reads and writes the task collection under one versioned key.

    Availability over durability: store failures never escape. ``save`` and
    ``clear`` report them through ``SaveResult``; ``load`` falls back to an
    empty list and records why in ``last_load``.

    Records written under an older format fail schema validation and the whole
    payload is dropped. Bump the key suffix when the format changes.
    """

    def __init__(self, kv_store: IKeyValueStore, storage_key: str = DEFAULT_STORAGE_KEY) -> None:
        self._kv = kv_store
        self._key = storage_key
        self.last_load: LoadResult | None = None

    @property
    def storage_key(self) -> str:
        return self._key

    def save(self, collection: TaskCollection) -> SaveResult:
        """Serialize and write the collection. Never raises."""
        try:
            payload = TaskRecordList.dump_json(
                [TaskRecord.from_entity(task) for task in collection], by_alias=True
            ).decode("utf-8")
            self._kv.set(self._key, payload)
        except Exception as exc:
            error = StorageError("save", exc)
            logger.warning(
                "task_storage_save_failed",
                key=self._key,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            return SaveResult.failure(error)

        logger.debug("task_storage_saved", key=self._key, count=len(collection))
        return SaveResult.success()

    def load(self) -> list[Task]:
        """Read and deserialize the collection; [] when absent, corrupt or unavailable."""
        result = self._read()
        self.last_load = result
        return list(result.tasks)

    def _read(self) -> LoadResult:
        try:
            raw = self._kv.get(self._key)
        except Exception as exc:
            logger.warning(
                "task_storage_load_failed",
                key=self._key,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            return LoadResult(LoadStatus.UNAVAILABLE, error=StorageError("load", exc))

        if not raw:
            return LoadResult(LoadStatus.EMPTY)

        try:
            records = TaskRecordList.validate_json(raw)
        except ValidationError as exc:
            logger.warning(
                "task_storage_corrupt",
                key=self._key,
                error_count=exc.error_count(),
            )
            return LoadResult(
                LoadStatus.CORRUPT,
                error=StorageCorruptError(self._key, f"{exc.error_count()} validation errors"),
            )

        # Checked before mapping: Task repairs this ordering on construction.
        if any(record.updated_at < record.created_at for record in records):
            logger.warning("task_storage_corrupt", key=self._key, reason="updated_before_created")
            return LoadResult(
                LoadStatus.CORRUPT,
                error=StorageCorruptError(self._key, "updated_at before created_at"),
            )

        tasks = tuple(record.to_entity() for record in records)
        if len({task.id for task in tasks}) != len(tasks):
            logger.warning("task_storage_corrupt", key=self._key, reason="duplicate_ids")
            return LoadResult(
                LoadStatus.CORRUPT, error=StorageCorruptError(self._key, "duplicate ids")
            )

        logger.info("task_storage_loaded", key=self._key, count=len(tasks))
        return LoadResult(LoadStatus.LOADED, tasks=tasks)

    def clear(self) -> SaveResult:
        """Delete the stored collection. Never raises."""
        try:
            self._kv.delete(self._key)
        except Exception as exc:
            logger.warning("task_storage_clear_failed", key=self._key, error=str(exc))
            return SaveResult.failure(StorageError("clear", exc))
        logger.info("task_storage_cleared", key=self._key)
        return SaveResult.success()

    def close(self) -> None:
        try:
            self._kv.close()
        except Exception:
            logger.exception("task_storage_close_failed", key=self._key)
