"""Composition root: wires settings, storage and the task service."""

import structlog

from core.config import Settings, settings as default_settings
from core.logging import setup_logging
from domain.repositories.kv_store import IKeyValueStore
from domain.services.task_service import TaskService
from infrastructure.database.session import engine_from_settings
from infrastructure.database.sqlalchemy_kv_store import SQLAlchemyKeyValueStore
from infrastructure.storage.memory_kv_store import InMemoryKeyValueStore
from infrastructure.storage.task_storage import TaskStorage

logger = structlog.get_logger()


def create_kv_store(app_settings: Settings) -> IKeyValueStore:
    """Build the key/value store selected by ``storage_backend``."""
    if app_settings.storage_backend == "memory":
        return InMemoryKeyValueStore()
    return SQLAlchemyKeyValueStore(engine_from_settings(app_settings))


def create_task_service(
    app_settings: Settings | None = None,
    *,
    kv_store: IKeyValueStore | None = None,
    configure_logging: bool = True,
) -> TaskService:
    """Create a hydrated TaskService ready to accept commands.

    A store that cannot even be opened degrades to an in-memory session, the
    same availability-over-durability policy ``TaskStorage`` applies per call.
    """
    cfg = app_settings or default_settings
    if configure_logging:
        setup_logging(cfg)

    if kv_store is None:
        try:
            kv_store = create_kv_store(cfg)
        except Exception as exc:
            logger.warning(
                "kv_store_unavailable",
                backend=cfg.storage_backend,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            kv_store = InMemoryKeyValueStore()

    service = TaskService(TaskStorage(kv_store, cfg.storage_key))
    service.hydrate()
    logger.info(
        "task_service_started",
        app_name=cfg.app_name,
        environment=cfg.app_env,
        backend=cfg.storage_backend,
        storage_key=cfg.storage_key,
    )
    return service
