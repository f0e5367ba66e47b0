"""SQLAlchemy implementation of the key/value store."""

import structlog
from sqlalchemy import Engine, delete, select
from sqlalchemy.orm import Session, sessionmaker

from infrastructure.database.models import Base, KeyValueModel
from infrastructure.database.session import create_session_factory

logger = structlog.get_logger()


class SQLAlchemyKeyValueStore:
    """SQLAlchemy implementation of IKeyValueStore.

    Each call runs in its own short session and commits before returning.
    Errors propagate; ``TaskStorage`` decides how to recover.
    """

    def __init__(
        self,
        engine: Engine,
        session_factory: sessionmaker[Session] | None = None,
        *,
        create_schema: bool = True,
    ) -> None:
        self._engine = engine
        self._session_factory = session_factory or create_session_factory(engine)
        if create_schema:
            Base.metadata.create_all(engine)
            logger.info("kv_store_ready", url=engine.url.render_as_string(hide_password=True))

    def get(self, key: str) -> str | None:
        """Get the value stored under a key."""
        with self._session_factory() as session:
            stmt = select(KeyValueModel.value).where(KeyValueModel.key == key)
            return session.execute(stmt).scalar_one_or_none()

    def set(self, key: str, value: str) -> None:
        """Insert or replace the value under a key."""
        with self._session_factory() as session:
            model = session.get(KeyValueModel, key)
            if model is None:
                session.add(KeyValueModel(key=key, value=value))
            else:
                model.value = value
            session.commit()

    def delete(self, key: str) -> None:
        """Remove a key if present."""
        with self._session_factory() as session:
            session.execute(delete(KeyValueModel).where(KeyValueModel.key == key))
            session.commit()

    def close(self) -> None:
        """Dispose of the engine's connection pool."""
        self._engine.dispose()
