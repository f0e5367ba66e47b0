"""Database engine and session management."""

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from core.config import Settings


def _enable_sqlite_wal(dbapi_connection, connection_record) -> None:  # type: ignore[no-untyped-def]
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA journal_mode=WAL")
    finally:
        cursor.close()


def create_db_engine(database_url: str, *, echo: bool = False) -> Engine:
    """Create a synchronous engine; file-backed SQLite gets WAL journaling."""
    engine = create_engine(database_url, echo=echo, pool_pre_ping=True)
    if engine.dialect.name == "sqlite" and engine.url.database not in (None, "", ":memory:"):
        event.listen(engine, "connect", _enable_sqlite_wal)
    return engine


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create the session factory used by the key/value store."""
    return sessionmaker(
        bind=engine,
        class_=Session,
        expire_on_commit=False,
        autoflush=False,
    )


def engine_from_settings(settings: Settings) -> Engine:
    return create_db_engine(settings.database_url, echo=settings.debug)
