"""Pytest configuration and fixtures."""

import logging
import os
import sys
from collections.abc import Generator
from pathlib import Path

# Keep tests off any developer .env / real database
os.environ.setdefault("STORAGE_BACKEND", "memory")

import pytest
import structlog
from sqlalchemy import Engine

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from infrastructure.database.session import create_db_engine


# Test database URL (SQLite in memory)
TEST_DATABASE_URL = "sqlite://"


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """Create a fresh in-memory database engine per test."""
    engine = create_db_engine(TEST_DATABASE_URL)
    yield engine
    engine.dispose()


@pytest.fixture
def file_database_url(tmp_path: Path) -> str:
    """URL of a SQLite file that outlives a single engine."""
    return f"sqlite:///{tmp_path / 'tasks.db'}"


@pytest.fixture(autouse=True)
def _reset_structlog() -> Generator[None, None, None]:
    """Undo any logging configuration a test installed."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)
