"""Database connection and session management for memobot.

This module supports both:
- Local SQLite under ~/.memobot (default)
- Any other SQLAlchemy URL via `DATABASE_URL`
"""

import logging
import os
import sqlite3
from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker, declarative_base
from dotenv import load_dotenv

from memobot.models.constants import DEFAULT_MIN_INTERVAL_DAYS

load_dotenv()

logger = logging.getLogger(__name__)

def resolve_home() -> Path:
    """Data directory: MEMOBOT_HOME, or ~/.memobot."""
    return Path(os.getenv("MEMOBOT_HOME", str(Path.home() / ".memobot"))).expanduser()


def resolve_database_url() -> str:
    """DATABASE_URL, or a SQLite file in the data directory."""
    return os.getenv("DATABASE_URL") or f"sqlite:///{resolve_home() / 'db.sqlite'}"


MEMOBOT_HOME = resolve_home()
DATABASE_URL = resolve_database_url()


def _is_sqlite_url(database_url: str) -> bool:
    return "sqlite" in (database_url or "")


def get_engine_kwargs(database_url: str) -> dict:
    """Return deterministic create_engine kwargs for a DB URL.

    This is separated to allow deterministic unit testing without connecting.
    """
    engine_kwargs: dict = {
        "echo": os.getenv("DEBUG", "False").lower() == "true",
        "pool_pre_ping": True,
    }

    if _is_sqlite_url(database_url):
        # Service calls may arrive from several threads.
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        return engine_kwargs

    engine_kwargs["pool_size"] = int(os.getenv("DB_POOL_SIZE", "5"))
    engine_kwargs["max_overflow"] = int(os.getenv("DB_MAX_OVERFLOW", "5"))
    engine_kwargs["pool_timeout"] = int(os.getenv("DB_POOL_TIMEOUT_SEC", "30"))
    return engine_kwargs


def build_engine(database_url: str) -> Engine:
    return create_engine(database_url, **get_engine_kwargs(database_url))


# Create engine (module-level singleton; connects lazily)
engine = build_engine(DATABASE_URL)


@event.listens_for(Engine, "connect")
def set_sqlite_pragmas(dbapi_conn, connection_record):
    """Set SQLite PRAGMA statements on connection for concurrency and foreign key support."""
    if isinstance(dbapi_conn, sqlite3.Connection):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        # WAL allows concurrent reads during writes
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()


# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for declarative models
Base = declarative_base()


def sqlite_database_path(database_url: str) -> Optional[Path]:
    """Return the file path of a SQLite URL, or None for memory/non-SQLite URLs."""
    if not _is_sqlite_url(database_url):
        return None
    database = make_url(database_url).database
    if not database or database == ":memory:":
        return None
    return Path(database)


def _sqlite_table_has_column(dbapi_conn, table_name: str, column_name: str) -> bool:
    cursor = dbapi_conn.cursor()
    try:
        cursor.execute(f"PRAGMA table_info({table_name})")
        cols = [row[1] for row in cursor.fetchall()]  # row[1] is column name
        return column_name in cols
    finally:
        cursor.close()


def get_session_factory(engine_override: Engine = None) -> sessionmaker:
    """Return a session factory bound to engine_override (or the module engine)."""
    if engine_override is None:
        return SessionLocal
    return sessionmaker(autocommit=False, autoflush=False, bind=engine_override)


def init_db(engine_override: Engine = None, min_interval_days: int = DEFAULT_MIN_INTERVAL_DAYS) -> int:
    """Initialize database schema.

    Creates the SQLite parent directory when needed, creates the tables,
    then imports rows left by the previous on-disk layout.

    Returns:
        Number of legacy rows imported
    """
    from memobot.database import models  # noqa: F401  registers TaskDB on Base
    from memobot.database.legacy import import_legacy_tasks

    use_engine = engine_override or engine
    db_path = sqlite_database_path(str(use_engine.url))
    if db_path is not None:
        db_path.parent.mkdir(parents=True, exist_ok=True)

    Base.metadata.create_all(bind=use_engine)
    imported = import_legacy_tasks(use_engine, min_interval_days)
    logger.debug(f"Database ready at {use_engine.url!r}")
    return imported
