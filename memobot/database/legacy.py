"""Import of task rows written by earlier memobot releases.

Earlier releases kept everything in a single SQLite table:

    tasks(id INTEGER PRIMARY KEY, name TEXT, url TEXT, level INTEGER, due_date TEXT)

`level` counted successful reviews, which is what `streak` tracks now. The
old rows carry no interval, so imported tasks restart from the floor.
"""

import logging
from datetime import date

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from memobot.database.database import _is_sqlite_url, _sqlite_table_has_column
from memobot.database.models import TaskDB
from memobot.models.constants import DEFAULT_MIN_INTERVAL_DAYS

logger = logging.getLogger(__name__)

LEGACY_TABLE = "tasks"
IMPORTED_TABLE = "tasks_imported"


def has_legacy_table(use_engine: Engine) -> bool:
    """Return True if the old tasks table (with its level column) exists."""
    if not _is_sqlite_url(str(use_engine.url)):
        return False
    dbapi_conn = use_engine.raw_connection()
    try:
        return _sqlite_table_has_column(dbapi_conn, LEGACY_TABLE, "level")
    finally:
        dbapi_conn.close()


def _parse_level(raw) -> int:
    return max(0, int(raw or 0))


def import_legacy_tasks(use_engine: Engine, min_interval_days: int = DEFAULT_MIN_INTERVAL_DAYS) -> int:
    """Copy rows from the old tasks table into scheduled_tasks.

    The old table is renamed to tasks_imported in the same transaction, so
    the import runs at most once: tasks deleted afterwards stay deleted.
    Rows are only copied while scheduled_tasks is empty.

    Args:
        use_engine: Engine of the database to migrate
        min_interval_days: Interval given to every imported task

    Returns:
        Number of imported rows
    """
    if not has_legacy_table(use_engine):
        return 0

    imported = 0
    with Session(use_engine) as db:
        rows = []
        if db.query(TaskDB).count() == 0:
            rows = db.execute(
                text(f"SELECT id, name, url, level, due_date FROM {LEGACY_TABLE}")
            ).fetchall()

        for row in rows:
            name = (row.name or "").strip()
            if not name:
                logger.warning(f"Skipping legacy task {row.id}: empty name")
                continue
            try:
                due_date = date.fromisoformat(str(row.due_date))
            except ValueError:
                logger.warning(f"Skipping legacy task {row.id}: bad due_date {row.due_date!r}")
                continue
            try:
                streak = _parse_level(row.level)
            except (TypeError, ValueError):
                logger.warning(f"Skipping legacy task {row.id}: bad level {row.level!r}")
                continue

            db.add(
                TaskDB(
                    id=str(row.id),
                    name=name,
                    url=(row.url or "").strip() or None,
                    due_date=due_date,
                    interval_days=min_interval_days,
                    streak=streak,
                    last_rated_on=None,
                )
            )
            imported += 1

        try:
            db.flush()
            db.execute(text(f"ALTER TABLE {LEGACY_TABLE} RENAME TO {IMPORTED_TABLE}"))
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(f"Failed to import legacy tasks: {type(e).__name__}: {str(e)}")
            raise

    logger.info(f"Imported {imported} legacy tasks; '{LEGACY_TABLE}' renamed to '{IMPORTED_TABLE}'")
    return imported
