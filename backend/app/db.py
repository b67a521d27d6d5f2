"""Database connection and session management."""
import logging
import os
import shutil
import sqlite3
from datetime import datetime, timezone
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from .settings import DATABASE_URL

logger = logging.getLogger(__name__)

engine = create_engine(DATABASE_URL, connect_args={"check_same_thread": False})
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

# Columns every table must carry for the current code to work.
REQUIRED_SCHEMA = {
    "game_sessions": [
        "user_id", "total_score", "puzzles_solved", "puzzles_attempted",
        "session_duration_seconds", "created_at", "updated_at",
    ],
    "puzzle_results": [
        "game_session_id", "user_id", "puzzle_type", "puzzle_data",
        "user_answer", "correct_answer", "is_correct", "time_taken_seconds",
        "points_earned", "created_at",
    ],
    "user_stats": [
        "user_id", "total_score", "total_puzzles_solved",
        "total_puzzles_attempted", "best_session_score",
        "average_time_per_puzzle", "math_puzzles_solved",
        "science_puzzles_solved", "puzzle_puzzles_solved",
        "created_at", "updated_at",
    ],
}


def _get_sqlite_path() -> Path | None:
    """Extract the filesystem path from a sqlite:/// URL.  Returns None for
    non-file databases (e.g. :memory: or non-SQLite engines)."""
    if not DATABASE_URL.startswith("sqlite:///"):
        return None
    raw = DATABASE_URL.replace("sqlite:///", "", 1)
    if raw == ":memory:" or raw == "":
        return None
    return Path(raw)


def _get_table_columns(cursor: sqlite3.Cursor, table: str) -> set[str]:
    cursor.execute(f"PRAGMA table_info({table})")
    return {row[1] for row in cursor.fetchall()}


def _list_tables(cursor: sqlite3.Cursor) -> set[str]:
    cursor.execute("SELECT name FROM sqlite_master WHERE type='table'")
    return {row[0] for row in cursor.fetchall()}


def _get_tables(db_path: Path) -> set[str]:
    conn = sqlite3.connect(str(db_path))
    try:
        return _list_tables(conn.cursor())
    finally:
        conn.close()


def check_schema(db_path: Path) -> dict[str, list[str]]:
    """Return a dict of {table: [missing_columns]} for every table that is
    either missing entirely or lacks required columns.  An empty dict means
    the schema is up to date."""
    missing: dict[str, list[str]] = {}

    conn = sqlite3.connect(str(db_path))
    try:
        cursor = conn.cursor()
        existing_tables = _list_tables(cursor)

        for table, required_cols in REQUIRED_SCHEMA.items():
            if table not in existing_tables:
                missing[table] = required_cols
            else:
                actual_cols = _get_table_columns(cursor, table)
                cols_missing = [c for c in required_cols if c not in actual_cols]
                if cols_missing:
                    missing[table] = cols_missing
    finally:
        conn.close()

    return missing


def ensure_schema():
    """Run at application startup.  Guarantees the SQLite file has all
    required tables and columns, or fails fast with actionable guidance.

    Behaviour depends on the ALLOW_DEV_DB_RESET env-var:
      * "1"  → back up the stale DB and recreate it from scratch.
      * unset → raise RuntimeError listing every missing column.

    Missing tables alone are not an error: ``create_all`` adds them.  For
    in-memory or non-SQLite databases the function simply delegates to
    ``Base.metadata.create_all()``.
    """
    # Tables must be registered on Base.metadata before create_all runs.
    from . import models  # noqa: F401

    db_path = _get_sqlite_path()

    if db_path is None:
        Base.metadata.create_all(bind=engine)
        return

    if not db_path.exists():
        Base.metadata.create_all(bind=engine)
        logger.info("Created new database at %s", db_path)
        return

    missing = check_schema(db_path)

    # Tables that don't exist yet are created below; only stale tables
    # (present but lacking columns) block startup.
    existing_tables = _get_tables(db_path)
    stale = {t: cols for t, cols in missing.items() if t in existing_tables}

    if not stale:
        Base.metadata.create_all(bind=engine)
        return

    allow_reset = os.getenv("ALLOW_DEV_DB_RESET", "") == "1"

    if allow_reset:
        ts = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
        backup_path = db_path.with_suffix(f".db.bak-{ts}")
        engine.dispose()
        shutil.move(str(db_path), str(backup_path))
        logger.warning(
            "Schema mismatch detected.  Old DB backed up to %s.  "
            "Recreating fresh database.",
            backup_path,
        )
        Base.metadata.create_all(bind=engine)
        logger.info("Fresh database created at %s", db_path)
        return

    lines = ["Database schema is out of date.  Missing columns:"]
    for table, cols in sorted(stale.items()):
        lines.append(f"  {table}: {', '.join(cols)}")
    lines.append("")
    lines.append("Set ALLOW_DEV_DB_RESET=1 to auto-backup and recreate the DB.")
    raise RuntimeError("\n".join(lines))


def get_db():
    """Dependency that provides a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
