"""Test automatic schema bootstrap / dev DB reset logic."""
import os
import sqlite3
from pathlib import Path
from unittest import mock

import pytest

from backend.app.db import check_schema, ensure_schema, Base, REQUIRED_SCHEMA
import backend.app.models  # noqa: F401  (registers tables on Base.metadata)


def _create_old_schema_db(path: Path):
    """Create a SQLite DB whose user_stats predates the per-category
    counters and average time column."""
    conn = sqlite3.connect(str(path))
    cursor = conn.cursor()

    cursor.execute("""
        CREATE TABLE user_stats (
            id INTEGER PRIMARY KEY,
            user_id TEXT NOT NULL UNIQUE,
            total_score INTEGER NOT NULL,
            total_puzzles_solved INTEGER NOT NULL,
            total_puzzles_attempted INTEGER NOT NULL,
            best_session_score INTEGER NOT NULL,
            created_at TEXT NOT NULL,
            updated_at TEXT NOT NULL
        )
    """)

    cursor.execute(
        "INSERT INTO user_stats "
        "(user_id, total_score, total_puzzles_solved, total_puzzles_attempted, "
        "best_session_score, created_at, updated_at) "
        "VALUES (?, ?, ?, ?, ?, ?, ?)",
        ("user-old", 120, 8, 10, 60, "2024-01-01T00:00:00Z", "2024-01-01T00:00:00Z"),
    )

    conn.commit()
    conn.close()


class TestCheckSchema:
    """Tests for the pure check_schema() function."""

    def test_detects_missing_columns_on_old_db(self, tmp_path):
        db_path = tmp_path / "old.db"
        _create_old_schema_db(db_path)

        missing = check_schema(db_path)

        assert "user_stats" in missing
        assert "average_time_per_puzzle" in missing["user_stats"]
        assert "math_puzzles_solved" in missing["user_stats"]
        assert "total_score" not in missing["user_stats"]

        # Tables that don't exist at all are reported in full
        assert missing["game_sessions"] == REQUIRED_SCHEMA["game_sessions"]
        assert "puzzle_results" in missing

    def test_returns_empty_for_up_to_date_db(self, tmp_path):
        """A freshly-created DB (via create_all) should pass the check."""
        db_path = tmp_path / "fresh.db"
        fresh_engine = _make_engine(f"sqlite:///{db_path}")
        Base.metadata.create_all(bind=fresh_engine)
        fresh_engine.dispose()

        missing = check_schema(db_path)
        assert missing == {}

    def test_detects_missing_table(self, tmp_path):
        """A DB with no tables at all should report everything missing."""
        db_path = tmp_path / "empty.db"
        conn = sqlite3.connect(str(db_path))
        conn.close()

        missing = check_schema(db_path)
        for table in REQUIRED_SCHEMA:
            assert table in missing


class TestEnsureSchema:
    """Tests for the ensure_schema() startup logic."""

    def test_dev_reset_backs_up_and_recreates(self, tmp_path):
        """ALLOW_DEV_DB_RESET=1 should back up the stale DB and create a
        fresh one that passes schema checks."""
        db_path = tmp_path / "puzzles.db"
        _create_old_schema_db(db_path)

        db_url = f"sqlite:///{db_path}"
        eng = _make_engine(db_url)

        with mock.patch("backend.app.db.DATABASE_URL", db_url), \
             mock.patch("backend.app.db.engine", eng), \
             mock.patch.dict(os.environ, {"ALLOW_DEV_DB_RESET": "1"}):
            ensure_schema()
        eng.dispose()

        bak_files = list(tmp_path.glob("puzzles.db.bak-*"))
        assert len(bak_files) == 1

        assert db_path.exists()
        assert check_schema(db_path) == {}

        # Backup should still have the old data
        conn = sqlite3.connect(str(bak_files[0]))
        cursor = conn.cursor()
        cursor.execute("SELECT user_id FROM user_stats")
        rows = cursor.fetchall()
        conn.close()
        assert ("user-old",) in rows

    def test_no_reset_raises_clear_error(self, tmp_path):
        """Without ALLOW_DEV_DB_RESET, ensure_schema must raise RuntimeError
        listing the missing columns and how to recover."""
        db_path = tmp_path / "puzzles.db"
        _create_old_schema_db(db_path)

        db_url = f"sqlite:///{db_path}"
        eng = _make_engine(db_url)

        with mock.patch("backend.app.db.DATABASE_URL", db_url), \
             mock.patch("backend.app.db.engine", eng), \
             mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop("ALLOW_DEV_DB_RESET", None)
            with pytest.raises(RuntimeError) as exc_info:
                ensure_schema()
        eng.dispose()

        msg = str(exc_info.value)
        assert "average_time_per_puzzle" in msg
        assert "ALLOW_DEV_DB_RESET" in msg
        # Tables that are merely absent are not part of the complaint
        assert "game_sessions" not in msg

    def test_missing_tables_are_created_without_reset(self, tmp_path):
        """An older DB that only lacks whole tables is upgraded in place."""
        db_path = tmp_path / "puzzles.db"
        conn = sqlite3.connect(str(db_path))
        conn.execute("CREATE TABLE unrelated (id INTEGER PRIMARY KEY)")
        conn.commit()
        conn.close()

        db_url = f"sqlite:///{db_path}"
        eng = _make_engine(db_url)

        with mock.patch("backend.app.db.DATABASE_URL", db_url), \
             mock.patch("backend.app.db.engine", eng):
            ensure_schema()
        eng.dispose()

        assert check_schema(db_path) == {}
        assert not list(tmp_path.glob("puzzles.db.bak-*"))

    def test_fresh_db_creates_cleanly(self, tmp_path):
        """If the DB file doesn't exist, ensure_schema creates it."""
        db_path = tmp_path / "puzzles.db"
        assert not db_path.exists()

        db_url = f"sqlite:///{db_path}"
        eng = _make_engine(db_url)

        with mock.patch("backend.app.db.DATABASE_URL", db_url), \
             mock.patch("backend.app.db.engine", eng):
            ensure_schema()
        eng.dispose()

        assert db_path.exists()
        assert check_schema(db_path) == {}

    def test_in_memory_always_works(self):
        """In-memory DBs (test path) should always succeed."""
        db_url = "sqlite:///:memory:"
        eng = _make_engine(db_url)

        with mock.patch("backend.app.db.DATABASE_URL", db_url), \
             mock.patch("backend.app.db.engine", eng):
            ensure_schema()

        eng.dispose()


def _make_engine(db_url: str):
    """Helper to create a disposable engine for testing."""
    from sqlalchemy import create_engine as ce
    return ce(db_url, connect_args={"check_same_thread": False})
