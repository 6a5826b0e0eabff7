"""Tests for database engine setup and initialization."""

from pathlib import Path

from sqlalchemy import inspect, text

from crateguard.infrastructure.database.engine import create_db_engine, init_database


class TestCreateDbEngine:
    def test_wal_mode_enabled(self, tmp_path: Path) -> None:
        engine = create_db_engine(tmp_path / "test.db")
        with engine.connect() as conn:
            assert conn.execute(text("PRAGMA journal_mode")).scalar() == "wal"
        engine.dispose()

    def test_foreign_keys_enabled(self, tmp_path: Path) -> None:
        engine = create_db_engine(tmp_path / "test.db")
        with engine.connect() as conn:
            assert conn.execute(text("PRAGMA foreign_keys")).scalar() == 1
        engine.dispose()


class TestInitDatabase:
    def test_creates_parent_directory(self, tmp_path: Path) -> None:
        db_path = tmp_path / "nested" / ".crateguard" / "registry.db"
        engine = init_database(db_path)
        assert db_path.parent.is_dir()
        assert db_path.is_file()
        engine.dispose()

    def test_creates_tables(self, tmp_path: Path) -> None:
        engine = init_database(tmp_path / "registry.db")
        tables = set(inspect(engine).get_table_names())
        assert {"version_downloads", "crate_downloads"} <= tables
        engine.dispose()

    def test_idempotent(self, tmp_path: Path) -> None:
        init_database(tmp_path / "registry.db").dispose()
        engine = init_database(tmp_path / "registry.db")
        assert "version_downloads" in inspect(engine).get_table_names()
        engine.dispose()
