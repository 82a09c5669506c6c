"""Tests for database engine setup and initialization."""

from pathlib import Path

from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine

from graphedit.infrastructure.database.engine import create_db_engine, init_database


class TestCreateDbEngine:
    def test_creates_engine(self, tmp_path: Path) -> None:
        engine = create_db_engine(tmp_path / "test.db")
        assert engine is not None

    def test_wal_mode_enabled(self, tmp_path: Path) -> None:
        engine = create_db_engine(tmp_path / "test.db")
        with engine.connect() as conn:
            assert conn.execute(text("PRAGMA journal_mode")).scalar() == "wal"
        engine.dispose()


class TestInitDatabase:
    def test_creates_storage_directory(self, tmp_path: Path) -> None:
        init_database(tmp_path).dispose()
        assert (tmp_path / ".graphedit").is_dir()

    def test_creates_db_file(self, tmp_path: Path) -> None:
        init_database(tmp_path).dispose()
        assert (tmp_path / ".graphedit" / "graphedit.db").exists()

    def test_custom_location(self, tmp_path: Path) -> None:
        init_database(tmp_path, directory="state", filename="canvas.db").dispose()
        assert (tmp_path / "state" / "canvas.db").exists()

    def test_creates_kv_table(self, db_engine: Engine) -> None:
        inspector = inspect(db_engine)
        assert "kv_store" in inspector.get_table_names()
        columns = {c["name"] for c in inspector.get_columns("kv_store")}
        assert columns == {"key", "value", "updated"}

    def test_idempotent(self, tmp_path: Path) -> None:
        init_database(tmp_path).dispose()
        engine = init_database(tmp_path)
        assert "kv_store" in inspect(engine).get_table_names()
        engine.dispose()
