"""Integration tests for the SQLite repositories and record stores."""

import sqlite3

import pytest

from common.constants import U64_MAX
from common.types import FileKind, FileRecord
from registry.database import init_database, open_connection
from registry.exceptions import IdCollisionError, InvalidFieldError
from registry.repositories import CounterRepository, FileRepository
from registry.services import FileRegistry
from registry.store import SqliteRecordStore


def _record(file_id=0, name="notes.txt", kind=FileKind.TXT, size=12, owner="alice"):
    return FileRecord(
        file_id=file_id,
        name=name,
        kind=kind,
        size=size,
        description="meeting notes",
        created_at=1_700_000_000_000,
        owner=owner,
    )


@pytest.fixture
def conn(db_path):
    conn = open_connection(db_path)
    yield conn
    conn.close()


class TestDatabase:
    def test_tables_created(self, conn):
        cursor = conn.cursor()
        cursor.execute("SELECT name FROM sqlite_master WHERE type='table'")
        tables = {row["name"] for row in cursor.fetchall()}

        assert {"files", "registry_state"} <= tables

    def test_files_table_columns(self, conn):
        cursor = conn.cursor()
        cursor.execute("PRAGMA table_info(files)")
        columns = {row[1] for row in cursor.fetchall()}

        assert columns == {"file_id", "name", "kind", "size", "description", "created_at", "owner"}

    def test_init_is_idempotent_and_keeps_counter(self, conn):
        CounterRepository.set_next_file_id(9, conn=conn)
        conn.commit()

        init_database(conn)

        assert CounterRepository.get_next_file_id(conn=conn) == 9

    def test_default_path_from_config(self, tmp_path, monkeypatch):
        db_path = tmp_path / "nested" / "default.db"
        monkeypatch.setattr("registry.config.DATABASE_PATH", str(db_path))

        conn = open_connection()
        try:
            assert CounterRepository.get_next_file_id(conn=conn) == 0
        finally:
            conn.close()
        assert db_path.exists()


class TestFileRepository:
    def test_upsert_and_get(self, conn):
        FileRepository.upsert_file(_record(), conn=conn)

        assert FileRepository.get_by_id(0, conn=conn) == _record()

    def test_get_missing(self, conn):
        assert FileRepository.get_by_id(3, conn=conn) is None

    def test_insert_rejects_existing_id(self, conn):
        FileRepository.insert_file(_record(), conn=conn)

        with pytest.raises(sqlite3.IntegrityError):
            FileRepository.insert_file(_record(owner="bob"), conn=conn)

        assert FileRepository.get_by_id(0, conn=conn).owner == "alice"

    def test_upsert_overwrites(self, conn):
        FileRepository.upsert_file(_record(), conn=conn)
        FileRepository.upsert_file(_record(name="renamed.txt"), conn=conn)

        assert FileRepository.get_by_id(0, conn=conn).name == "renamed.txt"
        assert len(FileRepository.list_all(conn=conn)) == 1

    def test_delete_is_hard_delete(self, conn):
        FileRepository.upsert_file(_record(), conn=conn)
        FileRepository.delete_file(0, conn=conn)

        cursor = conn.cursor()
        cursor.execute("SELECT COUNT(*) FROM files")
        assert cursor.fetchone()[0] == 0

    def test_delete_missing_is_noop(self, conn):
        FileRepository.delete_file(5, conn=conn)
        assert FileRepository.list_all(conn=conn) == []

    def test_u64_values_round_trip(self, conn):
        FileRepository.upsert_file(_record(file_id=U64_MAX - 1, size=U64_MAX), conn=conn)

        record = FileRepository.get_by_id(U64_MAX - 1, conn=conn)
        assert record.size == U64_MAX

    def test_list_all_orders_numerically(self, conn):
        for file_id in (10, 2, 1):
            FileRepository.upsert_file(_record(file_id=file_id), conn=conn)

        assert [r.file_id for r in FileRepository.list_all(conn=conn)] == [1, 2, 10]

    def test_unknown_stored_kind_reads_as_unknown(self, conn):
        conn.execute(
            "INSERT INTO files (file_id, name, kind, size, description, created_at, owner) "
            "VALUES ('0', 'x', 'MKV', '1', '', '0', 'alice')"
        )

        assert FileRepository.get_by_id(0, conn=conn).kind is FileKind.UNKNOWN


class TestSqliteRecordStore:
    def test_state_survives_reopen(self, db_path):
        store = SqliteRecordStore(db_path)
        registry = FileRegistry(store)
        registry.create("alice", 1, "a.txt", "txt", 1, "")
        registry.create("alice", 2, "b.txt", "txt", 2, "")
        registry.delete("alice", 1)
        store.close()

        reopened = SqliteRecordStore(db_path)
        registry = FileRegistry(reopened)
        try:
            assert registry.read(0).name == "a.txt"
            assert registry.read(1) is None
            assert registry.create("alice", 3, "c.txt", "txt", 3, "") == 2
        finally:
            reopened.close()

    def test_rejects_non_string_owner(self, sqlite_store):
        with pytest.raises(InvalidFieldError):
            sqlite_store.put(0, _record(owner=42))
        assert sqlite_store.get(0) is None

    def test_transaction_rolls_back_on_error(self, sqlite_store):
        with pytest.raises(RuntimeError):
            with sqlite_store.transaction():
                sqlite_store.put(0, _record())
                sqlite_store.save_counter(1)
                raise RuntimeError("boom")

        assert sqlite_store.get(0) is None
        assert sqlite_store.load_counter() == 0

    def test_transaction_commits(self, sqlite_store, db_path):
        with sqlite_store.transaction():
            sqlite_store.put(0, _record())
            sqlite_store.save_counter(1)

        conn = sqlite3.connect(db_path)
        try:
            assert conn.execute("SELECT COUNT(*) FROM files").fetchone()[0] == 1
        finally:
            conn.close()


def test_store_get_put_remove(store):
    assert store.get(0) is None

    store.put(0, _record())
    assert store.get(0) == _record()

    store.remove(0)
    assert store.get(0) is None

    store.remove(0)
    assert list(store.iter_records()) == []


class TestSqliteCreate:
    def test_failed_create_leaves_counter_and_next_id(self, sqlite_store):
        registry = FileRegistry(sqlite_store)

        with pytest.raises(InvalidFieldError):
            registry.create(7, 1, "a.txt", "txt", 1, "")

        assert sqlite_store.load_counter() == 0
        assert list(sqlite_store.iter_records()) == []
        assert registry.create("alice", 2, "b.txt", "txt", 2, "") == 0
        assert sqlite_store.load_counter() == 1

    def test_registries_sharing_a_database_do_not_collide(self, db_path):
        first_store = SqliteRecordStore(db_path)
        second_store = SqliteRecordStore(db_path)
        first = FileRegistry(first_store)
        second = FileRegistry(second_store)
        try:
            assert first.create("alice", 1, "a.txt", "txt", 1, "") == 0
            assert second.create("bob", 2, "b.txt", "txt", 2, "") == 1
            assert first.create("alice", 3, "c.txt", "txt", 3, "") == 2

            assert first.read(1).owner == "bob"
            assert second.read(0).owner == "alice"
            assert second_store.load_counter() == 3
        finally:
            first_store.close()
            second_store.close()

    def test_insert_existing_id_raises_collision(self, sqlite_store):
        sqlite_store.insert(0, _record())

        with pytest.raises(IdCollisionError):
            sqlite_store.insert(0, _record(owner="bob"))

        assert sqlite_store.get(0).owner == "alice"
