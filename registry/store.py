"""Record stores: keyed storage for file records plus the id counter."""

import sqlite3
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Dict, Generator, Iterator, Optional

from common.logging_config import get_logger
from common.types import FileRecord
from registry.database import open_connection
from registry.exceptions import IdCollisionError, InvalidFieldError
from registry.repositories import CounterRepository, FileRepository

logger = get_logger(__name__)


class RecordStore(ABC):
    """
    Persistent mapping from file id to record, plus the next unused id.

    Purely structural: no ownership or content checks happen here.
    """

    @abstractmethod
    def get(self, file_id: int) -> Optional[FileRecord]:
        ...

    @abstractmethod
    def put(self, file_id: int, record: FileRecord) -> None:
        ...

    @abstractmethod
    def insert(self, file_id: int, record: FileRecord) -> None:
        """Store a new record; raises IdCollisionError if the id is taken."""
        ...

    @abstractmethod
    def remove(self, file_id: int) -> None:
        ...

    @abstractmethod
    def load_counter(self) -> int:
        ...

    @abstractmethod
    def save_counter(self, value: int) -> None:
        ...

    @abstractmethod
    def iter_records(self) -> Iterator[FileRecord]:
        """Yield every stored record in id order."""
        ...

    @contextmanager
    def transaction(self) -> Generator[None, None, None]:
        """Group the writes of one operation. Default: writes apply directly."""
        yield

    def close(self) -> None:
        pass


class MemoryRecordStore(RecordStore):
    def __init__(self):
        self._records: Dict[int, FileRecord] = {}
        self._counter = 0

    def get(self, file_id: int) -> Optional[FileRecord]:
        return self._records.get(file_id)

    def put(self, file_id: int, record: FileRecord) -> None:
        self._records[file_id] = record

    def insert(self, file_id: int, record: FileRecord) -> None:
        if file_id in self._records:
            raise IdCollisionError(f"File id {file_id} is already stored")
        self._records[file_id] = record

    def remove(self, file_id: int) -> None:
        self._records.pop(file_id, None)

    def load_counter(self) -> int:
        return self._counter

    def save_counter(self, value: int) -> None:
        self._counter = value

    def iter_records(self) -> Iterator[FileRecord]:
        for file_id in sorted(self._records):
            yield self._records[file_id]


class SqliteRecordStore(RecordStore):
    """
    Record store backed by a single SQLite connection.

    Several stores may share one database file: transactions take the write
    lock up front (BEGIN IMMEDIATE) so counter reads and writes inside one
    transaction are not interleaved with another connection's.

    Owner identities are stored as TEXT, so only string identities are accepted.
    """

    def __init__(self, db_path: Optional[str] = None, conn: Optional[sqlite3.Connection] = None):
        self.conn = conn if conn is not None else open_connection(db_path)
        self._in_transaction = False

    def get(self, file_id: int) -> Optional[FileRecord]:
        return FileRepository.get_by_id(file_id, conn=self.conn)

    def put(self, file_id: int, record: FileRecord) -> None:
        self._require_text_owner(record)
        with self.transaction():
            FileRepository.upsert_file(record, conn=self.conn)

    def insert(self, file_id: int, record: FileRecord) -> None:
        self._require_text_owner(record)
        with self.transaction():
            try:
                FileRepository.insert_file(record, conn=self.conn)
            except sqlite3.IntegrityError as e:
                raise IdCollisionError(f"File id {file_id} is already stored") from e

    def remove(self, file_id: int) -> None:
        with self.transaction():
            FileRepository.delete_file(file_id, conn=self.conn)

    def load_counter(self) -> int:
        return CounterRepository.get_next_file_id(conn=self.conn)

    def save_counter(self, value: int) -> None:
        with self.transaction():
            CounterRepository.set_next_file_id(value, conn=self.conn)

    def iter_records(self) -> Iterator[FileRecord]:
        yield from FileRepository.list_all(conn=self.conn)

    @contextmanager
    def transaction(self) -> Generator[None, None, None]:
        """
        Commit on success, roll back on error. Nested calls join the outer transaction.
        """
        if self._in_transaction:
            yield
            return

        if self.conn.in_transaction:
            self.conn.commit()
        self.conn.execute("BEGIN IMMEDIATE")
        self._in_transaction = True
        try:
            yield
            self.conn.commit()
        except Exception:
            logger.warning("Rolling back registry transaction", exc_info=True)
            self.conn.rollback()
            raise
        finally:
            self._in_transaction = False

    def close(self) -> None:
        self.conn.close()

    @staticmethod
    def _require_text_owner(record: FileRecord) -> None:
        if not isinstance(record.owner, str):
            raise InvalidFieldError(
                f"SQLite store requires string owner identities, got {type(record.owner).__name__}"
            )
