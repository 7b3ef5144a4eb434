"""File repository for database operations."""

import sqlite3
from typing import List, Optional, Tuple

from common.logging_config import get_logger
from common.types import FileKind, FileRecord

logger = get_logger(__name__)


def _row_to_record(row: sqlite3.Row) -> FileRecord:
    return FileRecord(
        file_id=int(row["file_id"]),
        name=row["name"],
        kind=FileKind.parse(row["kind"]),
        size=int(row["size"]),
        description=row["description"],
        created_at=int(row["created_at"]),
        owner=row["owner"],
    )


def _record_params(record: FileRecord) -> Tuple[str, str, str, str, str, str, str]:
    return (
        str(record.file_id),
        record.name,
        record.kind.value,
        str(record.size),
        record.description,
        str(record.created_at),
        record.owner,
    )


class FileRepository:
    @staticmethod
    def get_by_id(file_id: int, conn: sqlite3.Connection) -> Optional[FileRecord]:
        cursor = conn.cursor()
        cursor.execute(
            """
            SELECT file_id, name, kind, size, description, created_at, owner
            FROM files WHERE file_id = ?
            """,
            (str(file_id),)
        )
        row = cursor.fetchone()

        if row is None:
            return None

        return _row_to_record(row)

    @staticmethod
    def insert_file(record: FileRecord, conn: sqlite3.Connection) -> None:
        """
        Insert a new file row. Raises sqlite3.IntegrityError if the id exists.
        """
        cursor = conn.cursor()
        cursor.execute(
            """
            INSERT INTO files (file_id, name, kind, size, description, created_at, owner)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            _record_params(record)
        )

    @staticmethod
    def upsert_file(record: FileRecord, conn: sqlite3.Connection) -> None:
        cursor = conn.cursor()
        cursor.execute(
            """
            INSERT OR REPLACE INTO files (file_id, name, kind, size, description, created_at, owner)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            _record_params(record)
        )

    @staticmethod
    def delete_file(file_id: int, conn: sqlite3.Connection) -> None:
        """
        Hard delete a file row. Missing rows are ignored.
        """
        logger.debug(f"Deleting file row [file_id={file_id}]")
        cursor = conn.cursor()
        cursor.execute("DELETE FROM files WHERE file_id = ?", (str(file_id),))

    @staticmethod
    def list_all(conn: sqlite3.Connection) -> List[FileRecord]:
        cursor = conn.cursor()
        cursor.execute(
            "SELECT file_id, name, kind, size, description, created_at, owner FROM files"
        )
        records = [_row_to_record(row) for row in cursor.fetchall()]
        return sorted(records, key=lambda record: record.file_id)
