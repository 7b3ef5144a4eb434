"""Repository for the persisted id counter."""

import sqlite3

from registry.database import NEXT_FILE_ID_KEY


class CounterRepository:
    @staticmethod
    def get_next_file_id(conn: sqlite3.Connection) -> int:
        cursor = conn.cursor()
        cursor.execute(
            "SELECT value FROM registry_state WHERE key = ?",
            (NEXT_FILE_ID_KEY,)
        )
        row = cursor.fetchone()

        if row is None:
            return 0

        return int(row["value"])

    @staticmethod
    def set_next_file_id(value: int, conn: sqlite3.Connection) -> None:
        cursor = conn.cursor()
        cursor.execute(
            "INSERT OR REPLACE INTO registry_state (key, value) VALUES (?, ?)",
            (NEXT_FILE_ID_KEY, str(value))
        )
