"""Database schema and connection management for SQLite."""

import sqlite3
from pathlib import Path
from typing import Optional

from registry import config

NEXT_FILE_ID_KEY = "next_file_id"


def init_database(conn: sqlite3.Connection) -> None:
    """
    Create tables if they don't exist and seed the id counter.

    Unsigned 64-bit values (ids, sizes, timestamps, the counter) are stored as
    decimal TEXT because SQLite integers are signed 64-bit.
    """
    cursor = conn.cursor()

    cursor.execute("""
        CREATE TABLE IF NOT EXISTS files (
            file_id TEXT PRIMARY KEY,
            name TEXT NOT NULL,
            kind TEXT NOT NULL,
            size TEXT NOT NULL,
            description TEXT NOT NULL,
            created_at TEXT NOT NULL,
            owner TEXT NOT NULL
        )
    """)

    cursor.execute("""
        CREATE TABLE IF NOT EXISTS registry_state (
            key TEXT PRIMARY KEY,
            value TEXT NOT NULL
        )
    """)

    cursor.execute(
        "INSERT OR IGNORE INTO registry_state (key, value) VALUES (?, ?)",
        (NEXT_FILE_ID_KEY, "0")
    )

    conn.commit()


def open_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """
    Open a connection to the registry database, creating it if needed.

    Args:
        db_path: Database file path, or ":memory:". Defaults to config.DATABASE_PATH

    Returns:
        Connection with rows returned as sqlite3.Row and the schema initialized
    """
    if db_path is None:
        db_path = config.DATABASE_PATH

    if db_path != ":memory:":
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    init_database(conn)
    return conn
