"""
SQLite database integration and simple migration system.

This module provides functions for opening a database connection
(``get_connection``) and applying migrations (``init_db``).  SQLite
serves as the durable, key-ordered storage primitive underneath the
record stores: every entity kind gets its own table keyed by the shared
integer id, and the id counter lives in a one-row-per-counter table.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from pathlib import Path
from typing import Optional

from .config import settings

logger = logging.getLogger(__name__)

MEMORY_DATABASE = ":memory:"

# Each migration is (version, script).  Append new migrations with an
# incremented version number; never edit an applied one.
MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: record stores and the shared id counter
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS id_counter (
            name TEXT PRIMARY KEY,
            value INTEGER NOT NULL
        );

        CREATE TABLE IF NOT EXISTS poultry_records (
            id INTEGER PRIMARY KEY,
            data TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS egg_records (
            id INTEGER PRIMARY KEY,
            data TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS egg_orders (
            id INTEGER PRIMARY KEY,
            data TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS egg_prices (
            id INTEGER PRIMARY KEY,
            data TEXT NOT NULL
        );
        """,
    ),
]


def get_database_path(database_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    If the URL is ``:memory:`` or an absolute path, use it directly.
    Otherwise resolve it relative to the project root.
    """
    db_url = database_url or settings.database_url
    if db_url == MEMORY_DATABASE or os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent  # project root
    return str((base_dir / db_url).resolve())


def get_connection(database_url: Optional[str] = None) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    The connection may be shared between threads; callers serialise
    access themselves (see ``Repository.transaction``).  Rows are
    returned as dict-like objects keyed by column name.
    """
    db_path = get_database_path(database_url)
    conn = sqlite3.connect(db_path, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    if db_path != MEMORY_DATABASE:
        # Every commit must reach the disk before the caller is answered.
        conn.execute("PRAGMA synchronous = FULL")
    return conn


def init_db(conn: sqlite3.Connection) -> int:
    """Apply pending migrations and return the resulting schema version."""
    conn.execute("CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)")
    row = conn.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
    current_version = row["version"] if row and row["version"] is not None else 0

    for version, sql in MIGRATIONS:
        if version > current_version:
            conn.executescript(sql)
            conn.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
            current_version = version
            logger.info("Applied migration %s", version)
    conn.commit()
    return current_version
