"""
SQLite database operations for Radio Player
"""

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

from loguru import logger

from .config import get_data_dir


# Database schema version for migrations
SCHEMA_VERSION = 1


def get_database_path() -> Path:
    """Get the path to the SQLite database file."""
    return get_data_dir() / "radio_player.db"


@contextmanager
def get_db_connection(db_path: Optional[Path] = None):
    """Get a database connection with proper cleanup."""
    path = db_path if db_path is not None else get_database_path()
    conn = sqlite3.connect(path, timeout=10.0)
    conn.row_factory = sqlite3.Row  # Enable dict-like access

    try:
        yield conn
    finally:
        conn.close()


def migrate_database(conn, current_version: int) -> None:
    """Migrate database from current_version to latest schema."""
    if current_version < 1:
        # Single-row table holding the selected station index
        conn.execute("""
            CREATE TABLE IF NOT EXISTS selection_state (
                id INTEGER PRIMARY KEY CHECK (id = 1),
                current_station INTEGER NOT NULL DEFAULT -1,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        conn.execute("""
            INSERT OR IGNORE INTO selection_state (id, current_station)
            VALUES (1, -1)
        """)

        conn.commit()


def init_database(db_path: Optional[Path] = None) -> None:
    """Initialize the database with required tables."""
    path = db_path if db_path is not None else get_database_path()

    # Ensure data directory exists
    path.parent.mkdir(parents=True, exist_ok=True)

    with get_db_connection(path) as conn:
        conn.execute("""
            CREATE TABLE IF NOT EXISTS schema_version (
                version INTEGER PRIMARY KEY
            )
        """)

        cursor = conn.execute("SELECT MAX(version) AS version FROM schema_version")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        if current_version < SCHEMA_VERSION:
            logger.info(
                f"Migrating database {path} from v{current_version} to v{SCHEMA_VERSION}"
            )
            migrate_database(conn, current_version)
            conn.execute(
                "INSERT OR REPLACE INTO schema_version (version) VALUES (?)",
                (SCHEMA_VERSION,),
            )
            conn.commit()
