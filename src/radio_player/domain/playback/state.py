"""
Persisted playback selection for Radio Player

Keeps the selected station index in SQLite so it survives restarts.
"""

import sqlite3
from pathlib import Path
from typing import Optional

from loguru import logger

from radio_player.core.database import get_db_connection, init_database


class SQLiteSelectionStore:
    """Selected station index backed by the selection_state table."""

    def __init__(self, db_path: Optional[Path] = None):
        self.db_path = db_path
        try:
            init_database(db_path)
        except (sqlite3.Error, OSError):
            logger.exception("Failed to open selection database, selection will not persist")

    def load(self) -> int:
        """
        Get the persisted station index.

        Returns:
            Saved index, or -1 if nothing was ever selected or the
            database cannot be read
        """
        try:
            with get_db_connection(self.db_path) as conn:
                cursor = conn.execute("""
                    SELECT current_station FROM selection_state WHERE id = 1
                """)
                row = cursor.fetchone()
                return row["current_station"] if row else -1
        except sqlite3.Error:
            logger.exception("Failed to read station selection")
            return -1

    def save(self, index: int) -> None:
        """
        Persist the station index.

        Args:
            index: Station index, -1 for no selection
        """
        try:
            with get_db_connection(self.db_path) as conn:
                conn.execute("""
                    INSERT OR REPLACE INTO selection_state (id, current_station, updated_at)
                    VALUES (1, ?, CURRENT_TIMESTAMP)
                """, (index,))
                conn.commit()
        except sqlite3.Error:
            logger.exception(f"Failed to persist station selection: index={index}")
