"""
score_db.py: Key/value persistence for the local best score.
"""

import logging
import sqlite3
from typing import Optional

from .constants import DB_FILE, HIGH_SCORE_KEY

logger = logging.getLogger(__name__)


class HighScoreStore:
    """Handles all interaction with the SQLite database."""

    def __init__(self, db_file: str = DB_FILE, key: str = HIGH_SCORE_KEY):
        self.key = key
        self.conn = sqlite3.connect(db_file)
        self.cur = self.conn.cursor()
        self.setup()

    def setup(self):
        """Creates the settings table if it doesn't exist."""
        self.cur.execute("""
            CREATE TABLE IF NOT EXISTS Settings (
                key TEXT PRIMARY KEY,
                value INTEGER NOT NULL
            )
        """)
        self.conn.commit()

    def load(self) -> int:
        """Returns the stored best score, or 0 on first run."""
        value = self._get(self.key)
        return 0 if value is None else value

    def save(self, value: int):
        """Overwrites the stored best score."""
        if value < 0:
            raise ValueError(f"High score cannot be negative: {value}")
        self.cur.execute(
            "INSERT OR REPLACE INTO Settings (key, value) VALUES (?, ?)", (self.key, int(value)))
        self.conn.commit()
        logger.info("Saved high score %d", value)

    def _get(self, key: str) -> Optional[int]:
        self.cur.execute("SELECT value FROM Settings WHERE key=?", (key,))
        row = self.cur.fetchone()
        return None if row is None else int(row[0])

    def close(self):
        self.conn.close()
