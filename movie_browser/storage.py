import json
import os
import sqlite3

from movie_browser.config import DB_PATH


class KeyValueStore:
    """
    String key -> JSON value store persisted in a single SQLite table.

    Stands in for the browser's local storage: values are JSON-encoded on
    write and decoded on read, missing keys read as ``None``.
    """

    def __init__(self, db_path=DB_PATH):
        self.db_path = db_path
        self.init_db()

    def get_db_connection(self):
        """
        Establishes a connection to the SQLite database.

        Returns:
            sqlite3.Connection: A connection object with row_factory set to sqlite3.Row.
        """
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def init_db(self):
        """
        Creates the 'kv' table (and its parent directory) if missing.
        """
        directory = os.path.dirname(self.db_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        conn = self.get_db_connection()
        c = conn.cursor()
        c.execute(
            """
            CREATE TABLE IF NOT EXISTS kv (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            )
        """
        )
        conn.commit()
        conn.close()

    def get(self, key):
        conn = self.get_db_connection()
        c = conn.cursor()
        c.execute("SELECT value FROM kv WHERE key = ?", (key,))
        row = c.fetchone()
        conn.close()
        if row is None:
            return None
        return json.loads(row["value"])

    def set(self, key, value):
        conn = self.get_db_connection()
        c = conn.cursor()
        c.execute(
            "INSERT OR REPLACE INTO kv (key, value) VALUES (?, ?)",
            (key, json.dumps(value)),
        )
        conn.commit()
        conn.close()

    def remove(self, key):
        conn = self.get_db_connection()
        c = conn.cursor()
        c.execute("DELETE FROM kv WHERE key = ?", (key,))
        conn.commit()
        conn.close()
