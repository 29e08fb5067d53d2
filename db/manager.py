"""Database manager for the shared SQLite connection."""

import sqlite3
import threading
from contextlib import contextmanager
from config import Config, get_schema_path


class DatabaseManager:
    """Owns the single store connection used by every request.

    Args:
        config: Application configuration object.
    """

    def __init__(self, config: Config):
        """Initialize the database manager.

        Args:
            config: Config object containing database configuration.
        """
        self.config = config
        self.conn = None
        self._lock = threading.RLock()

    def open(self) -> sqlite3.Connection:
        """Open the database file.

        Returns:
            sqlite3.Connection: The shared connection.

        Raises:
            sqlite3.Error: If the database file cannot be opened.
            OSError: If the data directory cannot be created.
        """
        if self.conn is None:
            db_path = self.config.db_path
            db_path.parent.mkdir(parents=True, exist_ok=True)

            conn = sqlite3.connect(db_path, check_same_thread=False)
            conn.row_factory = sqlite3.Row
            self.conn = conn
        return self.conn

    @contextmanager
    def connect(self):
        """Get the shared database connection for exclusive use.

        Request threads share one connection, so the block holds a lock from the
        first execute through the commit. A statement that fails inside the block
        leaves no transaction open for the next caller. The connection stays open
        after the block exits; call close() on shutdown.

        Yields:
            sqlite3.Connection: Database connection.
        """
        with self._lock:
            conn = self.open()
            try:
                yield conn
            except Exception:
                conn.rollback()
                raise

    def init_schema(self) -> None:
        """Create the tables if they do not exist yet."""
        with open(get_schema_path(), "r") as f:
            sql = f.read()

        with self.connect() as conn:
            conn.executescript(sql)
            conn.commit()

    def close(self) -> None:
        """Close the shared connection if it is open."""
        with self._lock:
            if self.conn is not None:
                self.conn.close()
                self.conn = None

    def get_db_path(self):
        """Get the current database path.

        Returns:
            Path: Path to the database file.
        """
        return self.config.db_path
