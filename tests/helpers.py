"""Helper utilities for tests."""

from pathlib import Path
import sqlite3


def apply_schema(conn: sqlite3.Connection, schema_path: Path) -> None:
    """Create the tables described by the schema file.

    Args:
        conn: SQLite connection to set up.
        schema_path: Path to the schema .sql file.
    """
    with open(schema_path, "r") as f:
        sql = f.read()

    conn.executescript(sql)
    conn.commit()
