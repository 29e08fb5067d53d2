"""Shared pytest fixtures for all tests."""

import sqlite3
import pytest
from pathlib import Path

from api.app import create_app
from config import Config, get_schema_path
from services.base import Services
from tests.helpers import apply_schema


@pytest.fixture
def test_db():
    """Create an in-memory SQLite database for testing.

    Yields:
        sqlite3.Connection: Connection to in-memory database.
    """
    conn = sqlite3.connect(":memory:", check_same_thread=False)
    conn.row_factory = sqlite3.Row
    yield conn
    conn.close()


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration pointing to a temporary database.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "tally",
        db_data_dir=tmp_path / "tally" / "db",
        db_filename="test.db",
        log_level="DEBUG",
        log_dir=tmp_path / "tally" / "logs",
    )


@pytest.fixture
def db_manager_with_schema(test_db):
    """Create a DatabaseManager with schema already set up.

    Args:
        test_db: In-memory database connection fixture.

    Returns:
        DatabaseManager: Database manager with schema ready.
    """
    apply_schema(test_db, get_schema_path())

    class TestDatabaseManager:
        """Test database manager that uses in-memory connection."""

        def __init__(self, conn):
            self.conn = conn

        def open(self):
            return self.conn

        def connect(self):
            """Return a context manager for the test connection."""
            return _TestConnectionContext(self.conn)

        def init_schema(self):
            apply_schema(self.conn, get_schema_path())

        def close(self):
            # The test_db fixture closes the connection
            pass

        def get_db_path(self):
            """Return a fake path for the test database."""
            return Path(":memory:")

    class _TestConnectionContext:
        """Context manager for test database connections."""

        def __init__(self, conn):
            self.conn = conn

        def __enter__(self):
            return self.conn

        def __exit__(self, exc_type, exc_val, exc_tb):
            # Keep the connection open; the test_db fixture closes it
            if exc_type is not None:
                self.conn.rollback()

    return TestDatabaseManager(test_db)


@pytest.fixture
def services(test_config, db_manager_with_schema):
    """Create a Services container with test database.

    Returns:
        Services: Services container for testing.
    """
    return Services(test_config, db_manager=db_manager_with_schema)


@pytest.fixture
def app(services):
    """Create the Flask app wired to the test services."""
    app = create_app(services)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    """Flask test client for the API."""
    return app.test_client()
