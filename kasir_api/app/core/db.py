"""
SQLite database integration and simple migration system.

This module resolves the ``DB_CONN`` connection string to a database
file (``resolve_database_path``), opens connections
(``get_connection``/``get_cursor``) and applies migrations on
application start (``init_db``).  It uses SQLite as a lightweight
embedded database; to switch to another DBMS you would replace the
connection logic and adapt SQL syntax accordingly.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from typing import Iterator

from .exceptions import DatabaseUnavailableError

logger = logging.getLogger(__name__)

SQLITE_URL_PREFIX = "sqlite:///"

MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: product catalog
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS products (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL DEFAULT '',
            price INTEGER NOT NULL DEFAULT 0,
            stock INTEGER NOT NULL DEFAULT 0
        );
        """,
    ),
]


def resolve_database_path(conn_string: str) -> str:
    """Turn a ``DB_CONN`` value into an absolute SQLite file path.

    Accepts a bare path or a ``sqlite:///`` URL (``sqlite:////abs/path``
    for absolute paths).  Relative paths are resolved against the
    current working directory.
    """
    value = (conn_string or "").strip()
    if not value:
        raise DatabaseUnavailableError("DB_CONN is not set")
    if value.startswith(SQLITE_URL_PREFIX):
        value = value[len(SQLITE_URL_PREFIX):]
    elif "://" in value:
        raise DatabaseUnavailableError(f"Unsupported database URL scheme: {value.split('://', 1)[0]}")
    if not value or value == ":memory:":
        # Every operation opens its own connection, so an in-memory
        # database would be empty on each call.
        raise DatabaseUnavailableError("DB_CONN must point to a database file")
    if os.path.isabs(value):
        return value
    return os.path.abspath(value)


def get_connection(db_path: str) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    The connection uses a row factory to access columns by name.
    """
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(db_path: str) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit.

    The transaction is committed when the block finishes without an
    exception and rolled back otherwise.
    """
    conn = get_connection(db_path)
    try:
        yield conn.cursor()
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db(conn_string: str) -> str:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any new migrations defined in
    ``MIGRATIONS``.  Returns the resolved database path.

    Raises
    ------
    DatabaseUnavailableError
        If ``conn_string`` is empty or unusable, or if the database
        cannot be opened or migrated.
    """
    db_path = resolve_database_path(conn_string)
    logger.debug("Opening SQLite database at %s", db_path)
    try:
        conn = get_connection(db_path)
    except sqlite3.Error as exc:
        raise DatabaseUnavailableError(f"Cannot open database {db_path}: {exc}") from exc
    try:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS migrations (
                version INTEGER PRIMARY KEY,
                applied_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
            """
        )
        row = conn.execute("SELECT MAX(version) FROM migrations").fetchone()
        current_version = row[0] or 0
        for version, script in MIGRATIONS:
            if version <= current_version:
                continue
            conn.executescript(script)
            conn.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
            conn.commit()
            logger.info("Applied database migration %s", version)
    except sqlite3.Error as exc:
        raise DatabaseUnavailableError(f"Cannot initialise database {db_path}: {exc}") from exc
    finally:
        conn.close()
    return db_path
