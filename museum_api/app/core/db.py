"""
SQLite database integration and simple migration system.

This module provides the connection factory, the per-request
``transaction`` context manager used by every service call and
``init_db``, which applies the schema migrations on application start
and seeds the singleton manager record.

Applied migration versions are stored in the ``migrations`` table and
new migrations are executed in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import settings
from .security import hash_password


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS manager (
            id INTEGER PRIMARY KEY CHECK (id = 1),
            username TEXT NOT NULL,
            password TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS visitors (
            username TEXT PRIMARY KEY,
            name TEXT,
            password TEXT NOT NULL,
            balance REAL NOT NULL DEFAULT 0
        );

        CREATE TABLE IF NOT EXISTS artefacts (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            description TEXT,
            can_loan INTEGER NOT NULL DEFAULT 0,
            currently_on_loan INTEGER NOT NULL DEFAULT 0,
            insurance_fee REAL NOT NULL DEFAULT 0,
            loan_fee REAL NOT NULL DEFAULT 0
        );

        CREATE TABLE IF NOT EXISTS open_days (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            date TEXT NOT NULL UNIQUE
        );

        CREATE TABLE IF NOT EXISTS loans (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            visitor TEXT NOT NULL,
            artefact_id INTEGER NOT NULL,
            submitted_date TEXT NOT NULL,
            due_date TEXT,
            status TEXT NOT NULL DEFAULT 'Pending',
            FOREIGN KEY(visitor) REFERENCES visitors(username) ON DELETE CASCADE,
            FOREIGN KEY(artefact_id) REFERENCES artefacts(id) ON DELETE CASCADE,
            FOREIGN KEY(due_date) REFERENCES open_days(date)
        );
        """,
    ),
    # Migration 2: indices for the derived loan queries
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_loans_visitor ON loans(visitor);
        CREATE INDEX IF NOT EXISTS idx_loans_status ON loans(status);
        CREATE INDEX IF NOT EXISTS idx_loans_due_date ON loans(due_date);
        CREATE INDEX IF NOT EXISTS idx_loans_submitted_date ON loans(submitted_date);
        """,
    ),
]


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the project root.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # museum_api/
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  Foreign key enforcement is switched on for the connection;
    SQLite leaves it off by default, which would make the cascading
    deletes of loans silently do nothing.
    """
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def transaction() -> Iterator[sqlite3.Connection]:
    """Run a block inside a single database transaction.

    The connection is committed when the block exits normally and
    rolled back when it raises.  It is always closed afterwards.
    """
    conn = get_connection()
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any new migrations defined in
    ``MIGRATIONS``.  Finally the manager record is seeded from the
    settings if it is missing.
    """
    logger = logging.getLogger(__name__)
    with transaction() as conn:
        cursor = conn.cursor()
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        row = cursor.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                logger.info("Applied database migration %s", version)
                current_version = version

        cursor.execute(
            "INSERT OR IGNORE INTO manager (id, username, password) VALUES (1, ?, ?)",
            (settings.manager_username, hash_password(settings.manager_password)),
        )
