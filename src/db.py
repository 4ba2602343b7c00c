"""Shared SQLite helpers: WAL connections and typed storage errors."""

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator


class StorageError(Exception):
    """Raised when the mood database cannot be read or written."""


def wal_connect(db_path: str | Path, row_factory: bool = False) -> sqlite3.Connection:
    """Open SQLite connection with WAL journal mode.

    Args:
        db_path: Path to database file.
        row_factory: If True, set conn.row_factory = sqlite3.Row.
    """
    conn = sqlite3.connect(str(db_path))
    conn.execute("PRAGMA journal_mode=WAL")
    if row_factory:
        conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def connection(db_path: str | Path) -> Iterator[sqlite3.Connection]:
    """Yield a committed-on-success connection, translating sqlite errors.

    Raises:
        StorageError: wrapping any sqlite3.Error raised while connecting or
            inside the block.
    """
    try:
        conn = wal_connect(db_path, row_factory=True)
    except sqlite3.Error as e:
        raise StorageError(f"Cannot open mood database {db_path}: {e}") from e
    try:
        with conn:
            yield conn
    except sqlite3.Error as e:
        raise StorageError(f"Mood database error: {e}") from e
    finally:
        conn.close()
