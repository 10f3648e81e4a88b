"""
SQLite database integration, schema migrations and the persistence context.

``Database`` is the store handle: it knows where the database lives,
opens connections and applies migrations (``init_db``).  It can point
at a file on disk or at a named in‑memory database, which is what the
test suite uses to get a fresh isolated store per test.

``DbContext`` is a unit of work on top of one connection.  Writes
(``add``, ``update``, ``remove``) are only tracked until ``save`` runs
them in a single transaction, returns the number of affected rows and
clears the tracked changes.  Reads always go to the committed state.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from pathlib import Path
from typing import AsyncIterator, Callable, List, Optional, Tuple
from uuid import UUID

from fastapi import Request

from .config import settings
from .errors import DuplicateKeyError
from ..schemas.user import User


logger = logging.getLogger(__name__)

MIGRATIONS: List[Tuple[int, str]] = [
    # Migration 1: users table.  Ids are stored as canonical UUID text.
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS users (
            id TEXT PRIMARY KEY NOT NULL,
            name TEXT NOT NULL,
            email TEXT NOT NULL
        );
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
    base_dir = Path(__file__).resolve().parent.parent.parent  # user_api/
    return str((base_dir / db_url).resolve())


class Database:
    """Handle to a SQLite store shared by every request of the process.

    Use :meth:`from_settings` for the configured file database and
    :meth:`in_memory` for an isolated store that lives as long as the
    handle does.
    """

    def __init__(self, target: str, uri: bool = False) -> None:
        self.target = target
        self.uri = uri
        # In-memory shared-cache databases vanish when their last
        # connection closes, so an anchor connection is held open.
        self._anchor: Optional[sqlite3.Connection] = None

    @classmethod
    def from_settings(cls) -> "Database":
        return cls(get_database_path())

    @classmethod
    def in_memory(cls, name: str) -> "Database":
        """Create a named in‑memory store.

        Handles created with the same ``name`` share data while at least
        one of them is open; a unique name gives an empty store.
        """
        database = cls(f"file:{name}?mode=memory&cache=shared", uri=True)
        database._anchor = database.connect()
        return database

    def connect(self) -> sqlite3.Connection:
        """Create and return a new SQLite connection.

        Rows are returned as ``sqlite3.Row`` so columns can be accessed
        by name.  Connections may be handed between threads: FastAPI
        and its test client do not guarantee that a request is served
        on the thread that opened the connection.
        """
        conn = sqlite3.connect(self.target, uri=self.uri, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        return conn

    def init_db(self) -> None:
        """Initialise the database and apply pending migrations.

        Creates the ``migrations`` table if it does not exist, checks the
        current schema version and applies any newer entries of
        ``MIGRATIONS``.  Safe to call repeatedly.
        """
        conn = self.connect()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
            )
            cursor.execute("SELECT MAX(version) as version FROM migrations")
            row = cursor.fetchone()
            current_version = row["version"] if row and row["version"] is not None else 0

            for version, sql in MIGRATIONS:
                if version > current_version:
                    logger.info("Applying migration %s to %s", version, self.target)
                    cursor.executescript(sql)
                    cursor.execute(
                        "INSERT INTO migrations (version) VALUES (?)", (version,)
                    )
                    current_version = version
            conn.commit()
        finally:
            conn.close()

    def close(self) -> None:
        if self._anchor is not None:
            self._anchor.close()
            self._anchor = None


def _row_to_user(row: sqlite3.Row) -> User:
    return User(id=UUID(row["id"]), name=row["name"], email=row["email"])


class DbContext:
    """Unit of work over the ``users`` table.

    Pending operations are kept in order and executed by :meth:`save`.
    Reads never observe pending operations, and nothing read from the
    store is tracked: a ``User`` returned by :meth:`query` is a plain
    value and changing it has no effect until it is passed to
    :meth:`update`.
    """

    _STATEMENTS = {
        "add": "INSERT INTO users (id, name, email) VALUES (?, ?, ?)",
        "update": "UPDATE users SET name = ?, email = ? WHERE id = ?",
        "remove": "DELETE FROM users WHERE id = ?",
    }

    def __init__(self, database: Database) -> None:
        self._conn = database.connect()
        self._pending: List[Tuple[str, User]] = []

    def __enter__(self) -> "DbContext":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def pending(self) -> int:
        """Number of tracked operations waiting for :meth:`save`."""
        return len(self._pending)

    def add(self, user: User) -> None:
        self._pending.append(("add", user))

    def update(self, user: User) -> None:
        self._pending.append(("update", user))

    def remove(self, user: User) -> None:
        self._pending.append(("remove", user))

    def query(self, predicate: Optional[Callable[[User], bool]] = None) -> List[User]:
        """Return committed users, optionally filtered by ``predicate``."""
        rows = self._conn.execute("SELECT id, name, email FROM users").fetchall()
        users = [_row_to_user(row) for row in rows]
        if predicate is None:
            return users
        return [user for user in users if predicate(user)]

    def find(self, user_id: UUID) -> Optional[User]:
        """Return the committed user with ``user_id`` or ``None``."""
        row = self._conn.execute(
            "SELECT id, name, email FROM users WHERE id = ?",
            (str(user_id),),
        ).fetchone()
        return _row_to_user(row) if row else None

    def count(self) -> int:
        return self._conn.execute("SELECT COUNT(*) AS count FROM users").fetchone()["count"]

    def exists(self, user_id: UUID) -> bool:
        row = self._conn.execute(
            "SELECT 1 FROM users WHERE id = ?", (str(user_id),)
        ).fetchone()
        return row is not None

    def save(self) -> int:
        """Commit pending operations and return the number of affected rows.

        All pending operations run in one transaction.  The tracked
        operations are cleared whether the commit succeeds or not.
        Raises ``DuplicateKeyError`` when an insert collides with an
        existing id; nothing from the batch is persisted in that case.
        """
        if not self._pending:
            return 0
        affected = 0
        current: Optional[User] = None
        try:
            cursor = self._conn.cursor()
            for operation, user in self._pending:
                current = user
                cursor.execute(self._STATEMENTS[operation], self._parameters(operation, user))
                affected += cursor.rowcount
            self._conn.commit()
        except sqlite3.IntegrityError as exc:
            self._conn.rollback()
            raise DuplicateKeyError(f"User with ID {current.id} already exists.") from exc
        except sqlite3.Error:
            self._conn.rollback()
            raise
        finally:
            self._pending.clear()
        logger.debug("Committed %s row(s)", affected)
        return affected

    @staticmethod
    def _parameters(operation: str, user: User) -> tuple:
        if operation == "add":
            return (str(user.id), user.name, user.email)
        if operation == "update":
            return (user.name, user.email, str(user.id))
        return (str(user.id),)

    def close(self) -> None:
        self._pending.clear()
        self._conn.close()


async def get_db_context(request: Request) -> AsyncIterator[DbContext]:
    """FastAPI dependency yielding a per‑request ``DbContext``.

    The context is opened on the store handle kept in
    ``app.state.database`` and closed once the response is sent.
    """
    context = DbContext(request.app.state.database)
    try:
        yield context
    finally:
        context.close()
