"""
SQLite implementation of the to-do storage interface.

One connection is opened when the storage is constructed and shared for the
lifetime of the process; the application closes it at shutdown.
"""
import os
import sqlite3
import time
import logging
from typing import List, Optional, Tuple

from hypertodo.models.todo_models import ToDo
from .interface import TodoStorage
from .schema import CREATE_TODOS_TABLE, TODOS_TABLE, TODO_COLUMNS, row_to_todo

logger = logging.getLogger(__name__)

# Query performance threshold (seconds) - queries slower than this will be logged
QUERY_SLOW_THRESHOLD = float(os.getenv("DB_QUERY_SLOW_THRESHOLD", "0.1"))

IN_MEMORY = ":memory:"


class SQLiteTodoStorage(TodoStorage):
    """SQLite-based to-do storage."""

    def __init__(self, db_path: str):
        """
        Open the database and create the schema if needed.

        Args:
            db_path: Path to the SQLite file, or ":memory:".
        """
        self.db_path = db_path
        if db_path != IN_MEMORY:
            self._ensure_db_directory()
        self._conn: Optional[sqlite3.Connection] = sqlite3.connect(
            db_path, check_same_thread=False
        )
        self._conn.row_factory = sqlite3.Row
        self._init_schema()
        logger.info(f"Opened to-do storage at {db_path}")

    def _ensure_db_directory(self):
        """Ensure the database directory exists."""
        db_dir = os.path.dirname(os.path.abspath(self.db_path))
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)

    def _get_connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise sqlite3.ProgrammingError("Cannot operate on a closed storage")
        return self._conn

    def _execute(self, query: str, params: Tuple = ()) -> sqlite3.Cursor:
        """
        Execute a query with performance logging.

        Args:
            query: SQL query string
            params: Query parameters

        Returns:
            Cursor after execution
        """
        start_time = time.time()
        try:
            cursor = self._get_connection().execute(query, params)
        except sqlite3.Error:
            duration = time.time() - start_time
            logger.error(f"Query failed after {duration:.4f}s: {query.strip()[:200]}", exc_info=True)
            raise

        duration = time.time() - start_time
        if duration >= QUERY_SLOW_THRESHOLD:
            logger.warning(
                f"Slow query: {duration:.4f}s - {query.strip()[:200]}",
                extra={"duration": duration, "params_count": len(params)}
            )
        return cursor

    def _init_schema(self):
        """Initialize database schema."""
        with self._get_connection():
            self._execute(CREATE_TODOS_TABLE)

    def list_all(self) -> List[ToDo]:
        cursor = self._execute(f"SELECT {TODO_COLUMNS} FROM {TODOS_TABLE} ORDER BY id")
        return [row_to_todo(row) for row in cursor.fetchall()]

    def get_by_id(self, todo_id: int) -> Optional[ToDo]:
        cursor = self._execute(
            f"SELECT {TODO_COLUMNS} FROM {TODOS_TABLE} WHERE id = ?", (todo_id,)
        )
        row = cursor.fetchone()
        return row_to_todo(row) if row else None

    def create(self, content: str) -> ToDo:
        with self._get_connection():
            cursor = self._execute(
                f"INSERT INTO {TODOS_TABLE} (content, completed) VALUES (?, 0)", (content,)
            )
            todo_id = cursor.lastrowid
        return ToDo(id=todo_id, content=content, completed=False)

    def toggle(self, todo_id: int) -> Optional[ToDo]:
        with self._get_connection():
            cursor = self._execute(
                f"UPDATE {TODOS_TABLE} SET completed = NOT completed WHERE id = ?", (todo_id,)
            )
            if cursor.rowcount == 0:
                return None
            row = self._execute(
                f"SELECT {TODO_COLUMNS} FROM {TODOS_TABLE} WHERE id = ?", (todo_id,)
            ).fetchone()
        return row_to_todo(row)

    def delete(self, todo_id: int) -> bool:
        with self._get_connection():
            cursor = self._execute(f"DELETE FROM {TODOS_TABLE} WHERE id = ?", (todo_id,))
        return cursor.rowcount > 0

    def ping(self) -> None:
        self._execute("SELECT 1").fetchone()

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None
            logger.info(f"Closed to-do storage at {self.db_path}")
