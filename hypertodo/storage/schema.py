"""
Schema of the todos table and the mapping from rows to models.
"""
import sqlite3

from hypertodo.models.todo_models import ToDo

TODOS_TABLE = "todos"

CREATE_TODOS_TABLE = f"""
    CREATE TABLE IF NOT EXISTS {TODOS_TABLE} (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        content TEXT NOT NULL,
        completed INTEGER NOT NULL DEFAULT 0
    )
"""

TODO_COLUMNS = "id, content, completed"

# Range of a SQLite INTEGER; larger values cannot be bound as parameters
SQLITE_MIN_INTEGER = -(2 ** 63)
SQLITE_MAX_INTEGER = 2 ** 63 - 1


def row_to_todo(row: sqlite3.Row) -> ToDo:
    """Convert a todos row into a ToDo. completed is stored as 0/1."""
    return ToDo(
        id=row["id"],
        content=row["content"],
        completed=bool(row["completed"]),
    )
