"""
To-do service - business logic for to-do operations.
This layer contains no HTTP framework dependencies.
"""
import logging
from typing import List, Optional

from hypertodo.exceptions import EmptyContentError, TodoNotFoundError
from hypertodo.models.todo_models import ToDo, ToDoCreate
from hypertodo.storage.interface import TodoStorage

logger = logging.getLogger(__name__)


class TodoService:
    """Service for to-do business logic."""

    def __init__(self, storage: TodoStorage):
        """Initialize to-do service with storage dependency."""
        self.storage = storage

    def list_todos(self) -> List[ToDo]:
        """List every to-do."""
        return self.storage.list_all()

    def get_todo(self, todo_id: int) -> Optional[ToDo]:
        """Get a to-do by ID, or None if it does not exist."""
        return self.storage.get_by_id(todo_id)

    def create_todo(self, todo_data: ToDoCreate) -> ToDo:
        """
        Create a new to-do.

        Args:
            todo_data: Validated creation data

        Returns:
            The stored to-do, with its assigned ID

        Raises:
            EmptyContentError: If content is empty. Nothing is written.
        """
        if len(todo_data.content) == 0:
            raise EmptyContentError()

        todo = self.storage.create(todo_data.content)
        logger.info(f"Created to-do {todo.id}")
        return todo

    def toggle_todo(self, todo_id: int) -> ToDo:
        """
        Flip the completed flag of an existing to-do.

        Raises:
            TodoNotFoundError: If no to-do has this ID, including when it is
                deleted between the lookup and the update.
        """
        if self.storage.get_by_id(todo_id) is None:
            raise TodoNotFoundError(todo_id)

        updated = self.storage.toggle(todo_id)
        if updated is None:
            raise TodoNotFoundError(todo_id)

        logger.info(f"Toggled to-do {todo_id} (completed={updated.completed})")
        return updated

    def delete_todo(self, todo_id: int) -> None:
        """Delete a to-do. Deleting a missing ID is a no-op."""
        if self.storage.delete(todo_id):
            logger.info(f"Deleted to-do {todo_id}")
        else:
            logger.debug(f"Delete of missing to-do {todo_id} ignored")
