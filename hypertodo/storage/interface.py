"""
Storage interface - defines the contract for to-do storage backends.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from hypertodo.models.todo_models import ToDo


class TodoStorage(ABC):
    """Abstract interface for to-do storage operations."""

    @abstractmethod
    def list_all(self) -> List[ToDo]:
        """Return every to-do, ordered by id."""
        pass

    @abstractmethod
    def get_by_id(self, todo_id: int) -> Optional[ToDo]:
        """Get a to-do by ID, or None if it does not exist."""
        pass

    @abstractmethod
    def create(self, content: str) -> ToDo:
        """Create a to-do that is not completed and return it."""
        pass

    @abstractmethod
    def toggle(self, todo_id: int) -> Optional[ToDo]:
        """Flip completed and return the updated to-do, or None if absent."""
        pass

    @abstractmethod
    def delete(self, todo_id: int) -> bool:
        """Delete a to-do. Returns True if a row was removed."""
        pass

    @abstractmethod
    def ping(self) -> None:
        """Run a trivial query; raises if the store is unreachable."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the underlying connection."""
        pass
