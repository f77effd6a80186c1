"""
Service layer - business logic with no HTTP framework dependencies.
"""
from .todo_service import TodoService

__all__ = ['TodoService']
