"""
Pydantic models for requests and responses.
"""
from .todo_models import ToDo, ToDoCreate

__all__ = ['ToDo', 'ToDoCreate']
