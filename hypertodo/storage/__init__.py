"""
Storage abstraction layer.
Provides a clean interface for data persistence that can be swapped out.
"""
from .interface import TodoStorage
from .sqlite_storage import SQLiteTodoStorage

__all__ = ['TodoStorage', 'SQLiteTodoStorage']
