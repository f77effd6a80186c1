"""
Service container for dependency injection.

The container is built by the application factory and attached to
app.state; route handlers reach it through the dependencies below.
"""
import os
import logging
from typing import Optional

from fastapi import Depends, Request

from hypertodo.services.todo_service import TodoService
from hypertodo.storage import SQLiteTodoStorage, TodoStorage

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = "sqlite.db"


class ServiceContainer:
    """Container for all application services."""

    def __init__(self, db_path: Optional[str] = None):
        self.db_path = db_path or os.getenv("TODO_DB_PATH", DEFAULT_DB_PATH)
        self.storage: TodoStorage = SQLiteTodoStorage(self.db_path)

    def close(self) -> None:
        """Release resources held by the services."""
        self.storage.close()


def get_services(request: Request) -> ServiceContainer:
    """Get the service container of the running application."""
    return request.app.state.services


def get_todo_service(services: ServiceContainer = Depends(get_services)) -> TodoService:
    """Get a to-do service bound to the application's storage."""
    return TodoService(services.storage)
