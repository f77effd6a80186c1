"""
Domain exceptions raised by the service layer.
"""


class TodoNotFoundError(LookupError):
    """Raised when an operation targets a to-do id that does not exist."""

    def __init__(self, todo_id: int):
        self.todo_id = todo_id
        super().__init__(f"ToDo with ID {todo_id} not found")


class EmptyContentError(ValueError):
    """Raised when a to-do is created with empty content."""

    def __init__(self):
        super().__init__("Content cannot be empty")


__all__ = ['TodoNotFoundError', 'EmptyContentError']
