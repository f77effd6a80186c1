"""
Pydantic models for to-do requests and responses.
"""
from pydantic import BaseModel, ConfigDict, Field, StrictStr


class ToDoCreate(BaseModel):
    """Request model for creating a to-do.

    Empty content passes the schema check on purpose; the service rejects it.
    """
    content: StrictStr = Field(..., description="Text of the to-do")


class ToDo(BaseModel):
    """A stored to-do item."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Auto-assigned identifier", gt=0)
    content: str = Field(..., description="Text of the to-do")
    completed: bool = Field(False, description="Whether the to-do is done")
