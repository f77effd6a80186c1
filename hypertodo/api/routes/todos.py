"""
To-do routes.
Thin HTTP layer that validates input, delegates to the service layer and
renders the result as an HTML fragment.
"""
import logging
from typing import Any, Dict

from pydantic import ValidationError

from hypertodo.adapters.http_framework import HTTPFrameworkAdapter
from hypertodo.dependencies.services import get_todo_service
from hypertodo.exceptions import TodoNotFoundError
from hypertodo.models.todo_models import ToDoCreate
from hypertodo.rendering import render_todo_item, render_todo_list
from hypertodo.services.todo_service import TodoService
from hypertodo.storage.schema import SQLITE_MAX_INTEGER, SQLITE_MIN_INTEGER

logger = logging.getLogger(__name__)

# Initialize adapter
http_adapter = HTTPFrameworkAdapter()
HTTPException = http_adapter.HTTPException
Request = http_adapter.Request
Response = http_adapter.Response
HTMLResponse = http_adapter.HTMLResponse
RequestValidationError = http_adapter.RequestValidationError
Depends = http_adapter.Depends
Path = http_adapter.Path

router = http_adapter.create_router(prefix="/todos", tags=["todos"])


async def _read_payload(request: Request) -> Dict[str, Any]:
    """Read the request body as form data, or as JSON when declared so."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            return await request.json()
        except ValueError as e:
            raise RequestValidationError(
                [{"type": "json_invalid", "loc": ("body",), "msg": "JSON decode error", "input": {}, "ctx": {"error": str(e)}}]
            )
    form = await request.form()
    return dict(form)


async def parse_todo_create(request: Request) -> ToDoCreate:
    """Check the request body against ToDoCreate."""
    payload = await _read_payload(request)
    try:
        return ToDoCreate.model_validate(payload)
    except ValidationError as e:
        errors = [
            {**error, "loc": ("body", *error["loc"])}
            for error in e.errors(include_url=False)
        ]
        raise RequestValidationError(errors, body=payload)


@router.get("", response_class=HTMLResponse)
async def list_todos(
    todo_service: TodoService = Depends(get_todo_service)
):
    """Render every to-do followed by the creation form."""
    return HTMLResponse(render_todo_list(todo_service.list_todos()))


@router.post("", response_class=HTMLResponse)
async def create_todo(
    todo: ToDoCreate = Depends(parse_todo_create),
    todo_service: TodoService = Depends(get_todo_service)
):
    """Create a to-do and render it. Empty content is an internal error."""
    created = todo_service.create_todo(todo)
    return HTMLResponse(render_todo_item(created))


@router.post("/toggle/{todo_id}", response_class=HTMLResponse)
async def toggle_todo(
    todo_id: int = Path(..., description="To-do ID", ge=SQLITE_MIN_INTEGER, le=SQLITE_MAX_INTEGER),
    todo_service: TodoService = Depends(get_todo_service)
):
    """Flip a to-do's completed flag and render the updated to-do."""
    try:
        updated = todo_service.toggle_todo(todo_id)
    except TodoNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return HTMLResponse(render_todo_item(updated))


@router.delete("/{todo_id}", response_class=HTMLResponse)
async def delete_todo(
    todo_id: int = Path(..., description="To-do ID", ge=SQLITE_MIN_INTEGER, le=SQLITE_MAX_INTEGER),
    todo_service: TodoService = Depends(get_todo_service)
):
    """Delete a to-do. The empty body makes htmx remove the item."""
    todo_service.delete_todo(todo_id)
    return Response(status_code=200, media_type="text/html")
