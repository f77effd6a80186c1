"""
Fragments returned by the to-do routes and swapped into the page by htmx.
"""
from typing import Iterable

from markupsafe import Markup

from hypertodo.models.todo_models import ToDo

_TODO_ITEM = Markup(
    '<div class="flex flex-row space-x-3">'
    '<p>{content}</p>'
    '<input type="checkbox"{checked} hx-post="/todos/toggle/{id}" '
    'hx-target="closest div" hx-swap="outerHTML"/>'
    '<button type="button" class="text-red-500" hx-delete="/todos/{id}" '
    'hx-target="closest div" hx-swap="outerHTML">X</button>'
    '</div>'
)

# hx-swap="beforebegin" inserts each new item above the form
_TODO_FORM = Markup(
    '<form class="flex flex-row space-x-3" hx-post="/todos" hx-swap="beforebegin" '
    '_="on submit target.reset()">'
    '<input type="text" name="content" class="border border-black"/>'
    '<button type="submit">Add</button>'
    '</form>'
)

_CLICKED = Markup("<div class=\"text-blue-600\">I'm from the server</div>")


def render_todo_item(todo: ToDo) -> Markup:
    """Render one to-do with its toggle checkbox and delete button."""
    return _TODO_ITEM.format(
        content=todo.content,
        checked=Markup(" checked") if todo.completed else "",
        id=todo.id,
    )


def render_todo_form() -> Markup:
    return _TODO_FORM


def render_todo_list(todos: Iterable[ToDo]) -> Markup:
    """Render the to-dos in the given order, followed by the creation form."""
    items = Markup("").join(render_todo_item(todo) for todo in todos)
    return Markup("<div>{items}{form}</div>").format(items=items, form=render_todo_form())


def render_clicked() -> Markup:
    return _CLICKED
