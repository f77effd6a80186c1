"""
HTML rendering for the htmx front end.

Every function here is pure: it takes typed data and returns Markup.
"""
from .fragments import (
    render_clicked,
    render_todo_form,
    render_todo_item,
    render_todo_list,
)
from .layout import render_base_html, render_index_body

__all__ = [
    'render_base_html',
    'render_clicked',
    'render_index_body',
    'render_todo_form',
    'render_todo_item',
    'render_todo_list',
]
