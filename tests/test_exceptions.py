"""
Tests for the application's exception handlers.
"""
import sqlite3

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from hypertodo.exceptions import EmptyContentError, TodoNotFoundError
from hypertodo.exceptions.handlers import setup_exception_handlers


@pytest.fixture
def client():
    """Create an app whose routes raise, with the handlers installed."""
    app = FastAPI()
    setup_exception_handlers(app)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("boom")

    @app.get("/db")
    async def db_error():
        raise sqlite3.OperationalError("database is locked")

    @app.get("/items/{item_id}")
    async def item(item_id: int):
        return {"item_id": item_id}

    return TestClient(app, raise_server_exceptions=False)


def test_unhandled_exception_is_plain_500(client):
    response = client.get("/boom")
    assert response.status_code == 500
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "Internal Server Error"


def test_sqlite_error_is_plain_500(client):
    response = client.get("/db")
    assert response.status_code == 500
    assert response.text == "Internal Server Error"


def test_validation_error_uses_default_422(client):
    response = client.get("/items/abc")
    assert response.status_code == 422
    assert response.json()["detail"][0]["loc"] == ["path", "item_id"]


def test_domain_exceptions():
    assert str(EmptyContentError()) == "Content cannot be empty"
    error = TodoNotFoundError(3)
    assert error.todo_id == 3
    assert isinstance(error, LookupError)
