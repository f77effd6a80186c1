"""
Unit tests for page route handlers.
"""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from hypertodo.api.routes import pages


@pytest.fixture
def client():
    """Create a test client for an app with only the page router."""
    app = FastAPI()
    app.include_router(pages.router)
    return TestClient(app)


def test_index_serves_shell(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert response.text.startswith("<!DOCTYPE html>")
    assert 'hx-get="/todos"' in response.text
    assert 'hx-trigger="load"' in response.text


def test_clicked(client):
    response = client.post("/clicked")

    assert response.status_code == 200
    assert "I'm from the server" in response.text


def test_clicked_rejects_get(client):
    assert client.get("/clicked").status_code == 405
