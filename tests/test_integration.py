"""
End-to-end tests against the full application with a real SQLite file.
"""
import os
import random
import shutil
import sqlite3
import tempfile

import pytest
from fastapi.testclient import TestClient

from hypertodo.app import create_app


@pytest.fixture
def temp_db_path():
    """Create a temporary database path for testing."""
    temp_dir = tempfile.mkdtemp()
    yield os.path.join(temp_dir, "test.db")
    shutil.rmtree(temp_dir)


@pytest.fixture
def client(temp_db_path):
    """Create a test client for a fully configured app."""
    app = create_app(db_path=temp_db_path)
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


def _rows(db_path):
    conn = sqlite3.connect(db_path)
    try:
        return conn.execute("SELECT id, content, completed FROM todos ORDER BY id").fetchall()
    finally:
        conn.close()


def _services(client):
    return client.app.state.services


def test_index(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "<title>THE BETH STACK</title>" in response.text


def test_empty_list_renders_form(client):
    response = client.get("/todos")
    assert response.status_code == 200
    assert "<p>" not in response.text
    assert 'hx-post="/todos"' in response.text


def test_create_then_list(client, temp_db_path):
    response = client.post("/todos", data={"content": "buy milk"})
    assert response.status_code == 200
    assert "<p>buy milk</p>" in response.text

    todos = _services(client).storage.list_all()
    assert len(todos) == 1
    assert todos[0].content == "buy milk"
    assert todos[0].completed is False
    assert todos[0].id > 0

    listing = client.get("/todos")
    assert listing.text.count("<p>buy milk</p>") == 1
    assert f'hx-post="/todos/toggle/{todos[0].id}"' in listing.text


def test_toggle_twice_restores(client, temp_db_path):
    client.post("/todos", data={"content": "flip me"})
    todo_id = _rows(temp_db_path)[0][0]

    first = client.post(f"/todos/toggle/{todo_id}")
    assert first.status_code == 200
    assert " checked " in first.text
    assert _rows(temp_db_path)[0][2] == 1

    second = client.post(f"/todos/toggle/{todo_id}")
    assert second.status_code == 200
    assert " checked " not in second.text
    assert _rows(temp_db_path)[0][2] == 0


def test_toggle_missing_id(client, temp_db_path):
    response = client.post("/todos/toggle/12345")
    assert response.status_code == 404
    assert _rows(temp_db_path) == []


def test_delete(client, temp_db_path):
    client.post("/todos", data={"content": "keep"})
    client.post("/todos", data={"content": "drop"})
    drop_id = _rows(temp_db_path)[1][0]

    response = client.delete(f"/todos/{drop_id}")
    assert response.status_code == 200
    assert response.text == ""
    assert [row[1] for row in _rows(temp_db_path)] == ["keep"]
    assert "<p>drop</p>" not in client.get("/todos").text


def test_delete_missing_id(client, temp_db_path):
    client.post("/todos", data={"content": "untouched"})
    before = _rows(temp_db_path)

    response = client.delete("/todos/9999")
    assert response.status_code == 200
    assert _rows(temp_db_path) == before


def test_empty_content_is_server_error(client, temp_db_path):
    response = client.post("/todos", data={"content": ""})

    assert response.status_code == 500
    assert response.text == "Internal Server Error"
    assert _rows(temp_db_path) == []


def test_missing_content_is_validation_error(client, temp_db_path):
    response = client.post("/todos", data={"other": "field"})
    assert response.status_code == 422
    assert _rows(temp_db_path) == []


def test_non_numeric_ids_rejected(client):
    assert client.post("/todos/toggle/abc").status_code == 422
    assert client.delete("/todos/abc").status_code == 422


def test_out_of_range_ids_rejected(client, temp_db_path):
    """IDs outside the SQLite INTEGER range are a validation error, not a crash."""
    client.post("/todos", data={"content": "untouched"})
    before = _rows(temp_db_path)

    too_large = 2 ** 63
    assert client.delete(f"/todos/{too_large}").status_code == 422
    assert client.post(f"/todos/toggle/{too_large}").status_code == 422
    assert client.delete(f"/todos/-{too_large + 1}").status_code == 422
    assert _rows(temp_db_path) == before


def test_largest_storable_id_is_noop(client, temp_db_path):
    largest = 2 ** 63 - 1
    assert client.delete(f"/todos/{largest}").status_code == 200
    assert client.post(f"/todos/toggle/{largest}").status_code == 404
    assert _rows(temp_db_path) == []


def test_clicked(client):
    response = client.post("/clicked")
    assert response.status_code == 200
    assert "I'm from the server" in response.text


def test_responses_carry_request_id(client):
    response = client.get("/todos")
    assert len(response.headers["X-Request-ID"]) == 8
    assert response.headers["X-Trace-ID"] == response.headers["X-Request-ID"]


def test_health_and_metrics(client):
    health = client.get("/health")
    assert health.status_code == 200
    assert health.json()["components"]["database"]["status"] == "healthy"

    client.get("/todos")
    metrics = client.get("/metrics")
    assert metrics.status_code == 200
    assert "http_requests_total" in metrics.text


def test_metrics_label_by_route_template(client):
    client.post("/todos/toggle/abc")
    client.delete("/todos/424242")
    client.get("/no-such-page/987")

    metrics = client.get("/metrics").text
    assert 'endpoint="/todos/toggle/{todo_id}"' in metrics
    assert 'endpoint="/todos/{todo_id}"' in metrics
    assert 'endpoint="unmatched"' in metrics
    assert "/todos/toggle/abc" not in metrics
    assert "424242" not in metrics
    assert "no-such-page" not in metrics


def test_storage_closed_on_shutdown(temp_db_path):
    app = create_app(db_path=temp_db_path)
    with TestClient(app) as client:
        client.post("/todos", data={"content": "before shutdown"})

    with pytest.raises(sqlite3.ProgrammingError):
        app.state.services.storage.list_all()
    assert [row[1] for row in _rows(temp_db_path)] == ["before shutdown"]


@pytest.mark.parametrize("seed", range(5))
def test_row_count_matches_operations(client, temp_db_path, seed):
    """Rows present == creates - deletes of existing ids, whatever the mix."""
    rng = random.Random(seed)
    creates = 0
    effective_deletes = 0
    known_ids = set()

    for step in range(40):
        action = rng.choice(["create", "toggle", "delete", "delete_missing"])
        if action == "create":
            response = client.post("/todos", data={"content": f"item {step}"})
            assert response.status_code == 200
            creates += 1
            known_ids = {row[0] for row in _rows(temp_db_path)}
        elif action == "toggle" and known_ids:
            assert client.post(f"/todos/toggle/{rng.choice(sorted(known_ids))}").status_code == 200
        elif action == "delete" and known_ids:
            todo_id = rng.choice(sorted(known_ids))
            assert client.delete(f"/todos/{todo_id}").status_code == 200
            known_ids.discard(todo_id)
            effective_deletes += 1
        elif action == "delete_missing":
            assert client.delete("/todos/1000000").status_code == 200

        assert len(_rows(temp_db_path)) == creates - effective_deletes
