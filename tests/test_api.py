"""API endpoint tests."""

from fastapi.testclient import TestClient

from src.api.dependencies import get_note_repository
from src.main import app


class BrokenNoteRepository:
    """Note repository whose store is unreachable."""

    def list_notes(self):
        raise RuntimeError("db host 10.0.0.5 unreachable")


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_unknown_endpoint(client):
    """Test that unknown routes answer with a JSON error."""
    response = client.get("/api/nothing-here")
    assert response.status_code == 404
    assert response.json() == {"error": "unknown endpoint"}


def test_malformed_json_is_bad_request(client, auth_headers):
    """Test that an unparseable body is a 400, not a 422."""
    response = client.post(
        "/api/notes",
        headers={**auth_headers, "Content-Type": "application/json"},
        content="{not json",
    )
    assert response.status_code == 400
    assert "error" in response.json()


def test_notes_scenario(client, auth_headers, initial_notes):
    """Test the seeded list, an authenticated create and a rejected anonymous create."""
    response = client.get("/api/notes")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    notes = response.json()
    assert len(notes) == 2
    assert "HTML is easy" in [note["content"] for note in notes]

    response = client.post(
        "/api/notes",
        headers=auth_headers,
        json={"content": "async/await simplifies making async calls", "important": True},
    )
    assert response.status_code == 201
    assert len(client.get("/api/notes").json()) == 3

    response = client.post(
        "/api/notes",
        json={"content": "async/await simplifies making async calls", "important": True},
    )
    assert response.status_code == 401
    assert "token" in response.json()["error"]
    assert len(client.get("/api/notes").json()) == 3


def test_unexpected_error_hides_detail():
    """Test that store failures answer 500 without leaking internals."""
    app.dependency_overrides[get_note_repository] = BrokenNoteRepository
    try:
        response = TestClient(app, raise_server_exceptions=False).get("/api/notes")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"error": "internal server error"}
    assert "10.0.0.5" not in response.text
    assert "unreachable" not in response.text
