"""HTTP client for the notes API.

Mirrors what the browser frontend does: log in, keep the token for note
creation, fetch notes, toggle importance and drop notes that were already
removed on the server.
"""

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class NotesClientError(Exception):
    """Raised when the API answers with a non-success status."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class NotesClient:
    """Thin wrapper around ``httpx.Client`` for the notes API."""

    def __init__(self, base_url: str = "http://localhost:8000", http: httpx.Client | None = None):
        self.http = http or httpx.Client(base_url=base_url, timeout=10.0)
        self.token: str | None = None
        self.user: dict[str, Any] | None = None

    def set_token(self, token: str | None) -> None:
        """Use ``token`` for requests that need authentication."""
        self.token = token

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}

    @staticmethod
    def _check(response: httpx.Response) -> httpx.Response:
        if response.is_success:
            return response
        try:
            message = response.json().get("error", response.text)
        except ValueError:
            message = response.text
        raise NotesClientError(response.status_code, message)

    def login(self, username: str, password: str) -> dict[str, Any]:
        """Log in and keep the returned token."""
        response = self._check(
            self.http.post("/api/login", json={"username": username, "password": password})
        )
        self.user = response.json()
        self.set_token(self.user["token"])
        logger.info(f"Logged in as {self.user['username']}")
        return self.user

    def logout(self) -> None:
        """Forget the current session."""
        self.user = None
        self.set_token(None)

    def get_all(self) -> list[dict[str, Any]]:
        """Fetch every note."""
        return self._check(self.http.get("/api/notes")).json()

    def get(self, note_id: str) -> dict[str, Any]:
        """Fetch one note."""
        return self._check(self.http.get(f"/api/notes/{note_id}")).json()

    def create(self, content: str, important: bool = False) -> dict[str, Any]:
        """Create a note as the logged in user."""
        response = self.http.post(
            "/api/notes",
            json={"content": content, "important": important},
            headers=self._auth_headers(),
        )
        return self._check(response).json()

    def update(self, note_id: str, content: str, important: bool) -> dict[str, Any]:
        """Replace a note's content and importance."""
        response = self.http.put(
            f"/api/notes/{note_id}",
            json={"content": content, "important": important},
            headers=self._auth_headers(),
        )
        return self._check(response).json()

    def toggle_importance(self, note: dict[str, Any]) -> dict[str, Any]:
        """Flip the importance flag of ``note`` on the server."""
        return self.update(note["id"], note["content"], not note["important"])

    def delete(self, note_id: str) -> None:
        """Delete a note."""
        self._check(self.http.delete(f"/api/notes/{note_id}", headers=self._auth_headers()))

    @staticmethod
    def important_only(notes: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Filter notes down to the important ones."""
        return [note for note in notes if note["important"]]
