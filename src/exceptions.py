"""Application exception hierarchy.

Repositories and services raise these; the handlers registered in
``src.main`` turn them into ``{"error": message}`` responses:

    NotesAppError
    ├── ValidationError     → 400
    ├── AuthError           → 401
    ├── AuthorizationError  → 403
    └── NotFoundError       → 404
"""


class NotesAppError(Exception):
    """Base exception for application errors.

    ``message`` is safe to return to the client.
    """

    status_code = 500

    def __init__(self, message: str = "An unexpected error occurred"):
        self.message = message
        super().__init__(message)


class ValidationError(NotesAppError):
    """Malformed or missing field, malformed id, or duplicate unique key."""

    status_code = 400

    def __init__(self, message: str = "Validation failed"):
        super().__init__(message)


class AuthError(NotesAppError):
    """Missing, malformed or unverifiable credentials."""

    status_code = 401

    def __init__(self, message: str = "token missing or invalid"):
        super().__init__(message)


class AuthorizationError(NotesAppError):
    """A verified user lacks rights over the target resource."""

    status_code = 403

    def __init__(self, message: str = "not allowed to modify this resource"):
        super().__init__(message)


class NotFoundError(NotesAppError):
    """A well-formed identifier with no matching record."""

    status_code = 404

    def __init__(self, resource: str = "resource"):
        super().__init__(f"{resource} not found")
