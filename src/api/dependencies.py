"""FastAPI dependencies for authentication and repositories."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.config import Settings, get_settings
from src.database import get_db
from src.exceptions import AuthError
from src.models.user import User
from src.services.auth import CredentialService
from src.services.notes import NoteRepository
from src.services.users import UserRepository

# Missing headers are reported by get_current_user so the error body is ours
security = HTTPBearer(auto_error=False)


def get_credential_service(
    settings: Annotated[Settings, Depends(get_settings)],
) -> CredentialService:
    """Get credential service bound to the application settings."""
    return CredentialService(settings)


def get_user_repository(
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
    credentials: Annotated[CredentialService, Depends(get_credential_service)],
) -> UserRepository:
    """Get user repository with dependencies."""
    return UserRepository(db, settings, credentials)


def get_note_repository(
    db: Annotated[Session, Depends(get_db)],
) -> NoteRepository:
    """Get note repository with dependencies."""
    return NoteRepository(db)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    credential_service: Annotated[CredentialService, Depends(get_credential_service)],
    users: Annotated[UserRepository, Depends(get_user_repository)],
) -> User:
    """Get the current authenticated user from the bearer token."""
    if credentials is None:
        raise AuthError("token missing")

    identity = credential_service.verify_token(credentials.credentials)

    user = users.get_user(identity.user_id)
    if user is None:
        raise AuthError("token refers to an unknown user")

    return user


def get_note_editor(
    settings: Annotated[Settings, Depends(get_settings)],
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    credential_service: Annotated[CredentialService, Depends(get_credential_service)],
    users: Annotated[UserRepository, Depends(get_user_repository)],
) -> User | None:
    """Get the user modifying a note, or None when ownership is not enforced."""
    if not settings.enforce_note_ownership:
        return None
    return get_current_user(credentials, credential_service, users)
