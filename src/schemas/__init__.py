"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import LoginResponse, UserLogin
from src.schemas.note import NoteCreate, NoteOwner, NoteResponse, NoteUpdate
from src.schemas.user import UserCreate, UserNote, UserResponse

__all__ = [
    "UserLogin",
    "LoginResponse",
    "UserCreate",
    "UserNote",
    "UserResponse",
    "NoteCreate",
    "NoteUpdate",
    "NoteOwner",
    "NoteResponse",
]
