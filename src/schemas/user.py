"""User schemas."""

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """User registration request.

    Length rules are enforced by the user repository so they follow settings.
    """

    username: str = Field(..., max_length=255)
    name: str | None = Field(None, max_length=255)
    password: str = Field(..., max_length=128)


class UserNote(BaseModel):
    """Note summary embedded in a user response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    content: str
    important: bool


class UserResponse(BaseModel):
    """User information response. The password hash is never included."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    name: str | None
    notes: list[UserNote] = []
