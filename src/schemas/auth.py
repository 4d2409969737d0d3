"""Authentication schemas."""

from pydantic import BaseModel, Field


class UserLogin(BaseModel):
    """User login request."""

    username: str = Field(..., max_length=255)
    password: str = Field(..., max_length=128)


class LoginResponse(BaseModel):
    """Login response with the bearer token and display info."""

    token: str
    username: str
    name: str | None
