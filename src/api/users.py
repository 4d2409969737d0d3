"""User API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_user_repository
from src.schemas.user import UserCreate, UserResponse
from src.services.users import UserRepository

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    user_data: UserCreate,
    users: Annotated[UserRepository, Depends(get_user_repository)],
):
    """Register a new user."""
    user = users.create_user(user_data.username, user_data.name, user_data.password)
    return UserResponse.model_validate(user)


@router.get("", response_model=list[UserResponse])
def get_users(
    users: Annotated[UserRepository, Depends(get_user_repository)],
):
    """Get all users with their notes."""
    return [UserResponse.model_validate(user) for user in users.list_users()]
