"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import get_credential_service, get_user_repository
from src.schemas.auth import LoginResponse, UserLogin
from src.services.auth import CredentialService
from src.services.users import UserRepository

router = APIRouter(prefix="/api/login", tags=["auth"])


@router.post("", response_model=LoginResponse)
def login(
    credentials: UserLogin,
    users: Annotated[UserRepository, Depends(get_user_repository)],
    credential_service: Annotated[CredentialService, Depends(get_credential_service)],
):
    """Login with username and password."""
    user = users.authenticate(credentials.username, credentials.password)
    token = credential_service.issue_token(user.id, user.username)

    return LoginResponse(token=token, username=user.username, name=user.name)
