"""Authentication service for JWT and password handling."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext

from src.config import Settings
from src.exceptions import AuthError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenIdentity:
    """Identity fields carried by a verified token."""

    user_id: str
    username: str


class CredentialService:
    """Password hashing and bearer token handling."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

    def hash_password(self, password: str) -> str:
        """Hash a password."""
        return self.pwd_context.hash(password)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash."""
        try:
            return self.pwd_context.verify(plain_password, hashed_password)
        except ValueError:
            # Unrecognized or corrupt hash
            return False

    def issue_token(self, user_id: str, username: str) -> str:
        """Create a signed access token for a user."""
        to_encode: dict = {
            "sub": str(user_id),
            "username": username,
        }
        if self.settings.jwt_expiration_minutes is not None:
            to_encode["exp"] = datetime.now(UTC) + timedelta(
                minutes=self.settings.jwt_expiration_minutes
            )
        return jwt.encode(
            to_encode, self.settings.jwt_secret, algorithm=self.settings.jwt_algorithm
        )

    def verify_token(self, token: str | None) -> TokenIdentity:
        """Decode and validate a token, raising AuthError if it is unusable."""
        if not token:
            raise AuthError("token missing")
        try:
            payload = jwt.decode(
                token, self.settings.jwt_secret, algorithms=[self.settings.jwt_algorithm]
            )
        except JWTError as e:
            logger.info(f"Rejected token: {e}")
            raise AuthError("token invalid") from e

        user_id = payload.get("sub")
        if not user_id:
            raise AuthError("token invalid")
        return TokenIdentity(user_id=user_id, username=payload.get("username", ""))
