"""User repository."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from src.config import Settings
from src.exceptions import AuthError, ValidationError
from src.models.user import User
from src.services.auth import CredentialService

logger = logging.getLogger(__name__)

DUPLICATE_USERNAME_MESSAGE = "expected `username` to be unique"


class UserRepository:
    """Create and look up users."""

    def __init__(self, db: Session, settings: Settings, credentials: CredentialService):
        self.db = db
        self.settings = settings
        self.credentials = credentials

    def _validate(self, username: str, password: str) -> None:
        min_username = self.settings.min_username_length
        min_password = self.settings.min_password_length
        if not username or len(username) < min_username:
            raise ValidationError(f"username must be at least {min_username} characters long")
        if not password or len(password) < min_password:
            raise ValidationError(f"password must be at least {min_password} characters long")

    def get_user(self, user_id: str) -> User | None:
        """Get a user by id."""
        return self.db.query(User).filter(User.id == user_id).first()

    def get_user_by_username(self, username: str) -> User | None:
        """Get a user by username."""
        return self.db.query(User).filter(User.username == username).first()

    def create_user(self, username: str, name: str | None, password: str) -> User:
        """Create a new user with a hashed password."""
        self._validate(username, password)

        if self.get_user_by_username(username):
            raise ValidationError(DUPLICATE_USERNAME_MESSAGE)

        user = User(
            username=username,
            name=name,
            password_hash=self.credentials.hash_password(password),
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent registration
            self.db.rollback()
            raise ValidationError(DUPLICATE_USERNAME_MESSAGE) from e
        self.db.refresh(user)

        logger.info(f"Created user '{user.username}' ({user.id})")
        return user

    def authenticate(self, username: str, password: str) -> User:
        """Authenticate a user by username and password."""
        user = self.get_user_by_username(username)
        if not user or not self.credentials.verify_password(password, user.password_hash):
            logger.info(f"Failed login for username '{username}'")
            raise AuthError("invalid username or password")
        return user

    def list_users(self) -> list[User]:
        """Get all users with their notes loaded."""
        return (
            self.db.query(User)
            .options(selectinload(User.notes))
            .order_by(User.created_at)
            .all()
        )
