"""User model."""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class User(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """User model for authentication and note ownership."""

    __tablename__ = "users"

    username = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=True)
    password_hash = Column(String(255), nullable=False)

    # Derived from notes.user_id; never stored on the user row
    notes = relationship(
        "Note",
        back_populates="user",
        order_by="Note.created_at",
        cascade="all, delete-orphan",
    )
