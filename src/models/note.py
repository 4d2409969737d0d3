"""Note model."""

from sqlalchemy import Boolean, Column, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class Note(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """A note owned by exactly one user."""

    __tablename__ = "notes"

    content = Column(Text, nullable=False)
    important = Column(Boolean, nullable=False, default=False)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)

    # Relationships
    user = relationship("User", back_populates="notes")
