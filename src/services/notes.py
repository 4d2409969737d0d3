"""Note repository."""

import logging
import uuid

from sqlalchemy.orm import Session, joinedload

from src.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.models.note import Note

logger = logging.getLogger(__name__)


def parse_note_id(note_id: str) -> str:
    """Normalize a note id, raising ValidationError if it is not a UUID."""
    try:
        return str(uuid.UUID(str(note_id)))
    except ValueError as e:
        raise ValidationError("malformatted id") from e


def _clean_content(content: str | None) -> str:
    if content is None or not content.strip():
        raise ValidationError("content missing")
    return content


class NoteRepository:
    """CRUD operations over notes."""

    def __init__(self, db: Session):
        self.db = db

    def _find(self, note_id: str) -> Note | None:
        return (
            self.db.query(Note)
            .options(joinedload(Note.user))
            .filter(Note.id == parse_note_id(note_id))
            .first()
        )

    @staticmethod
    def _check_owner(note: Note, requesting_user_id: str | None) -> None:
        if requesting_user_id is not None and note.user_id != requesting_user_id:
            raise AuthorizationError("only the owner can modify this note")

    def list_notes(self) -> list[Note]:
        """Get all notes with their owners."""
        return self.db.query(Note).options(joinedload(Note.user)).order_by(Note.created_at).all()

    def notes_for_owner(self, owner_id: str) -> list[Note]:
        """Get the notes owned by a user."""
        return self.db.query(Note).filter(Note.user_id == owner_id).order_by(Note.created_at).all()

    def get_note(self, note_id: str) -> Note:
        """Get a note by id."""
        note = self._find(note_id)
        if note is None:
            raise NotFoundError("note")
        return note

    def create_note(self, content: str | None, important: bool | None, owner_id: str) -> Note:
        """Create a note owned by ``owner_id``."""
        note = Note(
            content=_clean_content(content),
            important=bool(important),
            user_id=owner_id,
        )
        self.db.add(note)
        self.db.commit()
        self.db.refresh(note)

        logger.info(f"Created note {note.id} for user {owner_id}")
        return note

    def update_note(
        self,
        note_id: str,
        content: str | None,
        important: bool | None,
        requesting_user_id: str | None = None,
    ) -> Note:
        """Replace the content and importance of a note."""
        content = _clean_content(content)
        note = self.get_note(note_id)
        self._check_owner(note, requesting_user_id)

        note.content = content
        note.important = bool(important)
        self.db.commit()
        self.db.refresh(note)
        return note

    def delete_note(self, note_id: str, requesting_user_id: str | None = None) -> None:
        """Permanently delete a note. Deleting a missing note is a no-op."""
        note = self._find(note_id)
        if note is None:
            logger.debug(f"Delete of missing note {note_id} ignored")
            return
        self._check_owner(note, requesting_user_id)

        deleted_id = note.id
        self.db.delete(note)
        self.db.commit()
        logger.info(f"Deleted note {deleted_id}")
