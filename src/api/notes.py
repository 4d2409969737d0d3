"""Note API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from src.api.dependencies import get_current_user, get_note_editor, get_note_repository
from src.models.user import User
from src.schemas.note import NoteCreate, NoteResponse, NoteUpdate
from src.services.notes import NoteRepository

router = APIRouter(prefix="/api/notes", tags=["notes"])


@router.get("", response_model=list[NoteResponse])
def get_notes(
    notes: Annotated[NoteRepository, Depends(get_note_repository)],
):
    """Get all notes."""
    return [NoteResponse.model_validate(note) for note in notes.list_notes()]


@router.get("/{note_id}", response_model=NoteResponse)
def get_note(
    note_id: str,
    notes: Annotated[NoteRepository, Depends(get_note_repository)],
):
    """Get a specific note."""
    return NoteResponse.model_validate(notes.get_note(note_id))


@router.post("", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
def create_note(
    note_data: NoteCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    notes: Annotated[NoteRepository, Depends(get_note_repository)],
):
    """Create a note owned by the authenticated user."""
    note = notes.create_note(note_data.content, note_data.important, current_user.id)
    return NoteResponse.model_validate(note)


@router.put("/{note_id}", response_model=NoteResponse)
def update_note(
    note_id: str,
    note_data: NoteUpdate,
    editor: Annotated[User | None, Depends(get_note_editor)],
    notes: Annotated[NoteRepository, Depends(get_note_repository)],
):
    """Replace a note's content and importance."""
    note = notes.update_note(
        note_id,
        note_data.content,
        note_data.important,
        requesting_user_id=editor.id if editor else None,
    )
    return NoteResponse.model_validate(note)


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_note(
    note_id: str,
    editor: Annotated[User | None, Depends(get_note_editor)],
    notes: Annotated[NoteRepository, Depends(get_note_repository)],
):
    """Delete a note. Deleting an already removed note succeeds."""
    notes.delete_note(note_id, requesting_user_id=editor.id if editor else None)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
