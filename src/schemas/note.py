"""Note schemas."""

from pydantic import BaseModel, ConfigDict, Field


class NoteCreate(BaseModel):
    """Create a new note. Ownership comes from the bearer token."""

    content: str = Field(..., max_length=10000)
    important: bool = False


class NoteUpdate(BaseModel):
    """Replace the mutable fields of a note.

    This is a full replace: leaving out ``important`` sets it to false.
    """

    content: str = Field(..., max_length=10000)
    important: bool = False


class NoteOwner(BaseModel):
    """Owner summary embedded in a note response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    name: str | None


class NoteResponse(BaseModel):
    """Note response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    content: str
    important: bool
    user: NoteOwner
