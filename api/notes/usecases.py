# api/notes/usecases.py
from typing import Any, Dict, List, Optional

from services.database import DatabaseServices
from models.base import utc_now
from models.note_models import Note
from ..base.errors import NotFoundError, ValidationError
from ..base.base_schemas import MessageResponse, UpdateResult
from ..base.utils import parse_object_id
from .schemas import CreateNoteRequest, UpdateNoteRequest


def create_note(db: DatabaseServices, payload: CreateNoteRequest) -> Dict[str, Any]:
    result = db.notes.create(Note(**payload.model_dump(exclude_none=True)))
    return MessageResponse(message="Note created", insertedId=str(result.inserted_id)).model_dump()


def list_notes(db: DatabaseServices, email: Optional[str]) -> List[Dict]:
    if not email:
        raise ValidationError("Email is required")
    return db.notes.list_for_owner(email)


def update_note(db: DatabaseServices, note_id: str, payload: UpdateNoteRequest, email: Optional[str] = None) -> Dict[str, Any]:
    oid = parse_object_id(note_id, "note ID")
    fields = payload.to_patch()
    if not fields:
        raise ValidationError("No fields to update")
    fields["updatedAt"] = utc_now()

    result = db.notes.update(oid, fields, email=email)
    if result.matched_count == 0:
        raise NotFoundError("Note not found")

    return UpdateResult(message="Note updated", modifiedCount=result.modified_count).model_dump()


def delete_note(db: DatabaseServices, note_id: str, email: Optional[str] = None) -> Dict[str, str]:
    result = db.notes.delete(parse_object_id(note_id, "note ID"), email=email)
    if result.deleted_count == 0:
        raise NotFoundError("Note not found")
    return {"message": "Note deleted"}
