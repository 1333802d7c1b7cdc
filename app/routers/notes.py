import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db import get_db
from app.deps import get_scope
from app.schemas.content import NotesResponse, NoteOut
from app.domain.taxonomy.repository import TaxonomyRepository
from app.domain.taxonomy.scope import ContentKind, ContentNotFound, Scope

log = logging.getLogger("notes")

router = APIRouter(prefix="/api/notes", tags=["notes"])

@router.get("", response_model=NotesResponse)
def list_notes(scope: Scope | None = Depends(get_scope), db: Session = Depends(get_db)):
    try:
        notes = TaxonomyRepository(db).list_content(scope, ContentKind.NOTES)
    except SQLAlchemyError as e:
        log.error("Error fetching notes: %s", e)
        raise HTTPException(500, "Internal server error")
    return NotesResponse(notes=notes, total=len(notes))

@router.get("/{note_id}", response_model=NoteOut)
def get_note(note_id: int, db: Session = Depends(get_db)):
    try:
        return TaxonomyRepository(db).get_note(note_id)
    except ContentNotFound:
        raise HTTPException(404, "Note not found")
