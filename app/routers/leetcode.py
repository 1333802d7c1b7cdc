import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db import get_db
from app.deps import get_scope
from app.schemas.content import ProblemsResponse, ProblemOut
from app.domain.taxonomy.repository import TaxonomyRepository
from app.domain.taxonomy.scope import ContentKind, ContentNotFound, Scope

log = logging.getLogger("leetcode")

router = APIRouter(prefix="/api/leetcode", tags=["leetcode"])

@router.get("", response_model=ProblemsResponse)
def list_problems(scope: Scope | None = Depends(get_scope), db: Session = Depends(get_db)):
    try:
        problems = TaxonomyRepository(db).list_content(scope, ContentKind.PROBLEMS)
    except SQLAlchemyError as e:
        log.error("Error fetching leetcode problems: %s", e)
        raise HTTPException(500, "Internal server error")
    return ProblemsResponse(problems=problems, total=len(problems))

@router.get("/{problem_id}", response_model=ProblemOut)
def get_problem(problem_id: int, db: Session = Depends(get_db)):
    try:
        return TaxonomyRepository(db).get_problem(problem_id)
    except ContentNotFound:
        raise HTTPException(404, "Problem not found")
