import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db import get_db
from app.deps import get_scope
from app.schemas.content import BlogsResponse, BlogDetailOut
from app.domain.taxonomy.repository import TaxonomyRepository
from app.domain.taxonomy.scope import ContentKind, ContentNotFound, Scope

log = logging.getLogger("blogs")

router = APIRouter(prefix="/api/blogs", tags=["blogs"])

@router.get("", response_model=BlogsResponse)
def list_blogs(scope: Scope | None = Depends(get_scope), db: Session = Depends(get_db)):
    """Solo blogs publicados; topicSlug o subTopicSlug, nunca ambos."""
    try:
        blogs = TaxonomyRepository(db).list_content(scope, ContentKind.BLOGS)
    except SQLAlchemyError as e:
        log.error("Error fetching blogs: %s", e)
        raise HTTPException(500, "Internal server error")
    return BlogsResponse(blogs=blogs)

@router.get("/{blog_id}", response_model=BlogDetailOut)
def get_blog(blog_id: int, db: Session = Depends(get_db)):
    try:
        return TaxonomyRepository(db).get_blog(blog_id)
    except ContentNotFound:
        raise HTTPException(404, "Blog not found")
