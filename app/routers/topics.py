import asyncio
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app.db import get_db, get_session_factory
from app.deps import get_optional_user
from app.models.user import User
from app.schemas.taxonomy import TopicOut, TopicsResponse, NavEntry
from app.schemas.page import TopicPageOut
from app.domain.taxonomy.repository import TaxonomyRepository, RepositorySource
from app.domain.taxonomy.aggregator import ContentAggregator
from app.domain.taxonomy.scope import TopicScope, SubTopicScope, TopicNotFound
from app.domain.taxonomy.search import Category, apply_filters, compute_stats

log = logging.getLogger("topics")

router = APIRouter(prefix="/api/topics", tags=["topics"])

def build_navigation(topics: list[TopicOut]) -> dict[str, NavEntry]:
    """Mapa del sidebar: 'topic' y 'topic/sub' -> entrada de página."""
    nav: dict[str, NavEntry] = {}
    for t in topics:
        nav[t.slug] = NavEntry(title=f"{t.icon} {t.name}".strip(), href=f"/topics/{t.slug}")
        for st in t.subTopics:
            nav[f"{t.slug}/{st.slug}"] = NavEntry(
                title=f"{st.icon} {st.name}".strip(),
                href=f"/topics/{t.slug}/{st.slug}",
            )
    return nav

def _load_topics(db: Session) -> list[TopicOut]:
    try:
        return TaxonomyRepository(db).list_topics()
    except SQLAlchemyError as e:
        log.error("Error fetching topics: %s", e)
        raise HTTPException(500, "Internal server error")

@router.get("", response_model=TopicsResponse)
def list_topics(q: str = "", category: Category = Category.ALL, db: Session = Depends(get_db)):
    """Sin q/category devuelve todo; los filtros no tocan el mapa de navegación."""
    topics = _load_topics(db)
    filtered = apply_filters(topics, q, category)
    return TopicsResponse(
        topics=filtered,
        navigation=build_navigation(topics),
        stats=compute_stats(filtered),
    )

# -------------------------------------------------------------------
# Página de topic / subtopic
# -------------------------------------------------------------------

async def _topic_page(
    topic_slug: str,
    sub_topic_slug: str | None,
    db: Session,
    session_factory: sessionmaker,
    me: User | None,
) -> TopicPageOut:
    repo = TaxonomyRepository(db)
    try:
        topic = await asyncio.to_thread(repo.find_topic_by_slug, topic_slug)
        sub = None
        if sub_topic_slug is not None:
            sub = await asyncio.to_thread(repo.find_subtopic_by_slug, topic_slug, sub_topic_slug)
    except TopicNotFound:
        # distinto de "existe pero sin contenido" (eso es content.totalCount == 0)
        raise HTTPException(404, "Topic Not Found")
    except SQLAlchemyError as e:
        log.error("topic resolve failed (%s/%s): %s", topic_slug, sub_topic_slug, e)
        raise HTTPException(500, "Internal server error")

    scope = SubTopicScope(sub.slug, topic_slug=topic.slug) if sub else TopicScope(topic.slug)
    content = await ContentAggregator(RepositorySource(session_factory)).aggregate(scope)
    return TopicPageOut(
        topic=topic,
        subTopic=sub,
        content=content,
        canManage=bool(me is not None and me.is_admin),
    )

@router.get("/{topic_slug}", response_model=TopicPageOut)
async def topic_page(
    topic_slug: str,
    db: Session = Depends(get_db),
    session_factory: sessionmaker = Depends(get_session_factory),
    me: User | None = Depends(get_optional_user),
):
    return await _topic_page(topic_slug, None, db, session_factory, me)

@router.get("/{topic_slug}/{sub_topic_slug}", response_model=TopicPageOut)
async def sub_topic_page(
    topic_slug: str,
    sub_topic_slug: str,
    db: Session = Depends(get_db),
    session_factory: sessionmaker = Depends(get_session_factory),
    me: User | None = Depends(get_optional_user),
):
    return await _topic_page(topic_slug, sub_topic_slug, db, session_factory, me)
