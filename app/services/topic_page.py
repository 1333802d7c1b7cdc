"""
Carga de las páginas de topics desde el cliente HTTP.

Mismo flujo que la vista de detalle: lista de topics -> resolver slug(s) ->
tres fetch en paralelo del contenido. El resultado distingue "no existe"
(NOT_FOUND) de "existe pero vacío" (EMPTY), y un fallo al cargar la lista de
topics (ERROR) que se reintenta llamando otra vez a la función.
"""
import asyncio
import enum
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from app.client import DevMasteryClient
from app.schemas.taxonomy import TopicOut, SubTopicOut, Stats
from app.schemas.page import PageContent
from app.domain.taxonomy.aggregator import ContentAggregator
from app.domain.taxonomy.scope import TopicScope, SubTopicScope
from app.domain.taxonomy.search import Category, apply_filters, compute_stats
from app.domain.taxonomy.tabs import TabbedView

log = logging.getLogger("topic_page")

class PageStatus(str, enum.Enum):
    READY = "ready"
    EMPTY = "empty"
    NOT_FOUND = "not_found"
    ERROR = "error"

@dataclass
class TopicPage:
    status: PageStatus
    topic: Optional[TopicOut] = None
    sub_topic: Optional[SubTopicOut] = None
    content: PageContent = field(default_factory=PageContent)
    tabs: TabbedView = field(default_factory=TabbedView)
    error: Optional[str] = None

    @property
    def node(self):
        """Nodo que se está mostrando: el subtopic si hay, si no el topic."""
        return self.sub_topic or self.topic

    @property
    def visible(self) -> list:
        return self.tabs.visible(self.content)

@dataclass
class TopicListing:
    status: PageStatus
    topics: List[TopicOut] = field(default_factory=list)
    stats: Stats = field(default_factory=Stats)
    error: Optional[str] = None

async def load_topic_page(
    client: DevMasteryClient,
    topic_slug: str,
    sub_topic_slug: Optional[str] = None,
    aggregator: Optional[ContentAggregator] = None,
) -> TopicPage:
    try:
        topics = await asyncio.to_thread(client.list_topics)
    except Exception as e:
        log.error("Failed to fetch topic data: %s", e)
        return TopicPage(status=PageStatus.ERROR, error=str(e))

    topic = next((t for t in topics if t.slug == topic_slug), None)
    if topic is None:
        return TopicPage(status=PageStatus.NOT_FOUND)

    sub = None
    if sub_topic_slug is not None:
        sub = topic.find_sub_topic(sub_topic_slug)
        if sub is None:
            return TopicPage(status=PageStatus.NOT_FOUND, topic=topic)

    scope = SubTopicScope(sub.slug, topic_slug=topic.slug) if sub else TopicScope(topic.slug)
    aggregator = aggregator or ContentAggregator(client, timeout=client.timeout)
    content = await aggregator.aggregate(scope)

    status = PageStatus.EMPTY if content.is_empty else PageStatus.READY
    return TopicPage(status=status, topic=topic, sub_topic=sub, content=content)

def load_topic_listing(
    client: DevMasteryClient,
    term: str = "",
    category: Category | str = Category.ALL,
) -> TopicListing:
    """Índice de topics con filtros locales (búsqueda + categoría) y stats del resultado."""
    try:
        topics = client.list_topics()
    except Exception as e:
        log.error("Failed to fetch topics: %s", e)
        return TopicListing(status=PageStatus.ERROR, error=str(e))

    filtered = apply_filters(topics, term, category)
    status = PageStatus.READY if filtered else PageStatus.EMPTY
    return TopicListing(status=status, topics=filtered, stats=compute_stats(filtered))
