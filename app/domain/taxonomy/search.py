"""Filtros en memoria sobre la lista de topics ya cargada (sin I/O)."""
import enum
from typing import Iterable, List

from app.schemas.taxonomy import TopicOut, Stats

PROGRAMMING_LANGUAGES = {"java", "javascript", "python", "c++", "c#"}

class Category(str, enum.Enum):
    ALL = "all"
    PROGRAMMING = "programming"
    SYSTEM_DESIGN = "system-design"
    ALGORITHMS = "algorithms"
    DATABASES = "databases"

# palabras clave por categoría, contra name/description en minúsculas
CATEGORY_KEYWORDS = {
    Category.PROGRAMMING: ("programming",),
    Category.SYSTEM_DESIGN: ("system", "design"),
    Category.ALGORITHMS: ("algorithm", "data structure"),
    Category.DATABASES: ("database", "sql"),
}

def _contains(haystack: str | None, needle: str) -> bool:
    return needle in (haystack or "").lower()

def _matches_term(topic: TopicOut, term: str) -> bool:
    if _contains(topic.name, term) or _contains(topic.description, term):
        return True
    return any(_contains(st.name, term) or _contains(st.description, term) for st in topic.subTopics)

def filter_by_search_term(topics: Iterable[TopicOut], term: str | None) -> List[TopicOut]:
    topics = list(topics)
    # el strip solo decide si el término está vacío; se compara sin recortar
    needle = (term or "").lower()
    if not needle.strip():
        return topics
    return [t for t in topics if _matches_term(t, needle)]

def _matches_category(topic: TopicOut, category: Category) -> bool:
    name = (topic.name or "").strip().lower()
    if category is Category.PROGRAMMING and name in PROGRAMMING_LANGUAGES:
        return True
    text = f"{name}\n{(topic.description or '').lower()}"
    return any(k in text for k in CATEGORY_KEYWORDS[category])

def filter_by_category(topics: Iterable[TopicOut], category: Category | str) -> List[TopicOut]:
    category = Category(category)
    topics = list(topics)
    if category is Category.ALL:
        return topics
    return [t for t in topics if _matches_category(t, category)]

def apply_filters(topics: Iterable[TopicOut], term: str | None = "",
                  category: Category | str = Category.ALL) -> List[TopicOut]:
    return filter_by_category(filter_by_search_term(topics, term), category)

def compute_stats(topics: Iterable[TopicOut]) -> Stats:
    topics = list(topics)
    return Stats(
        topicCount=len(topics),
        subTopicCount=sum(len(t.subTopics) for t in topics),
        blogCount=sum(t.counts.blogs for t in topics),
        noteCount=sum(t.counts.notes for t in topics),
        problemCount=sum(t.counts.leetcodeProblems for t in topics),
    )
