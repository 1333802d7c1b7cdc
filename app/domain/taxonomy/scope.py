"""Selectores de alcance y tipos de contenido de la taxonomía.

Un request de contenido va acotado a un topic O a un subtopic, nunca a los
dos: ``TopicScope`` / ``SubTopicScope`` hacen esa exclusión explícita en vez
de dos strings opcionales.
"""
import enum
from dataclasses import dataclass
from typing import Optional, Union

class TaxonomyError(Exception): ...
class TopicNotFound(TaxonomyError): ...
class ContentNotFound(TaxonomyError): ...
class ScopeError(TaxonomyError, ValueError): ...

class ContentKind(str, enum.Enum):
    BLOGS = "blogs"
    NOTES = "notes"
    PROBLEMS = "problems"

@dataclass(frozen=True)
class TopicScope:
    slug: str

    def query_params(self) -> dict:
        return {"topicSlug": self.slug}

@dataclass(frozen=True)
class SubTopicScope:
    slug: str
    # opcional: desambigua subtopics con el mismo slug en topics distintos
    topic_slug: Optional[str] = None

    def query_params(self) -> dict:
        return {"subTopicSlug": self.slug}

Scope = Union[TopicScope, SubTopicScope]

def scope_from_params(topic_slug: Optional[str], sub_topic_slug: Optional[str]) -> Optional[Scope]:
    """topicSlug XOR subTopicSlug; ninguno -> None (sin filtro)."""
    topic_slug = (topic_slug or "").strip() or None
    sub_topic_slug = (sub_topic_slug or "").strip() or None
    if topic_slug and sub_topic_slug:
        raise ScopeError("topicSlug and subTopicSlug are mutually exclusive")
    if sub_topic_slug:
        return SubTopicScope(sub_topic_slug)
    if topic_slug:
        return TopicScope(topic_slug)
    return None
