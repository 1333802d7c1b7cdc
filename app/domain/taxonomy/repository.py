import logging
from typing import Optional

from sqlalchemy import select, func
from sqlalchemy.orm import Session, sessionmaker

from app.models.user import User  # noqa: F401  (mapper de author)
from app.models.topic import Topic
from app.models.sub_topic import SubTopic
from app.models.blog import Blog
from app.models.note import Note
from app.models.leetcode_problem import LeetcodeProblem
from app.schemas.taxonomy import TopicOut, SubTopicOut, ContentCounts
from app.schemas.content import blog_out, note_out, problem_out
from app.domain.taxonomy.scope import (
    ContentKind, TopicScope, SubTopicScope, Scope,
    TopicNotFound, ContentNotFound, ScopeError,
)

log = logging.getLogger("taxonomy")

# modelo ORM + serializador por kind
_KINDS = {
    ContentKind.BLOGS: (Blog, blog_out),
    ContentKind.NOTES: (Note, note_out),
    ContentKind.PROBLEMS: (LeetcodeProblem, problem_out),
}

# clave de _count -> modelo
_COUNTED = (("blogs", Blog), ("notes", Note), ("leetcodeProblems", LeetcodeProblem))


class TaxonomyRepository:
    """Lecturas de topics/subtopics y su contenido sobre una Session."""

    def __init__(self, db: Session):
        self.db = db

    # ---------------- conteos ----------------

    def _count_by(self, fk_name: str) -> dict[int, ContentCounts]:
        """Conteos agrupados por FK ('topic_id' | 'sub_topic_id'), calculados en la lectura."""
        out: dict[int, ContentCounts] = {}
        for key, model in _COUNTED:
            fk = getattr(model, fk_name)
            rows = self.db.execute(
                select(fk, func.count(model.id)).where(fk.isnot(None)).group_by(fk)
            ).all()
            for node_id, n in rows:
                counts = out.setdefault(int(node_id), ContentCounts())
                setattr(counts, key, int(n or 0))
        return out

    @staticmethod
    def _sub_topic_out(st: SubTopic, counts: dict[int, ContentCounts]) -> SubTopicOut:
        return SubTopicOut(
            id=st.id,
            topicId=st.topic_id,
            name=st.name,
            slug=st.slug,
            description=st.description or "",
            icon=st.icon or "",
            order=int(st.order or 0),
            counts=counts.get(st.id, ContentCounts()),
        )

    def _topic_out(self, t: Topic, sub_topics: list[SubTopic],
                   topic_counts: dict[int, ContentCounts],
                   sub_counts: dict[int, ContentCounts]) -> TopicOut:
        return TopicOut(
            id=t.id,
            name=t.name,
            slug=t.slug,
            description=t.description or "",
            icon=t.icon or "",
            order=int(t.order or 0),
            counts=topic_counts.get(t.id, ContentCounts()),
            subTopics=[self._sub_topic_out(st, sub_counts) for st in sub_topics],
        )

    # ---------------- taxonomía ----------------

    def list_topics(self) -> list[TopicOut]:
        topics = self.db.execute(
            select(Topic).order_by(Topic.order.asc(), Topic.id.asc())
        ).scalars().all()
        subs = self.db.execute(
            select(SubTopic).order_by(SubTopic.order.asc(), SubTopic.id.asc())
        ).scalars().all()

        by_topic: dict[int, list[SubTopic]] = {}
        for st in subs:
            by_topic.setdefault(st.topic_id, []).append(st)

        topic_counts = self._count_by("topic_id")
        sub_counts = self._count_by("sub_topic_id")
        return [self._topic_out(t, by_topic.get(t.id, []), topic_counts, sub_counts) for t in topics]

    def find_topic_by_slug(self, slug: str) -> TopicOut:
        t = self.db.execute(select(Topic).where(Topic.slug == slug)).scalar_one_or_none()
        if not t:
            raise TopicNotFound(slug)
        subs = self.db.execute(
            select(SubTopic)
            .where(SubTopic.topic_id == t.id)
            .order_by(SubTopic.order.asc(), SubTopic.id.asc())
        ).scalars().all()
        return self._topic_out(t, list(subs), self._count_by("topic_id"), self._count_by("sub_topic_id"))

    def find_subtopic_by_slug(self, topic_slug: str, sub_topic_slug: str) -> SubTopicOut:
        row = self.db.execute(
            select(SubTopic)
            .join(Topic, Topic.id == SubTopic.topic_id)
            .where(Topic.slug == topic_slug, SubTopic.slug == sub_topic_slug)
        ).scalar_one_or_none()
        if not row:
            raise TopicNotFound(f"{topic_slug}/{sub_topic_slug}")
        return self._sub_topic_out(row, self._count_by("sub_topic_id"))

    # ---------------- contenido ----------------

    def _content_query(self, kind: ContentKind, scope: Optional[Scope]):
        model, _ = _KINDS[ContentKind(kind)]
        q = select(model)
        if model is Blog:
            # público: solo blogs publicados
            q = q.where(Blog.published.is_(True))

        if isinstance(scope, SubTopicScope):
            # alcance exclusivo: nunca cae a contenido solo-topic
            q = q.join(SubTopic, SubTopic.id == model.sub_topic_id).where(SubTopic.slug == scope.slug)
            if scope.topic_slug:
                q = q.join(Topic, Topic.id == SubTopic.topic_id).where(Topic.slug == scope.topic_slug)
        elif isinstance(scope, TopicScope):
            q = q.join(Topic, Topic.id == model.topic_id).where(Topic.slug == scope.slug)
        elif scope is not None:
            raise ScopeError(f"scope no soportado: {scope!r}")

        return q.order_by(model.created_at.desc(), model.id.desc())

    def list_content(self, scope: Optional[Scope], kind: ContentKind) -> list:
        kind = ContentKind(kind)
        _, to_out = _KINDS[kind]
        rows = self.db.execute(self._content_query(kind, scope)).unique().scalars().all()
        return [to_out(r) for r in rows]

    def get_blog(self, blog_id: int):
        b = self.db.execute(
            select(Blog).where(Blog.id == blog_id, Blog.published.is_(True))
        ).unique().scalar_one_or_none()
        if not b:
            raise ContentNotFound("Blog not found")
        return blog_out(b, detail=True)

    def get_note(self, note_id: int):
        n = self.db.get(Note, note_id)
        if not n:
            raise ContentNotFound("Note not found")
        return note_out(n)

    def get_problem(self, problem_id: int):
        p = self.db.get(LeetcodeProblem, problem_id)
        if not p:
            raise ContentNotFound("Problem not found")
        return problem_out(p)


class RepositorySource:
    """ContentSource sobre la DB: una Session propia por fetch (los fetch corren en paralelo)."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def fetch(self, scope: Scope, kind: ContentKind) -> list:
        db = self.session_factory()
        try:
            return TaxonomyRepository(db).list_content(scope, kind)
        finally:
            db.close()
