import re
from datetime import datetime
from pydantic import BaseModel, Field
from typing import List, Optional

from app.core.enums import Difficulty

ANONYMOUS = "Anonymous"
NOTE_EXCERPT_CHARS = 150

def slugify(title: str) -> str:
    """'Two Pointers: Intro!' -> 'two-pointers-intro'"""
    return re.sub(r"[^a-z0-9]+", "-", (title or "").lower()).strip("-")

class AuthorOut(BaseModel):
    id: Optional[int] = None
    name: str = ANONYMOUS

class NodeRef(BaseModel):
    id: int
    name: str
    slug: str
    icon: str = ""

class BlogOut(BaseModel):
    id: int
    title: str
    excerpt: str = ""
    category: str = ""
    tags: List[str] = Field(default_factory=list)
    readTime: int = 0
    coverImage: Optional[str] = None
    published: bool = True
    createdAt: Optional[datetime] = None
    author: AuthorOut = Field(default_factory=AuthorOut)
    topic: Optional[NodeRef] = None
    subTopic: Optional[NodeRef] = None

class BlogDetailOut(BlogOut):
    content: str = ""

class NoteOut(BaseModel):
    id: int
    title: str
    slug: str = ""
    content: str = ""
    excerpt: str = ""
    category: str = ""
    tags: List[str] = Field(default_factory=list)
    createdAt: Optional[datetime] = None
    author: AuthorOut = Field(default_factory=AuthorOut)
    authorName: str = ANONYMOUS
    topic: Optional[NodeRef] = None
    subTopic: Optional[NodeRef] = None

class SolutionOut(BaseModel):
    id: int
    language: str
    code: str
    explanation: Optional[str] = None
    timeComplexity: Optional[str] = None
    spaceComplexity: Optional[str] = None
    isOptimal: bool = False

class ResourceOut(BaseModel):
    id: int
    title: str
    url: str
    type: str = "ARTICLE"

class ProblemOut(BaseModel):
    id: int
    title: str
    description: str = ""
    difficulty: Difficulty
    category: str = ""
    tags: List[str] = Field(default_factory=list)
    hints: List[str] = Field(default_factory=list)
    companies: List[str] = Field(default_factory=list)
    followUp: Optional[str] = None
    frequency: Optional[int] = None
    acceptance: Optional[float] = None
    isPremium: bool = False
    leetcodeUrl: Optional[str] = None
    problemNumber: Optional[int] = None
    createdAt: Optional[datetime] = None
    author: AuthorOut = Field(default_factory=AuthorOut)
    authorName: str = ANONYMOUS
    solutions: List[SolutionOut] = Field(default_factory=list)
    resources: List[ResourceOut] = Field(default_factory=list)

class BlogsResponse(BaseModel):
    blogs: List[BlogOut]

class NotesResponse(BaseModel):
    success: bool = True
    notes: List[NoteOut]
    total: int

class ProblemsResponse(BaseModel):
    success: bool = True
    problems: List[ProblemOut]
    total: int

# ---- mapeo ORM -> wire ----

def _author(row) -> AuthorOut:
    a = getattr(row, "author", None)
    if a is None:
        return AuthorOut()
    return AuthorOut(id=a.id, name=a.name or ANONYMOUS)

def _node_ref(node) -> Optional[NodeRef]:
    if node is None:
        return None
    return NodeRef(id=node.id, name=node.name, slug=node.slug, icon=node.icon or "")

def blog_out(b, detail: bool = False) -> BlogOut:
    data = dict(
        id=b.id,
        title=b.title,
        excerpt=b.excerpt or "",
        category=b.category or "",
        tags=list(b.tags or []),
        readTime=int(b.read_time or 0),
        coverImage=b.cover_image,
        published=bool(b.published),
        createdAt=b.created_at,
        author=_author(b),
        topic=_node_ref(getattr(b, "topic", None)),
        subTopic=_node_ref(getattr(b, "sub_topic", None)),
    )
    if detail:
        return BlogDetailOut(content=b.content or "", **data)
    return BlogOut(**data)

def note_out(n) -> NoteOut:
    author = _author(n)
    content = n.content or ""
    return NoteOut(
        id=n.id,
        title=n.title,
        slug=slugify(n.title),
        content=content,
        excerpt=content[:NOTE_EXCERPT_CHARS],
        category=n.category or "",
        tags=list(n.tags or []),
        createdAt=n.created_at,
        author=author,
        authorName=author.name,
        topic=_node_ref(getattr(n, "topic", None)),
        subTopic=_node_ref(getattr(n, "sub_topic", None)),
    )

def problem_out(p) -> ProblemOut:
    author = _author(p)
    return ProblemOut(
        id=p.id,
        title=p.title,
        description=p.description or "",
        difficulty=p.difficulty,
        category=p.category or "",
        tags=list(p.tags or []),
        hints=list(p.hints or []),
        companies=list(p.companies or []),
        followUp=p.follow_up,
        frequency=p.frequency,
        acceptance=p.acceptance,
        isPremium=bool(p.is_premium),
        leetcodeUrl=p.leetcode_url,
        problemNumber=p.problem_number,
        createdAt=p.created_at,
        author=author,
        authorName=author.name,
        solutions=[
            SolutionOut(
                id=s.id, language=s.language, code=s.code, explanation=s.explanation,
                timeComplexity=s.time_complexity, spaceComplexity=s.space_complexity,
                isOptimal=bool(s.is_optimal),
            )
            for s in (p.solutions or [])
        ],
        resources=[ResourceOut(id=r.id, title=r.title, url=r.url, type=r.type) for r in (p.resources or [])],
    )
