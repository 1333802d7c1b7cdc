from pydantic import BaseModel, Field, computed_field
from typing import List, Optional

from app.schemas.content import BlogOut, NoteOut, ProblemOut
from app.schemas.taxonomy import TopicOut, SubTopicOut
from app.domain.taxonomy.tabs import Tab

class PageContent(BaseModel):
    blogs: List[BlogOut] = Field(default_factory=list)
    notes: List[NoteOut] = Field(default_factory=list)
    problems: List[ProblemOut] = Field(default_factory=list)
    # kinds que fallaron o expiraron (fail-soft): "blogs" | "notes" | "problems"
    failed: List[str] = Field(default_factory=list)

    @computed_field
    @property
    def totalCount(self) -> int:
        return len(self.blogs) + len(self.notes) + len(self.problems)

    @property
    def is_empty(self) -> bool:
        return self.totalCount == 0

    def for_tab(self, tab) -> list:
        return getattr(self, Tab(tab).field)

class TopicPageOut(BaseModel):
    topic: TopicOut
    subTopic: Optional[SubTopicOut] = None
    content: PageContent
    canManage: bool = False
