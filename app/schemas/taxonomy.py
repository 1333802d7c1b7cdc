from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

class ContentCounts(BaseModel):
    blogs: int = 0
    notes: int = 0
    leetcodeProblems: int = 0

    @property
    def total(self) -> int:
        return self.blogs + self.notes + self.leetcodeProblems

class SubTopicOut(BaseModel):
    id: int
    topicId: int
    name: str
    slug: str
    description: str = ""
    icon: str = ""
    order: int = 0
    # en el wire va como "_count" (igual que la API original)
    counts: ContentCounts = Field(default_factory=ContentCounts, alias="_count")

    model_config = ConfigDict(populate_by_name=True)

class TopicOut(BaseModel):
    id: int
    name: str
    slug: str
    description: str = ""
    icon: str = ""
    order: int = 0
    counts: ContentCounts = Field(default_factory=ContentCounts, alias="_count")
    subTopics: List[SubTopicOut] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)

    def find_sub_topic(self, slug: str) -> Optional[SubTopicOut]:
        return next((st for st in self.subTopics if st.slug == slug), None)

class NavEntry(BaseModel):
    title: str
    type: str = "page"
    href: str

class Stats(BaseModel):
    topicCount: int = 0
    subTopicCount: int = 0
    blogCount: int = 0
    noteCount: int = 0
    problemCount: int = 0

class TopicsResponse(BaseModel):
    topics: List[TopicOut]
    navigation: dict[str, NavEntry]
    stats: Stats = Field(default_factory=Stats)

class TopicSearchResponse(BaseModel):
    topics: List[TopicOut]
    stats: Stats
