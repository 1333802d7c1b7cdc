import json

import pytest
import requests

from app.client import DevMasteryClient
from app.domain.taxonomy.scope import ContentKind, TopicScope, SubTopicScope
from app.domain.taxonomy.tabs import Tab
from app.schemas.taxonomy import TopicOut
from app.services.topic_page import PageStatus, load_topic_page, load_topic_listing


TOPICS = [
    {
        "id": 1, "name": "Java", "slug": "java", "description": "", "icon": "☕", "order": 1,
        "_count": {"blogs": 0, "notes": 0, "leetcodeProblems": 0},
        "subTopics": [
            {"id": 11, "topicId": 1, "name": "Python", "slug": "python", "description": "",
             "_count": {"blogs": 3, "notes": 0, "leetcodeProblems": 5}},
        ],
    },
    {
        "id": 2, "name": "SQL Fundamentals", "slug": "sql", "description": "database design",
        "_count": {"blogs": 1, "notes": 2, "leetcodeProblems": 0}, "subTopics": [],
    },
]


class FakeClient:
    timeout = 1

    def __init__(self, content=None, topics_error=None):
        self.content = content or {}
        self.topics_error = topics_error
        self.fetched = []

    def list_topics(self):
        if self.topics_error:
            raise self.topics_error
        return [TopicOut.model_validate(t) for t in TOPICS]

    def fetch(self, scope, kind):
        self.fetched.append((scope, kind))
        return self.content.get(kind, [])


@pytest.mark.asyncio
async def test_subtopic_page_ready():
    client = FakeClient(content={
        ContentKind.BLOGS: [{"id": i, "title": f"b{i}"} for i in range(3)],
        ContentKind.PROBLEMS: [{"id": i, "title": f"p{i}", "difficulty": "MEDIUM"} for i in range(5)],
    })
    page = await load_topic_page(client, "java", "python")

    assert page.status is PageStatus.READY
    assert page.node.slug == "python"
    assert page.content.totalCount == 8
    assert page.content.notes == []
    assert {s for s, _ in client.fetched} == {SubTopicScope("python", topic_slug="java")}

    assert page.tabs.active is Tab.BLOGS
    assert len(page.visible) == 3
    page.tabs.select("problems")
    assert len(page.visible) == 5


@pytest.mark.asyncio
async def test_missing_subtopic_is_not_found_and_skips_content():
    client = FakeClient()
    page = await load_topic_page(client, "java", "nonexistent")
    assert page.status is PageStatus.NOT_FOUND
    assert client.fetched == []


@pytest.mark.asyncio
async def test_missing_topic_is_not_found():
    page = await load_topic_page(FakeClient(), "haskell")
    assert page.status is PageStatus.NOT_FOUND
    assert page.topic is None


@pytest.mark.asyncio
async def test_existing_topic_without_content_is_empty():
    client = FakeClient()
    page = await load_topic_page(client, "sql")
    assert page.status is PageStatus.EMPTY
    assert page.topic.slug == "sql"
    assert {s for s, _ in client.fetched} == {TopicScope("sql")}


@pytest.mark.asyncio
async def test_taxonomy_failure_is_error_and_retryable():
    client = FakeClient(topics_error=requests.ConnectionError("api down"))
    page = await load_topic_page(client, "java")
    assert page.status is PageStatus.ERROR
    assert "api down" in page.error

    client.topics_error = None
    page = await load_topic_page(client, "java")
    assert page.status is PageStatus.EMPTY


def test_listing_filters_and_stats():
    listing = load_topic_listing(FakeClient(), term="", category="databases")
    assert listing.status is PageStatus.READY
    assert [t.slug for t in listing.topics] == ["sql"]
    assert listing.stats.noteCount == 2

    listing = load_topic_listing(FakeClient(), term="python")
    assert [t.slug for t in listing.topics] == ["java"]

    assert load_topic_listing(FakeClient(), term="cobol").status is PageStatus.EMPTY
    assert load_topic_listing(FakeClient(topics_error=RuntimeError("x"))).status is PageStatus.ERROR


class RecordingSession:
    def __init__(self, payload):
        self.payload = payload
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append((url, params, timeout))
        resp = requests.Response()
        resp.status_code = 200
        resp._content = json.dumps(self.payload).encode()
        return resp


def test_client_sends_scope_slug_verbatim():
    session = RecordingSession({"problems": [{"id": 1, "title": "Two Sum", "difficulty": "EASY"}]})
    client = DevMasteryClient("http://api.local/", timeout=3, session=session)

    rows = client.fetch(TopicScope("java"), ContentKind.PROBLEMS)
    assert rows[0].title == "Two Sum"
    assert session.calls == [("http://api.local/api/leetcode", {"topicSlug": "java"}, 3)]

    session.payload = {"blogs": []}
    client.fetch(SubTopicScope("spring", topic_slug="java"), ContentKind.BLOGS)
    assert session.calls[-1][:2] == ("http://api.local/api/blogs", {"subTopicSlug": "spring"})


def test_client_parses_topics_with_counts():
    session = RecordingSession({"topics": TOPICS, "navigation": {}})
    topics = DevMasteryClient("http://api.local", session=session).list_topics()
    assert topics[0].subTopics[0].counts.leetcodeProblems == 5
    assert topics[1].counts.notes == 2


def test_client_search_topics_sends_filters():
    payload = {
        "topics": [TOPICS[1]],
        "navigation": {},
        "stats": {"topicCount": 1, "subTopicCount": 0, "blogCount": 1, "noteCount": 2, "problemCount": 0},
    }
    session = RecordingSession(payload)
    result = DevMasteryClient("http://api.local", timeout=2, session=session).search_topics("sql", "databases")

    assert session.calls == [("http://api.local/api/topics", {"q": "sql", "category": "databases"}, 2)]
    assert [t.slug for t in result.topics] == ["sql"]
    assert result.stats.noteCount == 2
