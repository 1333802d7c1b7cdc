import threading
import time

import pytest

from app.domain.taxonomy.aggregator import ContentAggregator
from app.domain.taxonomy.scope import ContentKind, TopicScope, SubTopicScope
from app.schemas.page import PageContent


ROWS = {
    ContentKind.BLOGS: [{"id": i, "title": f"blog {i}"} for i in range(3)],
    ContentKind.NOTES: [{"id": 10, "title": "note"}],
    ContentKind.PROBLEMS: [{"id": 20 + i, "title": f"p{i}", "difficulty": "HARD"} for i in range(5)],
}


class FakeSource:
    def __init__(self, rows=ROWS, fail=(), slow=(), delay=0.5):
        self.rows = rows
        self.fail = set(fail)
        self.slow = set(slow)
        self.delay = delay
        self.calls = []

    def fetch(self, scope, kind):
        self.calls.append((scope, kind))
        if kind in self.fail:
            raise ConnectionError(f"{kind.value} down")
        if kind in self.slow:
            time.sleep(self.delay)
        return list(self.rows[kind])


@pytest.mark.asyncio
async def test_collects_all_three_kinds():
    source = FakeSource()
    page = await ContentAggregator(source, timeout=2).aggregate(TopicScope("java"))

    assert len(page.blogs) == 3 and len(page.notes) == 1 and len(page.problems) == 5
    assert page.totalCount == 9
    assert page.failed == []
    assert {k for _, k in source.calls} == set(ContentKind)
    assert all(s == TopicScope("java") for s, _ in source.calls)


@pytest.mark.asyncio
async def test_failed_kind_degrades_to_empty(caplog):
    source = FakeSource(fail=[ContentKind.NOTES])
    with caplog.at_level("WARNING", logger="aggregator"):
        page = await ContentAggregator(source, timeout=2).aggregate(SubTopicScope("python"))

    assert [b.id for b in page.blogs] == [0, 1, 2]
    assert len(page.problems) == 5
    assert page.notes == []
    assert page.totalCount == 8
    assert page.failed == ["notes"]
    assert "notes down" in caplog.text


@pytest.mark.asyncio
async def test_timeout_degrades_to_empty():
    source = FakeSource(slow=[ContentKind.PROBLEMS], delay=0.5)
    page = await ContentAggregator(source, timeout=0.05).aggregate(TopicScope("java"))

    assert page.problems == []
    assert page.failed == ["problems"]
    assert len(page.blogs) == 3


@pytest.mark.asyncio
async def test_all_failing_is_still_a_page():
    source = FakeSource(fail=list(ContentKind))
    page = await ContentAggregator(source, timeout=1).aggregate(TopicScope("java"))
    assert page.is_empty
    assert page.failed == ["blogs", "notes", "problems"]


@pytest.mark.asyncio
async def test_fetches_run_concurrently():
    # si los fetch fueran secuenciales la barrera nunca se completa
    barrier = threading.Barrier(3, timeout=2)

    class BarrierSource(FakeSource):
        def fetch(self, scope, kind):
            barrier.wait()
            return super().fetch(scope, kind)

    page = await ContentAggregator(BarrierSource(), timeout=5).aggregate(TopicScope("java"))
    assert page.failed == []
    assert page.totalCount == 9


def test_total_count_always_matches_lists():
    page = PageContent(
        blogs=[{"id": 1, "title": "a"}],
        problems=[{"id": 2, "title": "p", "difficulty": "EASY"}],
    )
    dumped = page.model_dump()
    assert dumped["totalCount"] == 2
    assert dumped["totalCount"] == len(dumped["blogs"]) + len(dumped["notes"]) + len(dumped["problems"])
    assert not page.is_empty
