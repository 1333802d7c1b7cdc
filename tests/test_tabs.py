import pytest

from app.domain.taxonomy.tabs import Tab, TabbedView
from app.schemas.page import PageContent


def test_starts_on_blogs():
    assert TabbedView().active is Tab.BLOGS


def test_select_changes_visible_list():
    content = PageContent(
        blogs=[{"id": 1, "title": "b"}],
        notes=[{"id": 2, "title": "n"}, {"id": 3, "title": "m"}],
        problems=[],
    )
    view = TabbedView()
    assert [b.id for b in view.visible(content)] == [1]

    view.select("notes")
    assert [n.id for n in view.visible(content)] == [2, 3]

    view.select(Tab.PROBLEMS)
    assert view.visible(content) == []


def test_leetcode_alias_maps_to_problems():
    view = TabbedView()
    assert view.select("leetcode") is Tab.PROBLEMS
    assert view.select("NOTES") is Tab.NOTES


def test_unknown_tab_rejected_and_state_kept():
    view = TabbedView()
    view.select("notes")
    with pytest.raises(ValueError):
        view.select("videos")
    assert view.active is Tab.NOTES


def test_views_do_not_share_state():
    a, b = TabbedView(), TabbedView()
    a.select("problems")
    assert b.active is Tab.BLOGS


def test_page_content_for_tab_accepts_strings():
    content = PageContent(notes=[{"id": 2, "title": "n"}])
    assert [n.id for n in content.for_tab("notes")] == [2]
    assert content.for_tab("leetcode") == []
    assert content.for_tab(Tab.BLOGS) == []
    with pytest.raises(ValueError):
        content.for_tab("videos")
