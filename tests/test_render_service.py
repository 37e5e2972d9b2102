"""
Tests for count / list markup rendering.
"""
from bs4 import BeautifulSoup

from models.compat_entry import CompatEntry, Release
from models.listing_state import Category, ListingState, LoadStatus
from services.render_service import (
    build_row,
    render_count,
    render_list,
    render_view,
)


def _items(markup):
    return BeautifulSoup(markup, "html.parser").select("div.game-item")


def test_rows_rendered_for_each_entry(sample_entries):
    view = sample_entries[:2]
    items = _items(render_list(view))
    assert render_count(view) == "2"
    assert [i.h3.get_text() for i in items] == ["Game A", "Game B"]


def test_row_fields():
    row = build_row(CompatEntry("Mario Kart 7", 3, (Release("0004000000030800"),)))
    assert row.game_id == "0004000000030800"
    assert row.badge == "OK (3)"
    assert row.category is Category.PLAYABLE
    assert row.issue_url.endswith("?q=Mario+Kart+7")


def test_missing_release_uses_placeholder_id():
    items = _items(render_list((CompatEntry("Game B", 5),)))
    assert items[0].select_one(".game-id").get_text() == "ID: N/A"
    assert "compatibility-unplayable" in items[0].select_one(".compatibility-badge")["class"]


def test_empty_view_renders_placeholder():
    soup = BeautifulSoup(render_list(()), "html.parser")
    assert soup.select_one(".no-results h3").get_text() == "No games found"
    assert render_count(()) == "0"


def test_user_text_is_escaped():
    title = '<script>alert("x")</script>'
    markup = render_list((CompatEntry(title, 0, (Release("<b>id</b>"),)),))
    soup = BeautifulSoup(markup, "html.parser")
    assert soup.find("script") is None
    assert soup.find("b") is None
    assert soup.h3.get_text() == title
    assert soup.select_one(".game-id").get_text() == "ID: <b>id</b>"


def test_render_view_banners():
    loading = render_view(ListingState(status=LoadStatus.LOADING))
    assert loading.loading_visible and not loading.error_visible

    failed = render_view(ListingState(status=LoadStatus.FAILED, error="offline"))
    assert failed.error_visible and not failed.loading_visible
    assert failed.error_message == "offline"
    assert failed.count_text == "0"
