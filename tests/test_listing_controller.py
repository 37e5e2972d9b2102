"""
Tests for the listing controller state machine.
"""
import httpx
import pytest
from bs4 import BeautifulSoup

from models.compat_entry import CompatEntry
from models.listing_state import Category, LoadStatus
from services.exceptions import InvalidTransitionError, LoadError
from services.listing_controller import ListingController
from services.loader_service import load_entries_async

TWO_GAMES = (CompatEntry("Game A", 0), CompatEntry("Game B", 5))


@pytest.fixture
def ready_controller():
    controller = ListingController()
    controller.begin_load()
    controller.complete_load(TWO_GAMES)
    return controller


def _titles(controller):
    soup = BeautifulSoup(controller.render().list_html, "html.parser")
    return [h.get_text() for h in soup.select(".game-item h3")]


def test_initial_state_is_idle():
    controller = ListingController()
    assert controller.state.status is LoadStatus.IDLE
    assert controller.render().loading_visible


def test_loading_shows_banner():
    controller = ListingController()
    controller.begin_load()
    assert controller.state.status is LoadStatus.LOADING
    assert controller.render().loading_visible
    assert controller.render().count_text == "0"


def test_load_renders_all_entries(ready_controller):
    assert ready_controller.state.status is LoadStatus.READY
    rendered = ready_controller.render()
    assert rendered.count_text == "2"
    assert not rendered.loading_visible and not rendered.error_visible
    assert _titles(ready_controller) == ["Game A", "Game B"]


def test_search_narrows_view(ready_controller):
    ready_controller.set_search("game a")
    assert ready_controller.state.status is LoadStatus.READY
    assert ready_controller.render().count_text == "1"
    assert _titles(ready_controller) == ["Game A"]


def test_category_toggle_and_all_off(ready_controller):
    ready_controller.set_category(Category.UNPLAYABLE, False)
    assert _titles(ready_controller) == ["Game A"]
    for category in Category:
        ready_controller.set_category(category, False)
    ready_controller.set_search("game")
    assert ready_controller.render().count_text == "0"
    assert "No games found" in ready_controller.render().list_html


def test_filters_set_before_load_apply_on_completion():
    controller = ListingController()
    controller.begin_load()
    controller.set_search("game b")
    controller.complete_load(TWO_GAMES)
    assert _titles(controller) == ["Game B"]


@pytest.mark.asyncio
async def test_both_fetches_fail_shows_error(tmp_path):
    def offline(request):
        raise httpx.ConnectError("offline", request=request)

    controller = ListingController()
    controller.begin_load()
    async with httpx.AsyncClient(transport=httpx.MockTransport(offline)) as client:
        try:
            await load_entries_async(
                "https://example.test/list.json", tmp_path / "missing.json", client=client
            )
        except LoadError as exc:
            controller.fail_load(str(exc))

    assert controller.state.status is LoadStatus.FAILED
    rendered = controller.render()
    assert rendered.error_visible
    assert "Fallback also failed" in rendered.error_message
    assert rendered.count_text == "0"
    assert _titles(controller) == []

    controller.set_search("game")
    assert controller.render().count_text == "0"
    assert controller.state.filters.search_term == "game"


def test_only_one_load_per_lifecycle(ready_controller):
    with pytest.raises(InvalidTransitionError):
        ready_controller.begin_load()


def test_failed_load_cannot_complete():
    controller = ListingController()
    controller.begin_load()
    controller.fail_load("offline")
    with pytest.raises(InvalidTransitionError):
        controller.complete_load(TWO_GAMES)


def test_complete_load_requires_loading():
    controller = ListingController()
    with pytest.raises(InvalidTransitionError):
        controller.complete_load(TWO_GAMES)


def test_listeners_see_every_change():
    seen = []
    controller = ListingController()
    controller.add_listener(lambda state: seen.append(state.status))
    controller.begin_load()
    controller.complete_load(TWO_GAMES)
    controller.set_search("b")
    assert seen == [LoadStatus.LOADING, LoadStatus.READY, LoadStatus.READY]
