"""
Tests for search and category filtering.
"""
from models.compat_entry import CompatEntry
from models.listing_state import Category, FilterState
from services.filter_service import (
    apply_filters,
    count_by_category,
    matches_search,
)


def test_empty_search_all_toggles_returns_everything(sample_entries):
    view = apply_filters(sample_entries, FilterState())
    assert view == sample_entries


def test_search_is_case_insensitive_on_title(sample_entries):
    view = apply_filters(sample_entries, FilterState(search_term="game a"))
    assert [e.title for e in view] == ["Game A"]


def test_search_matches_any_release_id(sample_entries):
    view = apply_filters(sample_entries, FilterState(search_term="0a1b"))
    assert [e.title for e in view] == ["Mario Kart 7"]


def test_whitespace_is_matched_literally(sample_entries):
    entries = sample_entries + (CompatEntry("Zelda", 0),)
    view = apply_filters(entries, FilterState(search_term=" "))
    assert "Zelda" not in [e.title for e in view]
    assert len(view) == 4
    assert not matches_search(entries[-1], " ")


def test_trailing_space_is_part_of_the_term(sample_entries):
    assert apply_filters(sample_entries, FilterState(search_term="game a ")) == ()


def test_category_toggle_excludes_entries(sample_entries):
    state = FilterState().with_category(Category.UNPLAYABLE, False)
    view = apply_filters(sample_entries, state)
    assert "Game B" not in [e.title for e in view]
    assert len(view) == 3


def test_all_toggles_off_yields_empty_view(sample_entries):
    state = FilterState(search_term="game")
    for category in Category:
        state = state.with_category(category, False)
    assert apply_filters(sample_entries, state) == ()
    assert apply_filters(sample_entries, state.with_search("")) == ()


def test_missing_toggle_counts_as_disabled(sample_entries):
    state = FilterState(category_toggles={Category.UNTESTED: True})
    view = apply_filters(sample_entries, state)
    assert [e.title for e in view] == ["Steel Diver"]


def test_filtering_is_idempotent(sample_entries):
    state = FilterState(search_term="a").with_category(Category.PERFECT, False)
    assert apply_filters(sample_entries, state) == apply_filters(sample_entries, state)


def test_filter_state_updates_return_new_instances():
    state = FilterState()
    toggled = state.with_category(Category.PLAYABLE, False)
    assert state.is_enabled(Category.PLAYABLE)
    assert not toggled.is_enabled(Category.PLAYABLE)
    assert toggled.with_search("x").search_term == "x"


def test_count_by_category(sample_entries):
    counts = count_by_category(sample_entries)
    assert counts == {
        Category.PERFECT: 1,
        Category.PLAYABLE: 1,
        Category.UNPLAYABLE: 1,
        Category.UNTESTED: 1,
    }
    assert count_by_category(()) == {c: 0 for c in Category}
