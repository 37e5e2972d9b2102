"""
Tests for compatibility code classification.
"""
import pytest

from models.listing_state import Category
from services.classifier import badge_text, classify, label_for


@pytest.mark.parametrize(
    "code, category, label",
    [
        (0, Category.PERFECT, "Perfect"),
        (1, Category.PERFECT, "Great"),
        (2, Category.PLAYABLE, "Good"),
        (3, Category.PLAYABLE, "OK"),
        (4, Category.UNPLAYABLE, "Poor"),
        (5, Category.UNPLAYABLE, "Bad"),
        (99, Category.UNTESTED, "Untested"),
    ],
)
def test_known_codes(code, category, label):
    assert classify(code) is category
    assert label_for(code) == label


def test_unknown_codes_still_get_one_category():
    assert classify(42) is Category.UNPLAYABLE
    assert classify(100) is Category.UNPLAYABLE
    assert classify(-1) is Category.PERFECT
    assert label_for(42) == "Unknown"


def test_classification_is_deterministic():
    for code in range(-5, 120):
        first = classify(code)
        assert isinstance(first, Category)
        assert classify(code) is first
        assert label_for(code) == label_for(code)


def test_badge_text_includes_code():
    assert badge_text(1) == "Great (1)"
    assert badge_text(99) == "Untested (99)"
