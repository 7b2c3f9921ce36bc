from __future__ import annotations

import pytest

from extractors.category_classifier import classify_category


@pytest.mark.parametrize(
    "text,category,emoji",
    [
        ("Vinn en ny iPhone", "technology", "📱"),
        ("Vinn en reise til Spania", "travel", "✈️"),
        ("Vinn en PlayStation 5", "gaming", "🎮"),
        ("Nye fotballsko til hele laget", "sports", "⚽"),
        ("Gratis pizza et helt år", "food", "🍕"),
        ("Ingen nøkkelord i denne teksten", "other", "🎁"),
    ],
)
def test_keyword_rules(text, category, emoji):
    result = classify_category(text)
    assert (result.category, result.emoji) == (category, emoji)
    assert result.organizer is None


def test_first_matching_rule_wins():
    # Technology is listed before travel
    result = classify_category("Vinn en laptop og en reise")
    assert result.category == "technology"


@pytest.mark.parametrize(
    "text,category",
    [
        ("Vinn en drømmereise til Thailand", "travel"),
        ("Vinn en sommerferie for hele familien", "travel"),
        ("Vinn et brettspill", "gaming"),
        ("Nytt dataspill til den heldige vinneren", "gaming"),
        ("Skiutstyr for vinteren", "sports"),
    ],
)
def test_keywords_match_inside_compound_words(text, category):
    assert classify_category(text).category == category


def test_ikea_forces_organizer_and_emoji():
    result = classify_category("Vinn en iPhone fra IKEA")
    assert result.organizer == "Ikea"
    assert result.emoji == "🏠"
    assert result.category == "technology"


def test_ikea_without_other_keywords():
    result = classify_category("Gavekort hos ikea")
    assert (result.category, result.emoji, result.organizer) == ("other", "🏠", "Ikea")
