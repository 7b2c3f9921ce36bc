from __future__ import annotations

from extractors.field_extractors import (
    extract_title,
    extract_prize,
    extract_organizer,
    extract_fields,
)


def test_title_prefers_competition_keyword_line():
    text = "Hei\nVelkommen til butikken vår\nVinn en ny iPhone 15 Pro!\nMer tekst her"
    assert extract_title(text) == "Vinn en ny iPhone 15 Pro!"


def test_title_falls_back_to_first_long_line():
    text = "Kort\n  Dette er første linje  \nAndre linje"
    assert extract_title(text) == "Dette er første linje"


def test_title_none_when_only_short_lines():
    assert extract_title("Hei\nok\n") is None
    assert extract_title("") is None


def test_prize_uses_full_match_of_first_pattern():
    text = "Vinn et gavekort på 5000 kr hos oss. Lykke til!"
    assert extract_prize(text) == "Vinn et gavekort på 5000 kr hos oss"


def test_prize_patterns_are_a_priority_list():
    # The amount appears first in the text, but the gift-card pattern ranks higher
    text = "Du får 500 kr i rabatt. Gavekort verdt mye"
    assert extract_prize(text) == "Gavekort verdt mye"


def test_prize_amount_pattern():
    assert extract_prize("Bare 200 kr per deltaker") == "200 kr per deltaker"


def test_prize_none():
    assert extract_prize("Ingenting her") is None


def test_organizer_label():
    text = "Arrangør: Elkjøp Norge\nLes mer"
    assert extract_organizer(text, "example.com") == "Elkjøp Norge"


def test_organizer_by_capitalized_words():
    text = "Konkurransen arrangeres av Norsk Tipping."
    assert extract_organizer(text) == "Norsk Tipping"


def test_organizer_lowercase_after_av_is_ignored():
    assert extract_organizer("arrangeres av mange folk", "example.com") == "Example.com"


def test_organizer_brand_list():
    assert extract_organizer("Vi elsker SAMSUNG-telefoner") == "SAMSUNG"


def test_organizer_hostname_fallback():
    assert extract_organizer("ingenting spesielt", "example.com") == "Example.com"
    assert extract_organizer("ingenting spesielt", "") is None


def test_extract_fields_runs_all_three():
    title, prize, organizer = extract_fields("Vinn en reise til Roma for to\nArrangør: Ving", "ving.no")
    assert title == "Vinn en reise til Roma for to"
    assert prize == "Vinn en reise til Roma for to"
    assert organizer == "Ving"
