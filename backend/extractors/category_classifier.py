"""Keyword-driven category and emoji classification."""

import logging
from dataclasses import dataclass
from typing import Optional

from schemas.competition_schemas import (
    CATEGORY_RULES,
    BRAND_RULES,
    DEFAULT_CATEGORY,
    DEFAULT_EMOJI,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Classification:
    category: str
    emoji: str
    organizer: Optional[str] = None


def classify_category(text: str) -> Classification:
    """Classify lower-cased text; the first matching rule wins, brand rules override."""
    text_lower = (text or "").lower()

    category, emoji = DEFAULT_CATEGORY, DEFAULT_EMOJI
    for rule_category, rule_emoji, keywords in CATEGORY_RULES:
        if any(keyword in text_lower for keyword in keywords):
            category, emoji = rule_category, rule_emoji
            break

    organizer = None
    for brand, brand_organizer, brand_emoji in BRAND_RULES:
        if brand in text_lower:
            logger.debug(f"Brand rule '{brand}' matched")
            organizer, emoji = brand_organizer, brand_emoji
            break

    return Classification(category=category, emoji=emoji, organizer=organizer)
