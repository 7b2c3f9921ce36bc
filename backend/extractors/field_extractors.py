"""Pattern-based field extractors for competition text."""

import re
import logging
from typing import List, Optional, Pattern, Tuple

from schemas.competition_schemas import (
    TITLE_KEYWORDS,
    PRIZE_PATTERNS,
    ORGANIZER_PATTERNS,
)
from utils.text import capitalize_first

logger = logging.getLogger(__name__)

_PRIZE_MATCHERS: List[Pattern[str]] = [re.compile(p, re.IGNORECASE) for p in PRIZE_PATTERNS]

_ORGANIZER_MATCHERS: List[Pattern[str]] = [
    re.compile(p, re.IGNORECASE) if ignore_case else re.compile(p)
    for p, ignore_case in ORGANIZER_PATTERNS
]


def _candidate_lines(text: str) -> List[str]:
    return [line.strip() for line in text.split("\n") if len(line.strip()) > 5]


def extract_title(text: str) -> Optional[str]:
    """Pick the first line mentioning a competition keyword, else the first real line."""
    if not text:
        return None

    lines = _candidate_lines(text)
    for line in lines:
        lower = line.lower()
        if any(keyword in lower for keyword in TITLE_KEYWORDS):
            return line

    return lines[0] if lines else None


def extract_prize(text: str) -> Optional[str]:
    """Return the full match of the highest-priority prize pattern."""
    if not text:
        return None

    for matcher in _PRIZE_MATCHERS:
        match = matcher.search(text)
        if match:
            return match.group(0).strip()

    return None


def _first_organizer_match(text: str) -> Optional[str]:
    for matcher in _ORGANIZER_MATCHERS:
        match = matcher.search(text)
        if not match:
            continue
        value = match.group(1) if match.groups() and match.group(1) else match.group(0)
        value = value.strip()
        if value:
            return value
    return None


def extract_organizer(text: str, hostname: str = "") -> Optional[str]:
    """Find the organizer in the text, falling back to the capitalized hostname."""
    found = _first_organizer_match(text or "")
    if found:
        return found

    if hostname:
        logger.debug(f"No organizer pattern matched, using hostname {hostname}")
        return capitalize_first(hostname)

    return None


def extract_fields(text: str, hostname: str = "") -> Tuple[Optional[str], Optional[str], Optional[str]]:
    """Run the title, prize and organizer extractors over the same text."""
    return extract_title(text), extract_prize(text), extract_organizer(text, hostname)
