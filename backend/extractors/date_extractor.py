"""Deadline extraction with Norwegian month-name support."""

import re
import logging
from datetime import date
from typing import Callable, Iterator, List, Optional, Pattern, Tuple

from schemas.competition_schemas import NORWEGIAN_MONTHS

logger = logging.getLogger(__name__)


def _from_month_name(match: "re.Match[str]") -> Optional[Tuple[int, int, int]]:
    month = NORWEGIAN_MONTHS.get(match.group(2).lower())
    if month is None:
        return None
    return int(match.group(3)), month, int(match.group(1))


def _from_iso(match: "re.Match[str]") -> Optional[Tuple[int, int, int]]:
    return int(match.group(1)), int(match.group(2)), int(match.group(3))


def _from_slashed(match: "re.Match[str]") -> Optional[Tuple[int, int, int]]:
    return int(match.group(3)), int(match.group(2)), int(match.group(1))


# Priority-ordered (pattern, converter) pairs; converters return (year, month, day)
DATE_PATTERNS: List[Tuple[Pattern[str], Callable[["re.Match[str]"], Optional[Tuple[int, int, int]]]]] = [
    (re.compile(r"(\d{1,2})\.\s*([A-Za-zÆØÅæøå]+)\s*(\d{4})"), _from_month_name),  # 15. oktober 2025
    (re.compile(r"(\d{4})-(\d{1,2})-(\d{1,2})"), _from_iso),                         # 2025-10-15
    (re.compile(r"(\d{1,2})/(\d{1,2})/(\d{4})"), _from_slashed),                     # 15/10/2025
]


def _iter_dates(text: str) -> Iterator[date]:
    for pattern, convert in DATE_PATTERNS:
        for match in pattern.finditer(text):
            parts = convert(match)
            if parts is None:
                continue
            try:
                yield date(*parts)
            except ValueError:
                logger.debug(f"Discarding impossible date {match.group(0)!r}")
                continue


def extract_deadline(text: str) -> Optional[str]:
    """Return the first recognizable date in ``text`` as ``YYYY-MM-DD``, else None."""
    if not text:
        return None
    for found in _iter_dates(text):
        return found.isoformat()
    return None
