"""Record validation and repair for extracted competitions.

Every record, whether it came from the language model or from the heuristic
extractors, passes through :func:`validate_competition` before it is returned.
Validation never fails: malformed or missing fields are replaced with defaults.
Each repair step is idempotent, so validating an already valid record returns
it unchanged.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Any, Dict, Mapping, Optional

from config.extraction_config import (
    DEFAULT_DEADLINE_DAYS,
    MAX_DEADLINE_DAYS,
    TITLE_MIN_LENGTH,
    TITLE_MAX_LENGTH,
    ORGANIZER_MIN_LENGTH,
    ORGANIZER_MAX_LENGTH,
    PRIZE_MAX_LENGTH,
)
from schemas.competition_schemas import (
    COMPETITION_CATEGORIES,
    DEFAULT_CATEGORY,
    DEFAULT_EMOJI,
    DEFAULT_ORGANIZER,
    DEFAULT_TITLE,
    DEFAULT_TYPE,
    OVERRIDABLE_FIELDS,
)

logger = logging.getLogger(__name__)


def default_deadline(today: Optional[date] = None) -> str:
    today = today or date.today()
    return (today + timedelta(days=DEFAULT_DEADLINE_DAYS)).isoformat()


def clean_overrides(overrides: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """Keep recognized override keys whose values are non-empty strings."""
    if not overrides:
        return {}
    cleaned: Dict[str, str] = {}
    for key in OVERRIDABLE_FIELDS:
        value = overrides.get(key)
        if isinstance(value, str) and value.strip():
            cleaned[key] = value.strip()
    return cleaned


def _as_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, (dict, list, tuple, set)):
        return None
    if isinstance(value, bool):
        return None
    text = str(value).strip()
    return text or None


def _clip(value: Any, limit: int) -> Optional[str]:
    text = _as_text(value)
    if text is None:
        return None
    return text[:limit].rstrip() or None


def parse_deadline(value: Any) -> Optional[date]:
    """Parse ``YYYY-MM-DD`` or an ISO timestamp; None when unparseable."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = _as_text(value)
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def _validate_deadline(value: Any, today: date) -> str:
    parsed = parse_deadline(value)
    latest = today + timedelta(days=MAX_DEADLINE_DAYS)
    if parsed is None or parsed <= today or parsed > latest:
        if value:
            logger.debug(f"Replacing out-of-range deadline {value!r}")
        return default_deadline(today)
    return parsed.isoformat()


def validate_competition(
    candidate: Mapping[str, Any],
    overrides: Optional[Mapping[str, Any]] = None,
    today: Optional[date] = None,
) -> Dict[str, Any]:
    """Return a copy of ``candidate`` that satisfies every record invariant.

    Args:
        candidate: Record fields as produced by an extractor or the model.
        overrides: Caller-supplied values; recognized non-empty strings replace
            the candidate's fields before validation. An overridden title or
            organizer is kept even when shorter than the usual minimum.
        today: Reference date for the deadline window, defaults to today.
    """
    today = today or date.today()
    record: Dict[str, Any] = dict(candidate)
    forced = clean_overrides(overrides)
    record.update(forced)

    title = _clip(record.get("title"), TITLE_MAX_LENGTH)
    if not title or (len(title) < TITLE_MIN_LENGTH and "title" not in forced):
        title = DEFAULT_TITLE
    record["title"] = title

    organizer = _clip(record.get("organizer"), ORGANIZER_MAX_LENGTH)
    if not organizer or (len(organizer) < ORGANIZER_MIN_LENGTH and "organizer" not in forced):
        organizer = DEFAULT_ORGANIZER
    record["organizer"] = organizer

    record["prize"] = _clip(record.get("prize"), PRIZE_MAX_LENGTH) or ""

    record["deadline"] = _validate_deadline(record.get("deadline"), today)

    category = _as_text(record.get("category"))
    record["category"] = category if category in COMPETITION_CATEGORIES else DEFAULT_CATEGORY

    record["description"] = _as_text(record.get("description")) or ""
    record["image"] = _as_text(record.get("image")) or DEFAULT_EMOJI
    record["type"] = _as_text(record.get("type")) or DEFAULT_TYPE

    return record
