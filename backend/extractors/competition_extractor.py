"""Competition extractor combining the language model with heuristic fallback."""

import json
import logging
import threading
import time
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Dict, Mapping, Optional

import llm
from config.extraction_config import (
    MAX_CONTENT_CHARS,
    TITLE_MAX_LENGTH,
    ORGANIZER_MAX_LENGTH,
    PRIZE_MAX_LENGTH,
)
from errors import ModelError
from extractors.base_extractor import BaseExtractor
from extractors.category_classifier import classify_category
from extractors.date_extractor import extract_deadline
from extractors.field_extractors import extract_fields
from prompts import COMPETITION_SYSTEM_PROMPT, build_competition_user_prompt
from schemas.competition_schemas import (
    CATEGORY_ALIASES,
    DEFAULT_ORGANIZER,
    DEFAULT_PRIZE,
    DEFAULT_TITLE,
    DEFAULT_TYPE,
)
from services.validation import clean_overrides, validate_competition
from utils.text import hostname_from_url, truncate

logger = logging.getLogger(__name__)

# Content fields accepted from a model reply; metadata is always stamped locally
CONTENT_FIELDS = ("title", "description", "prize", "organizer", "deadline", "category", "image", "type")

_id_lock = threading.Lock()
_last_id = 0


def new_competition_id() -> int:
    """Millisecond timestamp id, bumped when two records share an instant."""
    global _last_id
    with _id_lock:
        candidate = time.time_ns() // 1_000_000
        _last_id = candidate if candidate > _last_id else _last_id + 1
        return _last_id


@dataclass(frozen=True)
class ModelReply:
    """Parsed model output: either a candidate record or the reason parsing failed."""

    candidate: Optional[Dict[str, Any]] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.candidate is not None


def parse_model_reply(raw: Optional[str]) -> ModelReply:
    """Strip code fences and surrounding commentary, then parse the JSON object."""
    if not raw or not raw.strip():
        return ModelReply(error="empty reply")

    cleaned = raw.replace("```json", "").replace("```", "").strip()
    start = cleaned.find("{")
    end = cleaned.rfind("}")
    if start == -1 or end <= start:
        return ModelReply(error="no JSON object in reply")

    try:
        data = json.loads(cleaned[start:end + 1])
    except json.JSONDecodeError as e:
        return ModelReply(error=f"malformed JSON: {e}")

    if not isinstance(data, dict):
        return ModelReply(error="reply is not a JSON object")
    return ModelReply(candidate=data)


class CompetitionExtractor(BaseExtractor):
    """Extractor for competition records from free text or scraped pages."""

    async def extract(
        self,
        text: str,
        url: str = "",
        manual_overrides: Optional[Mapping[str, Any]] = None,
        today: Optional[date] = None,
    ) -> Dict[str, Any]:
        """Extract a validated competition record, preferring the language model."""
        return await self._safe_extract(text, url=url, manual_overrides=manual_overrides, today=today)

    async def _extract_ai(
        self,
        text: str,
        url: str = "",
        manual_overrides: Optional[Mapping[str, Any]] = None,
        today: Optional[date] = None,
    ) -> Dict[str, Any]:
        """Ask the model for the record; raises ModelError on any unusable reply."""
        prompt = build_competition_user_prompt(text, url, max_chars=MAX_CONTENT_CHARS)
        logger.info(f"Calling model for text analysis of {url}")
        raw = await llm.ask_model(prompt, system=COMPETITION_SYSTEM_PROMPT)

        reply = parse_model_reply(raw)
        if not reply.ok:
            raise ModelError(f"Unusable model reply: {reply.error}")

        candidate = self._normalize_model_candidate(reply.candidate, text)
        return self._finalize(candidate, url, manual_overrides, ai_parsed=True, today=today)

    def _normalize_model_candidate(self, data: Dict[str, Any], text: str) -> Dict[str, Any]:
        candidate = {key: data[key] for key in CONTENT_FIELDS if key in data}

        category = candidate.get("category")
        if isinstance(category, str):
            lowered = category.strip().lower()
            candidate["category"] = CATEGORY_ALIASES.get(lowered, lowered)

        if not candidate.get("image"):
            candidate["image"] = classify_category(text).emoji
        return candidate

    def extract_fallback(
        self,
        text: str,
        url: str = "",
        manual_overrides: Optional[Mapping[str, Any]] = None,
        today: Optional[date] = None,
    ) -> Dict[str, Any]:
        """Build a record from text with pattern extractors and keyword rules."""
        text = text or ""
        hostname = hostname_from_url(url)

        title, prize, organizer = extract_fields(text, hostname)
        classification = classify_category(text)
        if classification.organizer:
            organizer = classification.organizer

        overrides = clean_overrides(manual_overrides)
        organizer = truncate(organizer, ORGANIZER_MAX_LENGTH)
        shown_organizer = overrides.get("organizer") or organizer or DEFAULT_ORGANIZER.lower()
        shown_organizer = truncate(shown_organizer, ORGANIZER_MAX_LENGTH).rstrip()

        candidate = {
            "title": truncate(title or (f"{hostname} competition" if hostname else DEFAULT_TITLE), TITLE_MAX_LENGTH),
            "description": f"Competition from {shown_organizer}. See the link for full details.",
            "prize": truncate(prize or DEFAULT_PRIZE, PRIZE_MAX_LENGTH),
            "organizer": organizer,
            "deadline": extract_deadline(text),
            "category": classification.category,
            "image": classification.emoji,
            "type": DEFAULT_TYPE,
        }
        return self._finalize(candidate, url, overrides, ai_parsed=False, today=today)

    def _finalize(
        self,
        candidate: Dict[str, Any],
        url: str,
        manual_overrides: Optional[Mapping[str, Any]],
        ai_parsed: bool,
        today: Optional[date] = None,
    ) -> Dict[str, Any]:
        record = validate_competition(candidate, manual_overrides, today=today)
        record.update({
            "id": new_competition_id(),
            "addedDate": datetime.now(timezone.utc).isoformat(),
            "sourceUrl": url,
            "aiParsed": ai_parsed,
        })
        logger.info(f"Competition extracted: {record['title']} (aiParsed={ai_parsed})")
        return record


def build_fallback_record(
    text: str,
    url: str,
    manual_overrides: Optional[Mapping[str, Any]] = None,
    today: Optional[date] = None,
) -> Dict[str, Any]:
    """Heuristic-only record for ``text``; never calls the model."""
    return CompetitionExtractor({"use_ai": False}).extract_fallback(
        text, url=url, manual_overrides=manual_overrides, today=today
    )


async def build_record(
    text: str,
    url: str,
    manual_overrides: Optional[Mapping[str, Any]] = None,
    today: Optional[date] = None,
) -> Dict[str, Any]:
    """Record for ``text`` via the model when configured, else heuristics."""
    return await CompetitionExtractor().extract(
        text, url=url, manual_overrides=manual_overrides, today=today
    )
