"""Competition analysis service tying extraction, page fetch and storage together."""

import asyncio
import logging
from typing import Any, Dict, List, Mapping, Optional

from services.page_fetch import fetch_page
from errors import InputError
from extractors.competition_extractor import CompetitionExtractor
from models.db import add_competition, delete_competition, load_competitions
from models.schemas import CompetitionRecord

logger = logging.getLogger(__name__)


def page_to_text(page: Mapping[str, str]) -> str:
    """Join a scraped page's title and content into analyzable text."""
    parts = [page.get("title") or "", page.get("content") or ""]
    return "\n".join(p for p in parts if p)


async def analyze_text(
    url: Optional[str],
    text: Optional[str],
    manual_overrides: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Analyze caller-supplied text; url and text are both required."""
    if not url or not text or not text.strip():
        raise InputError("Missing required parameters")

    logger.info(f"Analyzing text for: {url}")
    record = await CompetitionExtractor().extract(text, url=url, manual_overrides=manual_overrides)
    return CompetitionRecord.from_record(record).to_record()


async def analyze_url(
    url: Optional[str],
    manual_overrides: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Scrape ``url`` and analyze the page text.

    Fetch failures propagate as UpstreamFetchError; there is no fallback
    without text to mine.
    """
    if not url:
        raise InputError("URL is required")

    page = await asyncio.to_thread(fetch_page, url)
    text = page_to_text(page)
    if not text:
        logger.warning(f"No visible text found on {url}")
    record = await CompetitionExtractor().extract(text, url=url, manual_overrides=manual_overrides)
    return CompetitionRecord.from_record(record).to_record()


async def analyze_and_store(
    url: Optional[str],
    text: Optional[str] = None,
    manual_overrides: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Analyze text (or scrape the page when no text is given) and prepend it to the store."""
    if text and text.strip():
        record = await analyze_text(url, text, manual_overrides)
    else:
        record = await analyze_url(url, manual_overrides)

    add_competition(record)
    logger.info(f"Competition added successfully: {record['title']}")
    return record


def list_competitions() -> List[Dict[str, Any]]:
    return load_competitions()


def remove_competition(competition_id: int) -> bool:
    removed = delete_competition(competition_id)
    if removed:
        logger.info(f"Competition {competition_id} deleted")
    return removed
