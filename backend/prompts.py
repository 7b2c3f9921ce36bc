from __future__ import annotations

from schemas.competition_schemas import COMPETITION_CATEGORIES


COMPETITION_SYSTEM_PROMPT = (
    "You analyze Norwegian competitions and giveaways.\n"
    "Rules:\n"
    "- Return only one valid JSON object.\n"
    "- Base every value on the provided text.\n"
    "- No markdown and no commentary."
)


def build_competition_user_prompt(text: str, url: str, max_chars: int = 4000) -> str:
    categories = "/".join(COMPETITION_CATEGORIES)
    return f"""Analyze this Norwegian competition text and return JSON with the competition data.

COMPETITION TEXT:
{text[:max_chars]}

URL: {url}

Instructions:
1. Find the exact title from the text
2. Identify the organizer/company
3. Find the prize, with its value if given
4. Find the closing date/deadline
5. Choose the category based on the prize
6. Choose a fitting emoji for the prize

RETURN ONLY THIS JSON OBJECT:
{{
    "title": "Exact title from the text",
    "description": "Short description of the competition",
    "prize": "Concrete prize with value if given",
    "organizer": "Organizer/company name",
    "deadline": "YYYY-MM-DD",
    "category": "{categories}",
    "image": "Fitting emoji for the prize",
    "type": "free"
}}"""
