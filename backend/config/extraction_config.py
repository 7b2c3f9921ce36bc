"""Configuration for competition extraction."""

import os

# Placeholder value shipped in example env files; treated as "no key configured"
OPENAI_API_KEY_PLACEHOLDER = "your-openai-api-key-here"

# Language model settings (OpenAI-compatible chat completions API)
LLM_CONFIG = {
    "model": os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
    "base_url": os.getenv("OPENAI_BASE_URL") or None,
    "timeout": float(os.getenv("LLM_TIMEOUT", "30")),
    "temperature": float(os.getenv("LLM_TEMPERATURE", "0.1")),
    "max_tokens": int(os.getenv("LLM_MAX_TOKENS", "500")),
}

# Page fetch settings for the URL scraping path
PAGE_FETCH_CONFIG = {
    "timeout": float(os.getenv("PAGE_FETCH_TIMEOUT", "15")),
    "max_bytes": int(os.getenv("PAGE_MAX_BYTES", "500000")),
    "max_redirects": 5,
    "user_agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
    ),
}

# Text sent to the model and kept from scraped pages
MAX_CONTENT_CHARS = int(os.getenv("MAX_CONTENT_CHARS", "4000"))

# Deadline window
DEFAULT_DEADLINE_DAYS = int(os.getenv("DEFAULT_DEADLINE_DAYS", "30"))
MAX_DEADLINE_DAYS = int(os.getenv("MAX_DEADLINE_DAYS", "365"))

# Field length limits
TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 80
ORGANIZER_MIN_LENGTH = 2
ORGANIZER_MAX_LENGTH = 50
PRIZE_MAX_LENGTH = 100
