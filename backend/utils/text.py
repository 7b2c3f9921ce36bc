from __future__ import annotations

import re
from typing import Optional
from urllib.parse import urlparse


def hostname_from_url(url: Optional[str]) -> str:
    """Return the URL hostname without a leading ``www.``; empty if unparseable."""
    if not url:
        return ""
    try:
        host = urlparse(url.strip()).hostname or ""
    except ValueError:
        return ""
    if host.startswith("www."):
        host = host[4:]
    return host


def capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:] if text else text


def truncate(text: Optional[str], limit: int) -> Optional[str]:
    if text is None:
        return None
    return text[:limit]


def collapse_whitespace(text: str) -> str:
    if not text:
        return ""
    return re.sub(r"\s+", " ", text).strip()
