import logging
import re
from html import unescape
from html.parser import HTMLParser
from typing import Dict, List, Optional

import requests
from requests.exceptions import TooManyRedirects, RequestException

from config.extraction_config import MAX_CONTENT_CHARS, PAGE_FETCH_CONFIG
from errors import InputError, UpstreamFetchError
from utils.text import collapse_whitespace, hostname_from_url

logger = logging.getLogger(__name__)

# Markup whose text never describes the competition itself
SKIPPED_TAGS = {"script", "style", "noscript", "nav", "footer", "header", "template", "svg"}

BLOCK_TAGS = {
    "p",
    "div",
    "section",
    "article",
    "main",
    "li",
    "ul",
    "ol",
    "table",
    "tr",
    "td",
    "th",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "pre",
}


class _PageTextHTMLParser(HTMLParser):
    """Collect the page title, the first <h1> and the visible body text."""

    def __init__(self) -> None:
        super().__init__()
        self.suppressed_depth: int = 0  # inside a SKIPPED_TAGS element
        self.in_title: bool = False
        self.in_h1: bool = False
        self.title_parts: List[str] = []
        self.h1_parts: List[str] = []
        self.seen_h1: bool = False
        self.chunks: List[str] = []

    def handle_starttag(self, tag: str, attrs):  # type: ignore[override]
        tag_lower = tag.lower()
        if tag_lower == "title":
            self.in_title = True
            return
        if tag_lower in SKIPPED_TAGS:
            self.suppressed_depth += 1
            return
        if tag_lower == "h1" and not self.seen_h1:
            self.in_h1 = True
        if tag_lower in BLOCK_TAGS or tag_lower == "br":
            self.chunks.append("\n")

    def handle_endtag(self, tag: str):  # type: ignore[override]
        tag_lower = tag.lower()
        if tag_lower == "title":
            self.in_title = False
            return
        if tag_lower in SKIPPED_TAGS:
            if self.suppressed_depth > 0:
                self.suppressed_depth -= 1
            return
        if tag_lower == "h1" and self.in_h1:
            self.in_h1 = False
            self.seen_h1 = True
        if tag_lower in BLOCK_TAGS:
            self.chunks.append("\n")

    def handle_data(self, data: str):  # type: ignore[override]
        if not data or not data.strip():
            return
        if self.in_title:
            self.title_parts.append(data)
            return
        if self.suppressed_depth > 0:
            return
        if self.in_h1:
            self.h1_parts.append(data)
        self.chunks.append(data)

    @property
    def title(self) -> str:
        title = collapse_whitespace(unescape("".join(self.title_parts)))
        return title or collapse_whitespace(unescape("".join(self.h1_parts)))


def extract_page_text(html_text: str, max_chars: int = MAX_CONTENT_CHARS) -> Dict[str, str]:
    """Return ``{"title", "content"}`` for an HTML document.

    Content is the visible text with navigation chrome removed, whitespace
    collapsed to single spaces and capped at ``max_chars``.
    """
    if not html_text:
        return {"title": "", "content": ""}

    parser = _PageTextHTMLParser()
    parser.feed(html_text)
    parser.close()

    text = unescape("".join(parser.chunks)).replace("\xa0", " ")
    content = collapse_whitespace(text)[:max_chars]
    return {"title": parser.title, "content": content}


def _is_allowed_mime(ctype_raw: str) -> bool:
    if not ctype_raw:
        # Some servers omit the header; the body is parsed as HTML anyway
        return True
    ctype = ctype_raw.split(";", 1)[0].strip().lower()
    if ctype.startswith("text/"):
        return True
    return ctype in {"application/xhtml+xml"}


def fetch_page(
    url: str,
    *,
    timeout: Optional[float] = None,
    max_bytes: Optional[int] = None,
    max_redirects: Optional[int] = None,
) -> Dict[str, str]:
    """Fetch a competition page and return ``{"url", "title", "content"}``.

    Raises:
        InputError: the URL is not an http(s) URL with a hostname.
        UpstreamFetchError: the page is unreachable, times out, answers with an
            error status, or is not a text document.
    """
    if not url or not url.lower().startswith(("http://", "https://")) or not hostname_from_url(url):
        raise InputError(f"Invalid URL: {url!r}")

    timeout = timeout if timeout is not None else PAGE_FETCH_CONFIG["timeout"]
    max_bytes = max_bytes if max_bytes is not None else PAGE_FETCH_CONFIG["max_bytes"]

    session = requests.Session()
    session.max_redirects = max_redirects if max_redirects is not None else PAGE_FETCH_CONFIG["max_redirects"]

    logger.info(f"Scraping website: {url}")
    resp = None
    try:
        resp = session.get(
            url,
            headers={"User-Agent": PAGE_FETCH_CONFIG["user_agent"]},
            timeout=timeout,
            stream=True,
            allow_redirects=True,
        )
        resp.raise_for_status()

        ctype = resp.headers.get("Content-Type", "")
        if not _is_allowed_mime(ctype):
            raise UpstreamFetchError(f"Could not access website: unsupported content-type {ctype}")

        total = 0
        chunks = []
        for chunk in resp.iter_content(chunk_size=8192):
            if not chunk:
                continue
            chunks.append(chunk)
            total += len(chunk)
            if total >= max_bytes:
                break
        content_bytes = b"".join(chunks)[:max_bytes]

        encoding = getattr(resp, "encoding", None) or "utf-8"
        try:
            html_text = content_bytes.decode(encoding, errors="ignore")
        except LookupError:
            html_text = content_bytes.decode("utf-8", errors="ignore")

        page = extract_page_text(html_text)
        logger.info(f"Scraped title: {page['title'][:100]}")
        return {"url": url, "title": page["title"], "content": page["content"]}
    except TooManyRedirects as e:
        logger.error(f"Scraping error: {e}")
        raise UpstreamFetchError(f"Could not access website: too many redirects (> {session.max_redirects})") from e
    except RequestException as e:
        logger.error(f"Scraping error: {e}")
        raise UpstreamFetchError(f"Could not access website: {e}") from e
    finally:
        try:
            if resp is not None:
                resp.close()
        finally:
            session.close()
