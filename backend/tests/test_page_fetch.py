from __future__ import annotations

import types
from typing import Iterable, List, Optional

import pytest
import requests

from errors import InputError, UpstreamFetchError
from services import page_fetch


def _make_fake_requests(
    *,
    headers: Optional[dict] = None,
    chunks: Optional[List[bytes]] = None,
    status_error: Optional[BaseException] = None,
    get_exc: Optional[BaseException] = None,
):
    seen = {}

    class FakeResponse:
        def __init__(self):
            self.headers = headers or {}
            self._chunks = chunks or []
            self.encoding = "utf-8"

        def raise_for_status(self) -> None:
            if status_error:
                raise status_error

        def iter_content(self, chunk_size: int = 8192) -> Iterable[bytes]:
            for c in self._chunks:
                yield c

        def close(self) -> None:
            return None

    class FakeSession:
        def __init__(self):
            self.max_redirects = 30

        def get(self, url: str, headers=None, timeout=None, stream: bool = True, allow_redirects: bool = True):
            seen["url"] = url
            seen["timeout"] = timeout
            seen["headers"] = headers or {}
            seen["max_redirects"] = self.max_redirects
            if get_exc:
                raise get_exc
            return FakeResponse()

        def close(self) -> None:
            return None

    fake_requests = types.SimpleNamespace()
    fake_requests.Session = FakeSession
    return fake_requests, seen


PAGE = """<html><head><title>Vinn en iPhone | Elkjøp</title><style>body {color: red}</style></head>
<body>
<header><h1>Elkjøp meny</h1></header>
<nav><a href="/">Hjem</a></nav>
<main>
  <h2>Sommerkonkurranse</h2>
  <p>Vinn en ny iPhone 16!&nbsp;Frist 15. oktober 2026.</p>
  <script>var tracking = "skjult";</script>
</main>
<footer>Kontakt oss</footer>
</body></html>"""


def test_extract_page_text_drops_chrome():
    page = page_fetch.extract_page_text(PAGE)
    assert page["title"] == "Vinn en iPhone | Elkjøp"
    assert page["content"] == "Sommerkonkurranse Vinn en ny iPhone 16! Frist 15. oktober 2026."


def test_extract_page_text_title_from_h1_and_cap():
    html = "<body><h1>Stor  konkurranse</h1><p>" + "ord " * 2000 + "</p></body>"
    page = page_fetch.extract_page_text(html, max_chars=100)
    assert page["title"] == "Stor konkurranse"
    assert len(page["content"]) == 100


def test_fetch_page_success(monkeypatch):
    fake, seen = _make_fake_requests(headers={"Content-Type": "text/html; charset=utf-8"}, chunks=[PAGE.encode("utf-8")])
    monkeypatch.setattr(page_fetch, "requests", fake, raising=True)

    page = page_fetch.fetch_page("https://www.elkjop.no/konkurranse")
    assert page["url"] == "https://www.elkjop.no/konkurranse"
    assert page["title"] == "Vinn en iPhone | Elkjøp"
    assert "Vinn en ny iPhone 16!" in page["content"]
    assert seen["timeout"] == 15
    assert seen["max_redirects"] == 5
    assert "Mozilla" in seen["headers"]["User-Agent"]


def test_fetch_page_byte_cap(monkeypatch):
    body = b"<html><body><p>" + b"x" * 50_000 + b"</p></body></html>"
    fake, _ = _make_fake_requests(headers={"Content-Type": "text/html"}, chunks=[body[:8192], body[8192:]])
    monkeypatch.setattr(page_fetch, "requests", fake, raising=True)

    page = page_fetch.fetch_page("https://example.com/big", max_bytes=1000)
    assert set(page["content"]) <= {"x"}
    assert len(page["content"]) <= 1000


@pytest.mark.parametrize("url", ["", "ftp://example.com/file", "not a url", "https://"])
def test_fetch_page_rejects_invalid_urls(url):
    with pytest.raises(InputError):
        page_fetch.fetch_page(url)


def test_fetch_page_network_error(monkeypatch):
    fake, _ = _make_fake_requests(get_exc=requests.exceptions.ConnectTimeout("timed out"))
    monkeypatch.setattr(page_fetch, "requests", fake, raising=True)

    with pytest.raises(UpstreamFetchError) as exc_info:
        page_fetch.fetch_page("https://example.com/slow")
    assert "Could not access website" in str(exc_info.value)


def test_fetch_page_http_error(monkeypatch):
    fake, _ = _make_fake_requests(status_error=requests.exceptions.HTTPError("404 Client Error"))
    monkeypatch.setattr(page_fetch, "requests", fake, raising=True)

    with pytest.raises(UpstreamFetchError):
        page_fetch.fetch_page("https://example.com/missing")


def test_fetch_page_too_many_redirects(monkeypatch):
    fake, _ = _make_fake_requests(get_exc=requests.exceptions.TooManyRedirects("redirect loop"))
    monkeypatch.setattr(page_fetch, "requests", fake, raising=True)

    with pytest.raises(UpstreamFetchError) as exc_info:
        page_fetch.fetch_page("https://example.com/loop")
    assert "too many redirects" in str(exc_info.value).lower()


def test_fetch_page_blocks_binary_content(monkeypatch):
    fake, _ = _make_fake_requests(headers={"Content-Type": "application/pdf"}, chunks=[b"%PDF-1.4"])
    monkeypatch.setattr(page_fetch, "requests", fake, raising=True)

    with pytest.raises(UpstreamFetchError) as exc_info:
        page_fetch.fetch_page("https://example.com/rules.pdf")
    assert "application/pdf" in str(exc_info.value)


def test_xhtml_allowed(monkeypatch):
    body = b"<html xmlns=\"http://www.w3.org/1999/xhtml\"><body>Hello</body></html>"
    fake, _ = _make_fake_requests(headers={"Content-Type": "application/xhtml+xml"}, chunks=[body])
    monkeypatch.setattr(page_fetch, "requests", fake, raising=True)

    assert page_fetch.fetch_page("https://example.com/x.xhtml")["content"] == "Hello"
