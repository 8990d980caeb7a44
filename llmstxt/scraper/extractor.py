"""Content extraction: turns HTML into a :class:`CleanPage`."""

from __future__ import annotations

from typing import List, Optional
from urllib.parse import urldefrag, urljoin, urlsplit

from bs4 import BeautifulSoup

from llmstxt.generator.text import normalize_whitespace, title_from_source
from llmstxt.scraper.models import CleanPage
from llmstxt.scraper.urls import same_origin

_INVISIBLE_TAGS = ["script", "style", "noscript"]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _first_text(soup: BeautifulSoup, name: str) -> str:
    tag = soup.find(name)
    if tag is None:
        return ""
    return normalize_whitespace(tag.get_text(separator=" "))


def _body_text(soup: BeautifulSoup) -> str:
    """Return the visible text of ``<body>``.

    Fragments without a ``<body>`` element fall back to the whole document
    minus its ``<head>``.
    """
    if soup.body is not None:
        return normalize_whitespace(soup.body.get_text(separator=" "))
    for tag in soup(["head", "title"]):
        tag.decompose()
    return normalize_whitespace(soup.get_text(separator=" "))


def _extract_links(soup: BeautifulSoup, page_url: str) -> List[str]:
    """Return sorted, de-duplicated same-origin ``http(s)`` links.

    Relative hrefs are resolved against *page_url*; fragments are dropped.
    Links to other origins or other schemes (``mailto:``, ``javascript:``)
    are excluded.
    """
    links: set[str] = set()
    for anchor in soup.find_all("a", href=True):
        href = anchor["href"].strip()
        if not href:
            continue
        try:
            resolved, _ = urldefrag(urljoin(page_url, href))
        except ValueError:
            continue
        if same_origin(resolved, page_url):
            links.add(resolved)
    return sorted(links)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_html(html: str, source: str, page_url: Optional[str] = None) -> CleanPage:
    """Extract title, visible text and links from *html*.

    The title is the first of: ``<title>``, the first ``<h1>``, or a title
    derived from *source* (the URL path for crawled pages).  Links are only
    collected when *page_url* is given; local files have no origin to follow.
    """
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(_INVISIBLE_TAGS):
        tag.decompose()

    title = (
        _first_text(soup, "title")
        or _first_text(soup, "h1")
        or title_from_source(source)
    )
    links = _extract_links(soup, page_url) if page_url else []
    text = _body_text(soup)

    return CleanPage(url=page_url or source, title=title, text=text, links=links)


def extract_content(html: str, url: str) -> CleanPage:
    """Extract a crawled HTML page, deriving fallback titles from its URL path."""
    return extract_html(html, source=urlsplit(url).path or url, page_url=url)
