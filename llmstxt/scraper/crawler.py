"""Breadth-first, single-origin crawler.

``crawl_website`` walks the pages reachable from a seed URL and returns one
:class:`DocumentEntry` per page with extractable text:

    normalise seed → load robots.txt → pop frontier → exclude / robots checks
    → fetch → extract → enqueue same-origin links and redirect targets
    → re-sort frontier

Fetches are strictly sequential.  The pending queue is re-sorted after each
HTML expansion, so traversal order depends only on the URLs discovered and
not on the order links appear in the markup.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterable, List, Optional
from urllib.parse import urlsplit

import httpx

from llmstxt.config import Settings, settings as default_settings
from llmstxt.errors import InvalidInputError
from llmstxt.generator.text import normalize_whitespace, title_from_source
from llmstxt.patterns import matches_any
from llmstxt.scraper.extractor import extract_content
from llmstxt.scraper.fetcher import fetch_url, make_client
from llmstxt.scraper.models import DocumentEntry, RawPage
from llmstxt.scraper.robots import RobotsPolicy, load_robots
from llmstxt.scraper.urls import is_http_url, normalize_url, same_origin

logger = logging.getLogger(__name__)

_TEXT_CONTENT_TYPES = ("text/plain", "text/markdown")


class CrawlFrontier:
    """Pending URLs plus the set of URLs already dequeued."""

    def __init__(self, seed: str) -> None:
        self.queue: deque[str] = deque([seed])
        self.seen: set[str] = set()

    def __bool__(self) -> bool:
        return bool(self.queue)

    def pop(self) -> Optional[str]:
        """Return the next unseen URL and mark it seen, or ``None`` if the
        front of the queue was already visited."""
        url = self.queue.popleft()
        if url in self.seen:
            return None
        self.seen.add(url)
        return url

    def extend(self, links: Iterable[str]) -> None:
        """Enqueue unseen *links* and re-sort the pending queue."""
        for link in links:
            normalized = normalize_url(link)
            if normalized not in self.seen:
                self.queue.append(normalized)
        self.queue = deque(sorted(self.queue))


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _entry_from_text(raw: RawPage) -> Optional[DocumentEntry]:
    text = normalize_whitespace(raw.body)
    if not text:
        return None
    return DocumentEntry(
        source=raw.url, title=title_from_source(urlsplit(raw.url).path), text=text
    )


def _process_page(raw: RawPage, frontier: CrawlFrontier) -> Optional[DocumentEntry]:
    """Turn a fetched page into an entry, expanding the frontier for HTML.

    A redirect yields no entry; its target is queued like a discovered link
    when it stays on the page's origin.
    """
    if raw.location:
        if same_origin(raw.location, raw.url):
            frontier.extend([raw.location])
        else:
            logger.debug("Not following cross-origin redirect %s -> %s", raw.url, raw.location)
        return None

    if "text/html" in raw.content_type:
        page = extract_content(raw.body, raw.url)
        frontier.extend(page.links)
        if not page.text:
            return None
        return DocumentEntry(source=raw.url, title=page.title, text=page.text)

    if any(kind in raw.content_type for kind in _TEXT_CONTENT_TYPES):
        return _entry_from_text(raw)

    logger.debug("Ignoring %s with content type %r", raw.url, raw.content_type)
    return None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def crawl_website(
    seed: str,
    exclude: Iterable[str] = (),
    max_pages: Optional[int] = None,
    client: Optional[httpx.Client] = None,
    settings: Optional[Settings] = None,
) -> List[DocumentEntry]:
    """Crawl same-origin pages reachable from *seed*.

    Args:
        seed: Absolute ``http``/``https`` URL to start from.
        exclude: Glob patterns matched against each URL's path.
        max_pages: Maximum number of collected entries (defaults to
            ``settings.max_pages``).
        client: Optional pre-configured client; one is created (and closed)
            from *settings* otherwise.
        settings: Tuning for this run.

    Returns:
        The collected entries sorted by ``source``.

    Raises:
        InvalidInputError: If *seed* is not an absolute ``http(s)`` URL.
    """
    if not is_http_url(seed):
        raise InvalidInputError(f"Seed must be an absolute http(s) URL: {seed!r}")

    settings = settings or default_settings
    if client is None:
        with make_client(settings) as own_client:
            return crawl_website(seed, exclude, max_pages, own_client, settings)

    budget = settings.max_pages if max_pages is None else max_pages
    patterns = list(exclude)
    start = normalize_url(seed)

    robots: RobotsPolicy = load_robots(start, client)
    frontier = CrawlFrontier(start)
    collected: List[DocumentEntry] = []

    while frontier and len(collected) < budget:
        url = frontier.pop()
        if url is None:
            continue

        path = urlsplit(url).path
        if matches_any(path, patterns):
            logger.debug("Excluded by pattern: %s", url)
            continue

        if not robots.is_allowed(url, settings.user_agent):
            logger.debug("Disallowed by robots.txt: %s", url)
            continue

        try:
            raw = fetch_url(url, client)
        except httpx.HTTPError as exc:
            logger.debug("Skipping %s: %s", url, exc)
            continue

        entry = _process_page(raw, frontier)
        if entry is not None:
            collected.append(entry)

    logger.info("Crawl of %s collected %d page(s)", start, len(collected))
    return sorted(collected, key=lambda entry: entry.source)
