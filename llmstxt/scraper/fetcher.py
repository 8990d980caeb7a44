"""HTTP fetcher used by the crawler and the robots gate."""

from __future__ import annotations

from typing import Optional
from urllib.parse import urljoin

import httpx

from llmstxt.config import Settings, settings as default_settings
from llmstxt.scraper.models import RawPage


def make_client(settings: Optional[Settings] = None) -> httpx.Client:
    """Return an :class:`httpx.Client` configured from *settings*.

    The timeout is always explicit so an unresponsive origin cannot hang a
    crawl indefinitely.  Redirects are not followed: the crawler decides
    whether a ``Location`` target is on its origin before requesting it.
    """
    settings = settings or default_settings
    return httpx.Client(
        headers=settings.request_headers,
        timeout=settings.request_timeout,
        follow_redirects=False,
    )


def fetch_url(url: str, client: Optional[httpx.Client] = None) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    When *client* is omitted a short-lived client is created from the default
    settings.  The content type is lowercased so callers can match on it
    directly.  A redirect comes back as a body-less page whose ``location``
    holds the resolved target.

    Raises:
        httpx.HTTPStatusError: If the server returns a 4xx/5xx status code.
        httpx.TransportError: On connection failures and timeouts.
    """
    if client is None:
        with make_client() as own_client:
            return fetch_url(url, own_client)

    response = client.get(url)
    content_type = response.headers.get("content-type", "").lower()

    if response.has_redirect_location:
        return RawPage(
            url=url,
            body="",
            status_code=response.status_code,
            content_type=content_type,
            location=urljoin(url, response.headers["location"]),
        )

    response.raise_for_status()

    return RawPage(
        url=url,
        body=response.text,
        status_code=response.status_code,
        content_type=content_type,
    )
