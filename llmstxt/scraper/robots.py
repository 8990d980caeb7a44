"""robots.txt policy gate.

The policy is loaded once per crawl for the seed's origin.  Any failure to
obtain it (network error, non-2xx status, redirect) fails open: every URL on
the origin is allowed.

Rules are evaluated by :mod:`protego`: the longest matching path wins, and
``*`` / ``$`` wildcards are honoured.
"""

from __future__ import annotations

import logging

import httpx
from protego import Protego

from llmstxt.scraper.fetcher import fetch_url
from llmstxt.scraper.urls import robots_url_for, same_origin

logger = logging.getLogger(__name__)


class RobotsPolicy:
    """Allow/deny answers for URLs on a single origin."""

    def __init__(self, origin_url: str, robots_txt: str = "") -> None:
        self.origin_url = origin_url
        self._rules = Protego.parse(robots_txt)

    def is_allowed(self, url: str, user_agent: str) -> bool:
        """Return ``True`` if *user_agent* may fetch *url*.

        URLs on other origins are never allowed; the policy says nothing
        about them.
        """
        if not same_origin(url, self.origin_url):
            return False
        return self._rules.can_fetch(url, user_agent)

    @classmethod
    def allow_all(cls, origin_url: str) -> "RobotsPolicy":
        return cls(origin_url, "")


def load_robots(origin_url: str, client: httpx.Client) -> RobotsPolicy:
    """Fetch and parse ``/robots.txt`` for the origin of *origin_url*."""
    robots_url = robots_url_for(origin_url)
    try:
        raw = fetch_url(robots_url, client)
    except httpx.HTTPError as exc:
        logger.info("robots.txt unavailable at %s (%s); allowing all", robots_url, exc)
        return RobotsPolicy.allow_all(origin_url)

    if raw.location:
        logger.info("robots.txt at %s redirects to %s; allowing all", robots_url, raw.location)
        return RobotsPolicy.allow_all(origin_url)

    return RobotsPolicy(origin_url, raw.body)
