"""Ordered heuristic rule tables used by the inference engine.

New heuristics are added by appending to a table; the engine's control flow
does not change.

* Capability rules are inclusive: every matching rule contributes one
  capability, in table order.
* Endpoint rules are exclusive: the first rule that yields any endpoint over
  the whole corpus wins, later rules are fallbacks.
* Hint rules set the manifest's ``pricing`` / ``auth`` strings.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Tuple

from llmstxt.scraper.models import DocumentEntry


@dataclass(frozen=True)
class CapabilityRule:
    name: str
    description: str
    pattern: re.Pattern[str]

    def matches(self, corpus: str) -> bool:
        return self.pattern.search(corpus) is not None


CAPABILITY_RULES: Tuple[CapabilityRule, ...] = (
    CapabilityRule(
        name="API Discovery",
        description="Contains API-oriented documentation and endpoint references.",
        pattern=re.compile(r"\bapi\b|endpoint|http", re.IGNORECASE),
    ),
    CapabilityRule(
        name="SDK Guidance",
        description="Includes implementation details for one or more SDKs.",
        pattern=re.compile(r"sdk|typescript|python|java|go", re.IGNORECASE),
    ),
    CapabilityRule(
        name="Authentication Guidance",
        description="Provides authentication and credential setup information.",
        pattern=re.compile(r"auth|oauth|token|api key|authentication", re.IGNORECASE),
    ),
)


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

_AUTH_HINT_RE = re.compile(r"auth|token|key", re.IGNORECASE)

# (method, path, auth, description)
EndpointCandidate = Tuple[str, str, str, str]


@dataclass(frozen=True)
class EndpointRule:
    """Finds ``(method, path)`` candidates in one entry's text."""

    tag: str
    pattern: re.Pattern[str]
    produce: Callable[[re.Match[str], DocumentEntry, str], Optional[EndpointCandidate]]

    def scan(self, entry: DocumentEntry, title: str) -> Iterator[EndpointCandidate]:
        for match in self.pattern.finditer(entry.text):
            candidate = self.produce(match, entry, title)
            if candidate is not None:
                yield candidate


def _explicit_endpoint(
    match: re.Match[str], entry: DocumentEntry, title: str
) -> Optional[EndpointCandidate]:
    path = match.group(2)
    if not path:
        return None
    auth = "api_key" if _AUTH_HINT_RE.search(entry.text) else "unknown"
    return match.group(1).upper(), path, auth, f"Observed in {title}"


def _bare_path(
    match: re.Match[str], entry: DocumentEntry, title: str
) -> Optional[EndpointCandidate]:
    path = match.group(1)
    if not path:
        return None
    return "GET", path, "unknown", f"Possible endpoint path from {title}"


ENDPOINT_RULES: Tuple[EndpointRule, ...] = (
    EndpointRule(
        tag="method-and-path",
        pattern=re.compile(
            r"\b(GET|POST|PUT|PATCH|DELETE)\s+((?:https?://\S+|/[a-z0-9_\-/.{}]+))",
            re.IGNORECASE,
        ),
        produce=_explicit_endpoint,
    ),
    # Bare slash-delimited paths; may match unrelated text such as dates.
    EndpointRule(
        tag="bare-path",
        pattern=re.compile(r"(/[a-z0-9_\-]+(?:/[a-z0-9_\-{}]+)+)", re.IGNORECASE),
        produce=_bare_path,
    ),
)


# ---------------------------------------------------------------------------
# Pricing / auth hints
# ---------------------------------------------------------------------------

PRICING_RE = re.compile(r"pricing|plan|billing", re.IGNORECASE)
AUTH_RE = re.compile(r"oauth|api[ -]key|token|authentication", re.IGNORECASE)

PRICING_HINT = "See source docs for current plan details."
AUTH_REQUIRED_HINT = "Authentication appears to be required for some operations."
NO_AUTH_HINT = "No explicit authentication details detected."

SOURCE_HINTS = {
    "url": "from crawled website pages",
    "local": "from local documentation files",
    "mixed": "from mixed documentation sources",
}

NO_CONTENT_DESCRIPTION = "No parseable documentation content was found."
