"""Inference engine: derives manifest content from document entries.

Everything here is a pure function of the (already source-sorted) entries
and the tuning in :class:`~llmstxt.config.Settings`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple
from urllib.parse import urlsplit

from llmstxt.config import Settings
from llmstxt.generator import rules
from llmstxt.generator.text import summarize_text, title_from_source, top_keywords
from llmstxt.scraper.models import DocumentEntry

DEFAULT_NAME = "local-docs"


@dataclass
class Inference:
    """Everything the assembler needs besides name, timestamp and metadata."""

    description: str
    docs: List[Dict[str, Any]] = field(default_factory=list)
    capabilities: List[Dict[str, Any]] = field(default_factory=list)
    endpoints: List[Dict[str, Any]] = field(default_factory=list)
    pricing: Optional[str] = None
    auth: Optional[str] = None


def _title_of(entry: DocumentEntry) -> str:
    return (entry.title or "").strip() or title_from_source(entry.source)


def page_summary(entry: DocumentEntry, settings: Settings) -> Dict[str, Any]:
    return {
        "source": entry.source,
        "title": _title_of(entry),
        "summary": summarize_text(entry.text, settings.summary_max_length),
        "keywords": top_keywords(entry.text, settings.keyword_count, settings.stop_words),
    }


def _corpus(entries: Sequence[DocumentEntry]) -> str:
    return "\n".join(entry.text for entry in entries)


def infer_capabilities(
    entries: Sequence[DocumentEntry],
    capability_rules: Sequence[rules.CapabilityRule] = rules.CAPABILITY_RULES,
) -> List[Dict[str, Any]]:
    """Evaluate every capability rule against the whole corpus, in rule order."""
    corpus = _corpus(entries)
    return [
        {"name": rule.name, "description": rule.description}
        for rule in capability_rules
        if rule.matches(corpus)
    ]


def _scan_rule(
    rule: rules.EndpointRule, entries: Sequence[DocumentEntry], limit: int
) -> List[Dict[str, Any]]:
    unique: Dict[Tuple[str, str], Dict[str, Any]] = {}
    if limit <= 0:
        return []
    for entry in entries:
        title = _title_of(entry)
        for method, path, auth, description in rule.scan(entry, title):
            unique.setdefault(
                (method, path),
                {"method": method, "path": path, "auth": auth, "description": description},
            )
            if len(unique) >= limit:
                return list(unique.values())
    return list(unique.values())


def infer_endpoints(
    entries: Sequence[DocumentEntry],
    limit: int = 20,
    endpoint_rules: Sequence[rules.EndpointRule] = rules.ENDPOINT_RULES,
) -> List[Dict[str, Any]]:
    """Collect up to *limit* distinct ``(method, path)`` endpoint candidates.

    Rules are tried in order and the first one that finds anything wins.
    Within a rule the first occurrence of a pair is kept.
    """
    for rule in endpoint_rules:
        found = _scan_rule(rule, entries, limit)
        if found:
            return found
    return []


def describe(docs: Sequence[Dict[str, Any]], source_type: str) -> str:
    """Render the one-sentence corpus description."""
    if not docs:
        return rules.NO_CONTENT_DESCRIPTION

    # dict preserves insertion order, giving an ordered set
    top_words: Dict[str, None] = {}
    for page in docs[:5]:
        for keyword in page["keywords"][:2]:
            top_words.setdefault(keyword, None)

    descriptors = ", ".join(list(top_words)[:5])
    source_hint = rules.SOURCE_HINTS.get(source_type, rules.SOURCE_HINTS["mixed"])
    if descriptors:
        return f"Generated {source_hint}. Key topics: {descriptors}."
    return f"Generated {source_hint}."


def infer_hints(entries: Sequence[DocumentEntry]) -> Tuple[Optional[str], str]:
    """Return the ``(pricing, auth)`` hint strings for the corpus."""
    corpus = _corpus(entries)
    pricing = rules.PRICING_HINT if rules.PRICING_RE.search(corpus) else None
    auth = rules.AUTH_REQUIRED_HINT if rules.AUTH_RE.search(corpus) else rules.NO_AUTH_HINT
    return pricing, auth


def infer_name(name: Optional[str], source_type: str, homepage: Optional[str]) -> str:
    """Explicit name, else the homepage host without ``www.``, else a default."""
    if name:
        return name
    if source_type == "url" and homepage:
        host = urlsplit(homepage).hostname or ""
        if host.startswith("www."):
            host = host[len("www."):]
        if host:
            return host
    return DEFAULT_NAME


def infer(
    entries: Sequence[DocumentEntry], source_type: str, settings: Settings
) -> Inference:
    """Run every inference step over *entries* (expected sorted by source)."""
    docs = [page_summary(entry, settings) for entry in entries]
    pricing, auth = infer_hints(entries)
    return Inference(
        description=describe(docs, source_type),
        docs=docs,
        capabilities=infer_capabilities(entries),
        endpoints=infer_endpoints(entries, settings.endpoint_limit),
        pricing=pricing,
        auth=auth,
    )
