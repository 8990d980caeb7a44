"""Text normalisation, title derivation, summaries and keyword ranking.

Every function here is pure.  Tuning that used to be global (stop words,
summary length, keyword count) is passed in explicitly; the defaults mirror
:class:`~llmstxt.config.Settings`.
"""

from __future__ import annotations

import re
from collections import Counter
from typing import AbstractSet

from llmstxt.config import DEFAULT_STOP_WORDS

NO_CONTENT_SUMMARY = "No content extracted."

_WHITESPACE_RE = re.compile(r"\s+")
_SENTENCE_BREAK_RE = re.compile(r"(?<=[.!?])\s+")
_TOKEN_RE = re.compile(r"[a-z][a-z0-9-]{2,}")
_EXTENSION_RE = re.compile(r"\.[a-z0-9]+$", re.IGNORECASE)
_SEPARATOR_RE = re.compile(r"[-_]+")
_WORD_START_RE = re.compile(r"\b\w")


def normalize_whitespace(value: str) -> str:
    """Collapse every run of whitespace to one space and trim the ends."""
    return _WHITESPACE_RE.sub(" ", value).strip()


def title_from_source(source: str) -> str:
    """Derive a human title from the last segment of a path or URL.

    ``docs/getting_started.md`` becomes ``Getting Started``.  A source with no
    segments yields ``Home``; a segment that is nothing but an extension
    yields ``Document``.
    """
    segments = [segment for segment in source.split("/") if segment]
    if not segments:
        return "Home"

    stem = _EXTENSION_RE.sub("", segments[-1])
    if not stem:
        return "Document"

    spaced = _SEPARATOR_RE.sub(" ", stem)
    return _WORD_START_RE.sub(lambda m: m.group(0).upper(), spaced)


def summarize_text(text: str, max_length: int = 220) -> str:
    """Return the first two sentences of *text*, truncated to *max_length*.

    Truncated summaries end in a single ``…`` character and are exactly
    *max_length* characters long.
    """
    clean = normalize_whitespace(text)
    if not clean:
        return NO_CONTENT_SUMMARY

    sentences = [s for s in _SENTENCE_BREAK_RE.split(clean) if s]
    candidate = " ".join(sentences[:2]) or clean

    if len(candidate) <= max_length:
        return candidate
    return candidate[: max_length - 1] + "…"


def top_keywords(
    text: str,
    count: int = 6,
    stop_words: AbstractSet[str] = DEFAULT_STOP_WORDS,
) -> list[str]:
    """Rank the most frequent non-stop-word tokens in *text*.

    Tokens are runs of three or more lowercase letters, digits or hyphens
    that start with a letter.  Ties on frequency are broken alphabetically.
    """
    clean = normalize_whitespace(text).lower()
    if not clean:
        return []

    frequency = Counter(
        token for token in _TOKEN_RE.findall(clean) if token not in stop_words
    )
    ranked = sorted(frequency.items(), key=lambda item: (-item[1], item[0]))
    return [word for word, _ in ranked[:count]]
