"""Data models shared by the crawler, the local walker and the generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch.

    ``location`` is the absolute redirect target of a 3xx response and empty
    otherwise.
    """

    url: str
    body: str
    status_code: int
    content_type: str = ""
    location: str = ""


@dataclass
class CleanPage:
    """Title, visible text and same-origin links extracted from an HTML page."""

    url: str
    title: str
    text: str
    links: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class DocumentEntry:
    """One unit of extracted content.

    ``source`` is an absolute URL in crawl mode and a root-relative POSIX path
    for local files and archive members.
    """

    source: str
    text: str
    title: Optional[str] = None
