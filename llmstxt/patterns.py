"""Glob matching for exclusion patterns.

Patterns are matched with :func:`wcmatch.glob.globmatch`: ``*`` and ``?``
stay inside one path segment, and ``**`` spans any number of segments,
including none, so ``**/drafts/*`` excludes both ``drafts/a.md`` and
``guide/drafts/a.md`` but not ``drafts/old/a.md``.  Wildcards do not match
a leading dot, and matching is case-sensitive on every platform.
"""

from __future__ import annotations

from typing import Iterable

from wcmatch import glob

_FLAGS = glob.GLOBSTAR | glob.CASE


def matches(path: str, pattern: str) -> bool:
    """Return ``True`` if *path* matches the glob *pattern*."""
    return glob.globmatch(path, pattern, flags=_FLAGS)


def matches_any(path: str, patterns: Iterable[str]) -> bool:
    return any(matches(path, pattern) for pattern in patterns)
