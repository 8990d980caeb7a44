"""Local documentation walker.

Enumerates documentation files under a root directory and turns each into a
:class:`DocumentEntry`.  A single unreadable file never aborts the walk.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import AbstractSet, Iterable, List, Optional, Union

from llmstxt.config import DEFAULT_EXTENSIONS
from llmstxt.errors import InvalidInputError
from llmstxt.generator.text import normalize_whitespace, title_from_source
from llmstxt.patterns import matches_any
from llmstxt.scraper.extractor import extract_html
from llmstxt.scraper.models import DocumentEntry

logger = logging.getLogger(__name__)

HTML_EXTENSIONS = frozenset({".html", ".htm"})


def list_files(
    root: Path,
    extensions: AbstractSet[str] = DEFAULT_EXTENSIONS,
    exclude: Iterable[str] = (),
) -> List[str]:
    """Return root-relative POSIX paths of matching files, sorted ascending.

    Hidden files and anything under a hidden directory are skipped.
    """
    patterns = list(exclude)
    found: List[str] = []
    for path in root.rglob("*"):
        relative = path.relative_to(root)
        if any(part.startswith(".") for part in relative.parts):
            continue
        if not path.is_file() or path.suffix.lower() not in extensions:
            continue
        rel = relative.as_posix()
        if matches_any(rel, patterns):
            continue
        found.append(rel)
    return sorted(found)


def entry_from_content(source: str, content: str) -> Optional[DocumentEntry]:
    """Build an entry from a file's raw *content*, or ``None`` if it is empty.

    HTML goes through the same extraction as crawled pages; anything else is
    whitespace-normalised verbatim.
    """
    if not content.strip():
        return None

    if Path(source).suffix.lower() in HTML_EXTENSIONS:
        page = extract_html(content, source=source)
        if not page.text:
            return None
        return DocumentEntry(source=source, title=page.title, text=page.text)

    return DocumentEntry(
        source=source,
        title=title_from_source(source),
        text=normalize_whitespace(content),
    )


def read_local_docs(
    root: Union[str, Path],
    exclude: Iterable[str] = (),
    extensions: AbstractSet[str] = DEFAULT_EXTENSIONS,
) -> List[DocumentEntry]:
    """Read every documentation file under *root*.

    Raises:
        InvalidInputError: If *root* is not an existing directory.
    """
    root = Path(root)
    if not root.is_dir():
        raise InvalidInputError(f"Local path does not exist or is not a directory: {root}")

    docs: List[DocumentEntry] = []
    for relative in list_files(root, extensions, exclude):
        try:
            content = (root / relative).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Skipping unreadable file %s: %s", relative, exc)
            continue

        entry = entry_from_content(relative, content)
        if entry is not None:
            docs.append(entry)

    logger.info("Read %d document(s) from %s", len(docs), root)
    return docs
