"""Generation entry points.

    crawl_website / read_local_docs / materialised entries
        → prepare_entries → infer → assemble → GenerationResult

``generate_from_entries`` is pure; the other two add the traversal step in
front of it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

import httpx

from llmstxt.config import Settings, settings as default_settings
from llmstxt.errors import InvalidInputError
from llmstxt.generator.assembler import GenerationResult, assemble
from llmstxt.generator.inference import infer, infer_name
from llmstxt.generator.text import normalize_whitespace
from llmstxt.local.walker import read_local_docs
from llmstxt.scraper.crawler import crawl_website
from llmstxt.scraper.models import DocumentEntry
from llmstxt.scraper.urls import is_http_url

LLMS_TXT = "llms.txt"
AGENT_JSON = "agent.json"


def prepare_entries(entries: Iterable[DocumentEntry]) -> List[DocumentEntry]:
    """Normalise text, drop empty entries and duplicate sources, sort by source.

    The first entry seen for a given source wins.
    """
    unique: Dict[str, DocumentEntry] = {}
    for entry in entries:
        text = normalize_whitespace(entry.text)
        if not text or entry.source in unique:
            continue
        unique[entry.source] = DocumentEntry(source=entry.source, text=text, title=entry.title)
    return [unique[source] for source in sorted(unique)]


def generate_from_entries(
    entries: Iterable[DocumentEntry],
    source_type: str = "mixed",
    name: Optional[str] = None,
    metadata: Optional[Dict[str, str]] = None,
    homepage: Optional[str] = None,
    settings: Optional[Settings] = None,
    generated_at: Optional[str] = None,
) -> GenerationResult:
    """Build both artifacts from already materialised *entries*.

    Pass *generated_at* to make repeated runs byte-identical.

    Raises:
        ManifestValidationError: If the assembled manifest breaks the schema
            (for example an unknown *source_type* or a non-URL *homepage*).
    """
    settings = settings or default_settings
    prepared = prepare_entries(entries)
    inference = infer(prepared, source_type, settings)
    return assemble(
        inference,
        name=infer_name(name, source_type, homepage),
        source_type=source_type,
        homepage=homepage,
        generated_at=generated_at,
        metadata=metadata,
    )


def generate_from_url(
    seed: str,
    exclude: Iterable[str] = (),
    max_pages: Optional[int] = None,
    name: Optional[str] = None,
    metadata: Optional[Dict[str, str]] = None,
    settings: Optional[Settings] = None,
    client: Optional[httpx.Client] = None,
    generated_at: Optional[str] = None,
) -> GenerationResult:
    """Crawl *seed* and build both artifacts.

    Page-level network errors are skipped, never surfaced.

    Raises:
        InvalidInputError: If *seed* is not an absolute ``http(s)`` URL.
    """
    if not is_http_url(seed):
        raise InvalidInputError(f"Target must be an absolute http(s) URL: {seed!r}")

    settings = settings or default_settings
    entries = crawl_website(
        seed, exclude=exclude, max_pages=max_pages, client=client, settings=settings
    )
    return generate_from_entries(
        entries,
        source_type="url",
        name=name,
        metadata=metadata,
        homepage=seed,
        settings=settings,
        generated_at=generated_at,
    )


def generate_from_local_path(
    root: Union[str, Path],
    exclude: Iterable[str] = (),
    name: Optional[str] = None,
    metadata: Optional[Dict[str, str]] = None,
    settings: Optional[Settings] = None,
    generated_at: Optional[str] = None,
) -> GenerationResult:
    """Walk *root* and build both artifacts.

    Raises:
        InvalidInputError: If *root* is not an existing directory.
    """
    settings = settings or default_settings
    entries = read_local_docs(root, exclude=exclude, extensions=settings.extensions)
    return generate_from_entries(
        entries,
        source_type="local",
        name=name,
        metadata=metadata,
        settings=settings,
        generated_at=generated_at,
    )


def write_outputs(output_dir: Union[str, Path], result: GenerationResult) -> Tuple[Path, Path]:
    """Write ``llms.txt`` and ``agent.json`` into *output_dir*.

    Returns:
        The ``(llms_path, agent_path)`` pair.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    llms_path = output_dir / LLMS_TXT
    agent_path = output_dir / AGENT_JSON
    llms_path.write_text(result.digest_text, encoding="utf-8")
    agent_path.write_text(result.manifest_json(), encoding="utf-8")
    return llms_path, agent_path
