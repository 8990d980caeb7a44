"""Zip archive helpers for the HTTP API.

Uploaded archives are unpacked into document entries; generated artifacts
are packed back into a zip bundle.
"""

from __future__ import annotations

import io
import logging
import zipfile
from pathlib import PurePosixPath
from typing import AbstractSet, List

from llmstxt.config import DEFAULT_EXTENSIONS
from llmstxt.generator.assembler import GenerationResult
from llmstxt.generator.pipeline import AGENT_JSON, LLMS_TXT
from llmstxt.generator.text import title_from_source
from llmstxt.scraper.models import DocumentEntry

logger = logging.getLogger(__name__)


def entries_from_zip(
    data: bytes, extensions: AbstractSet[str] = DEFAULT_EXTENSIONS
) -> List[DocumentEntry]:
    """Read documentation members of a zip archive as entries.

    Directories, members with other extensions and whitespace-only members
    are skipped.  Text is taken verbatim; normalisation happens in
    :func:`~llmstxt.generator.pipeline.generate_from_entries`.

    Raises:
        zipfile.BadZipFile: If *data* is not a zip archive.
    """
    entries: List[DocumentEntry] = []
    with zipfile.ZipFile(io.BytesIO(data)) as archive:
        for info in archive.infolist():
            if info.is_dir():
                continue
            if PurePosixPath(info.filename).suffix.lower() not in extensions:
                continue
            raw = archive.read(info).decode("utf-8", errors="replace")
            if not raw.strip():
                continue
            entries.append(
                DocumentEntry(
                    source=info.filename,
                    title=title_from_source(info.filename),
                    text=raw,
                )
            )
    logger.debug("Read %d entries from uploaded archive", len(entries))
    return entries


def bundle_outputs(result: GenerationResult) -> bytes:
    """Pack ``llms.txt`` and ``agent.json`` into an in-memory zip."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as bundle:
        bundle.writestr(LLMS_TXT, result.digest_text)
        bundle.writestr(AGENT_JSON, result.manifest_json())
    return buffer.getvalue()
