"""Artifact assembler: validated manifest plus the ``llms.txt`` digest.

Section order and empty-state wording are part of the output format; change
them only together with every consumer of the digest.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from llmstxt.errors import ManifestValidationError
from llmstxt.generator.inference import Inference
from llmstxt.generator.schema import Manifest, validate_manifest

NO_PAGES_LINE = "- No documentation pages were extracted."
NO_CAPABILITIES_LINE = "- No explicit capabilities inferred."
NO_ENDPOINTS_LINE = "- No endpoint patterns inferred."


@dataclass
class GenerationResult:
    """The digest text and manifest of one generation run."""

    digest_text: str
    manifest: Manifest

    def manifest_json(self) -> str:
        """Return ``agent.json`` content: 2-space indented, newline-terminated."""
        return json.dumps(self.manifest.to_json_dict(), indent=2, ensure_ascii=False) + "\n"


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_manifest(
    inference: Inference,
    name: str,
    source_type: str,
    homepage: Optional[str],
    generated_at: str,
    metadata: Optional[Dict[str, str]] = None,
) -> Manifest:
    """Assemble and validate the manifest.

    Raises:
        ManifestValidationError: If the assembled payload breaks the schema.
    """
    payload: Dict[str, Any] = {
        "name": name,
        "description": inference.description,
        "sourceType": source_type,
        "homepage": homepage,
        "docs": inference.docs,
        "capabilities": inference.capabilities,
        "endpoints": inference.endpoints,
        "pricing": inference.pricing,
        "auth": inference.auth,
        "generatedAt": generated_at,
        "metadata": dict(metadata or {}),
    }
    result = validate_manifest(payload)
    if not result.ok:
        raise ManifestValidationError(result.errors)
    return result.manifest


def render_digest(manifest: Manifest) -> str:
    """Render the ``llms.txt`` digest for *manifest*."""
    lines: List[str] = [
        f"# {manifest.name}",
        "",
        f"> {manifest.description}",
        "",
        f"Generated: {manifest.generated_at}",
        f"Source type: {manifest.source_type}",
    ]
    if manifest.homepage:
        lines.append(f"Homepage: {manifest.homepage}")

    lines += ["", "## Pages"]
    if not manifest.docs:
        lines.append(NO_PAGES_LINE)
    for page in manifest.docs:
        lines.append(f"- {page.title} ({page.source})")
        lines.append(f"  {page.summary}")
        if page.keywords:
            lines.append(f"  Keywords: {', '.join(page.keywords)}")

    lines += ["", "## Capabilities"]
    if not manifest.capabilities:
        lines.append(NO_CAPABILITIES_LINE)
    for capability in manifest.capabilities:
        lines.append(f"- {capability.name}: {capability.description or ''}".strip())

    lines += ["", "## Endpoints"]
    if not manifest.endpoints:
        lines.append(NO_ENDPOINTS_LINE)
    for endpoint in manifest.endpoints:
        lines.append(f"- {endpoint.method} {endpoint.path} (auth: {endpoint.auth})")

    return "\n".join(lines) + "\n"


def assemble(
    inference: Inference,
    name: str,
    source_type: str,
    homepage: Optional[str] = None,
    generated_at: Optional[str] = None,
    metadata: Optional[Dict[str, str]] = None,
) -> GenerationResult:
    """Produce both artifacts together, or raise before producing either."""
    manifest = build_manifest(
        inference,
        name=name,
        source_type=source_type,
        homepage=homepage,
        generated_at=generated_at or utc_now_iso(),
        metadata=metadata,
    )
    return GenerationResult(digest_text=render_digest(manifest), manifest=manifest)
