"""Generation endpoint.

Routes
------
POST /generate    Multipart form:
                    mode=url  url=..., maxPages=20, name=...
                    mode=zip  zip=<upload>, name=...
                  → application/zip attachment with llms.txt + agent.json
"""

from __future__ import annotations

import logging
import zipfile
from typing import Optional

from fastapi import APIRouter, File, Form, UploadFile
from fastapi.responses import JSONResponse, Response

from llmstxt.archive import bundle_outputs, entries_from_zip
from llmstxt.config import settings
from llmstxt.errors import InvalidInputError
from llmstxt.generator.assembler import GenerationResult
from llmstxt.generator.pipeline import generate_from_entries, generate_from_url

logger = logging.getLogger(__name__)

router = APIRouter()

BUNDLE_FILENAME = "llms-txt-output.zip"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def _parse_max_pages(raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        return settings.max_pages


def _bundle_response(result: GenerationResult) -> Response:
    return Response(
        content=bundle_outputs(result),
        media_type="application/zip",
        headers={
            "content-disposition": f"attachment; filename={BUNDLE_FILENAME}",
            "cache-control": "no-store",
        },
    )


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("")
def generate_endpoint(
    mode: str = Form(""),
    url: str = Form(""),
    max_pages: str = Form("", alias="maxPages"),
    name: str = Form(""),
    upload: Optional[UploadFile] = File(None, alias="zip"),
) -> Response:
    """Generate artifacts from a website (``mode=url``) or a zip upload
    (``mode=zip``) and return them as a zip bundle."""
    mode = mode.strip()
    project_name = name.strip() or None

    try:
        if mode == "url":
            target = url.strip()
            if not target:
                return _error("URL is required", 400)
            result = generate_from_url(
                target, max_pages=_parse_max_pages(max_pages), name=project_name
            )
        elif mode == "zip":
            if upload is None:
                return _error("Zip upload is required", 400)
            entries = entries_from_zip(upload.file.read(), settings.extensions)
            result = generate_from_entries(entries, "local", name=project_name)
        else:
            return _error("Unsupported mode", 400)
    except (InvalidInputError, zipfile.BadZipFile) as exc:
        return _error(str(exc), 400)
    except Exception as exc:
        logger.exception("Generation failed")
        return _error(str(exc) or "Unexpected generation error", 500)

    return _bundle_response(result)
