"""FastAPI application factory.

Routers
-------
    /generate    crawl a URL or unpack an uploaded zip, respond with a zip
                 bundle holding ``llms.txt`` and ``agent.json``

The API is stateless: every request runs one generation with the default
settings and nothing is kept between requests.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from llmstxt.api.routers import generate as generate_router


def create_app() -> FastAPI:
    """Return the generator API with CORS and the ``/generate`` router."""
    app = FastAPI(
        title="llms.txt generator API",
        description=(
            "Generates llms.txt and agent.json discovery artifacts from a "
            "documentation website or an uploaded zip of documentation files."
        ),
        version="0.1.0",
    )

    # Browser clients download the bundle, so they need to read its filename.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["POST"],
        allow_headers=["*"],
        expose_headers=["content-disposition"],
    )

    app.include_router(generate_router.router, prefix="/generate", tags=["generate"])
    return app


# uvicorn llmstxt.api.app:app
app = create_app()
