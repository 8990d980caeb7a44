"""HTTP API for generating artifact bundles.

Serve it with the ``server`` extra installed::

    uvicorn llmstxt.api:app
"""

from llmstxt.api.app import app, create_app

__all__ = ["app", "create_app"]
