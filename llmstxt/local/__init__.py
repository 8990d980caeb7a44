"""Local documentation walker package."""

from llmstxt.local.walker import read_local_docs

__all__ = ["read_local_docs"]
