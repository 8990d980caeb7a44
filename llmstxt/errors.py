"""Exceptions raised by the generation pipeline.

Only failures that abort a whole run are modelled here.  Per-page problems
(network errors, unreadable files) are handled where they happen and never
reach the caller.
"""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for failures that abort a generation run."""


class InvalidInputError(GenerationError, ValueError):
    """The seed URL or local root was rejected before any traversal began."""


class ManifestValidationError(GenerationError):
    """The assembled manifest did not match the schema."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__("Manifest validation failed: " + "; ".join(errors))
