"""Centralised settings for the llms.txt generator.

All runtime tuning is resolved here in one place.  Values can be overridden
via environment variables or a `.env` file in the project root (loaded
automatically when this module is imported).

Every public entry point also accepts an explicit :class:`Settings` instance,
so two generation runs with different tuning never share state.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


DEFAULT_STOP_WORDS: frozenset[str] = frozenset(
    {
        "the",
        "and",
        "for",
        "with",
        "that",
        "this",
        "from",
        "into",
        "your",
        "you",
        "are",
        "our",
        "their",
        "will",
        "can",
        "has",
        "have",
        "how",
        "what",
        "when",
        "where",
        "about",
        "using",
        "use",
        "more",
    }
)

DEFAULT_EXTENSIONS: frozenset[str] = frozenset({".md", ".mdx", ".txt", ".html", ".htm"})


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Crawler
    # ------------------------------------------------------------------
    user_agent: str = field(
        default_factory=lambda: os.environ.get("LLMSTXT_USER_AGENT", "llms-txt-generator/0.1")
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("LLMSTXT_REQUEST_TIMEOUT", "15.0"))
    )
    max_pages: int = field(
        default_factory=lambda: int(os.environ.get("LLMSTXT_MAX_PAGES", "20"))
    )

    # ------------------------------------------------------------------
    # Text / inference tuning
    # ------------------------------------------------------------------
    summary_max_length: int = field(
        default_factory=lambda: int(os.environ.get("LLMSTXT_SUMMARY_MAX_LENGTH", "220"))
    )
    keyword_count: int = field(
        default_factory=lambda: int(os.environ.get("LLMSTXT_KEYWORD_COUNT", "6"))
    )
    endpoint_limit: int = field(
        default_factory=lambda: int(os.environ.get("LLMSTXT_ENDPOINT_LIMIT", "20"))
    )
    stop_words: frozenset[str] = DEFAULT_STOP_WORDS
    extensions: frozenset[str] = DEFAULT_EXTENSIONS

    # ------------------------------------------------------------------
    # Output / CLI
    # ------------------------------------------------------------------
    output_dir: Path = field(
        default_factory=lambda: Path(os.environ.get("LLMSTXT_OUTPUT_DIR", "./output"))
    )
    log_level: str = field(
        default_factory=lambda: os.environ.get("LLMSTXT_LOG_LEVEL", "WARNING")
    )

    @property
    def request_headers(self) -> dict[str, str]:
        """Headers sent with every crawler request."""
        return {"User-Agent": self.user_agent}


# Module-level singleton used when callers don't pass their own:
#   from llmstxt.config import settings
settings = Settings()
