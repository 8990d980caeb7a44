"""llms-txt CLI: generate llms.txt and agent.json from a website or folder.

Usage:
    llms-txt https://docs.example.com --max-pages 10
    llms-txt ./docs --local --exclude "drafts/*" --name my-project
    python cli/main.py --help
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from llmstxt.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from typing import List, Optional

import typer

from llmstxt.config import settings
from llmstxt.errors import GenerationError
from llmstxt.generator.pipeline import (
    generate_from_local_path,
    generate_from_url,
    write_outputs,
)
from llmstxt.scraper.urls import is_http_url

app = typer.Typer(
    name="llms-txt",
    help="Generate llms.txt and agent.json from a website or local docs folder.",
    no_args_is_help=True,
)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else settings.log_level.upper()
    logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(message)s")


@app.command()
def generate(
    target: str = typer.Argument(..., help="URL or local folder path."),
    local: bool = typer.Option(False, "--local", help="Treat target as a local folder."),
    out: Optional[Path] = typer.Option(None, "--out", help="Output directory."),
    exclude: Optional[List[str]] = typer.Option(
        None, "--exclude", help="Glob pattern to exclude (repeatable)."
    ),
    max_pages: Optional[int] = typer.Option(
        None, "--max-pages", min=1, help="Maximum pages to crawl in URL mode."
    ),
    name: Optional[str] = typer.Option(None, "--name", help="Override the project name."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every skipped page."),
) -> None:
    """Crawl TARGET (or walk it with --local) and write both artifacts."""
    _configure_logging(verbose)
    output_dir = (out or settings.output_dir).resolve()
    patterns = exclude or []

    try:
        if local:
            resolved = Path(target).resolve()
            if not resolved.exists():
                typer.echo(f"Local path does not exist: {resolved}", err=True)
                raise typer.Exit(code=1)
            result = generate_from_local_path(resolved, exclude=patterns, name=name)
        else:
            if not is_http_url(target):
                typer.echo("Target must be a URL unless --local is used.", err=True)
                raise typer.Exit(code=1)
            result = generate_from_url(
                target, exclude=patterns, max_pages=max_pages, name=name
            )
    except GenerationError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)

    llms_path, agent_path = write_outputs(output_dir, result)
    typer.echo(f"Generated {llms_path}")
    typer.echo(f"Generated {agent_path}")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
