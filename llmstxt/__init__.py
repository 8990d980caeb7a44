"""llms.txt generator: documentation corpus to ``llms.txt`` + ``agent.json``.

Public API::

    from llmstxt import generate_from_url, write_outputs
    result = generate_from_url("https://docs.example.com", max_pages=10)
    write_outputs("./output", result)
"""

from llmstxt.generator.assembler import GenerationResult
from llmstxt.generator.pipeline import (
    generate_from_entries,
    generate_from_local_path,
    generate_from_url,
    write_outputs,
)
from llmstxt.scraper.models import DocumentEntry

__all__ = [
    "DocumentEntry",
    "GenerationResult",
    "generate_from_entries",
    "generate_from_local_path",
    "generate_from_url",
    "write_outputs",
]
