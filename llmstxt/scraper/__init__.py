"""Scraper package: robots-aware, single-origin crawl and HTML extraction."""

from llmstxt.scraper.crawler import crawl_website
from llmstxt.scraper.extractor import extract_content, extract_html
from llmstxt.scraper.fetcher import fetch_url
from llmstxt.scraper.models import CleanPage, DocumentEntry, RawPage

__all__ = [
    "crawl_website",
    "fetch_url",
    "extract_content",
    "extract_html",
    "RawPage",
    "CleanPage",
    "DocumentEntry",
]
