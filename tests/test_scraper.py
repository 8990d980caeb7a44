"""Tests for the scraper building blocks: URLs, fetch, extraction, robots.

Mocking strategy:
- ``respx`` patches ``httpx`` at the transport layer so no real network calls
  are made during ``fetch_url`` and ``load_robots`` tests.
"""

from __future__ import annotations

import httpx
import pytest
import respx

from llmstxt.config import Settings
from llmstxt.scraper.extractor import extract_content, extract_html
from llmstxt.scraper.fetcher import fetch_url, make_client
from llmstxt.scraper.models import CleanPage, RawPage
from llmstxt.scraper.robots import RobotsPolicy, load_robots
from llmstxt.scraper.urls import is_http_url, normalize_url, same_origin


# ---------------------------------------------------------------------------
# Fixtures / constants
# ---------------------------------------------------------------------------

_SIMPLE_HTML = """\
<!DOCTYPE html>
<html>
<head><title>Test Page</title><style>.a{color:red}</style></head>
<body>
  <h1>Main Heading</h1>
  <p>This is the main content of the test page.</p>
  <script>alert('x')</script>
  <noscript>Enable JavaScript</noscript>
  <a href="/page2">Link 2</a>
  <a href="https://docs.test/page1#intro">Link 1</a>
  <a href="page3">Relative</a>
  <a href="#fragment">Fragment only</a>
  <a href="https://other.test/page">Elsewhere</a>
  <a href="mailto:team@docs.test">Mail</a>
  <a href="javascript:void(0)">Script</a>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# URL helpers
# ---------------------------------------------------------------------------

class TestNormalizeUrl:
    def test_strips_fragment(self) -> None:
        assert normalize_url("https://docs.test/guide#setup") == "https://docs.test/guide"

    def test_strips_single_trailing_slash(self) -> None:
        assert normalize_url("https://docs.test/guide/") == "https://docs.test/guide"

    def test_root_path_kept(self) -> None:
        assert normalize_url("https://docs.test/") == "https://docs.test/"
        assert normalize_url("https://docs.test") == "https://docs.test/"

    def test_keeps_query(self) -> None:
        assert normalize_url("https://docs.test/a/?page=2#x") == "https://docs.test/a?page=2"

    def test_lowercases_scheme_and_host(self) -> None:
        assert normalize_url("HTTPS://Docs.Test/Guide") == "https://docs.test/Guide"

    def test_drops_default_port(self) -> None:
        assert normalize_url("http://docs.test:80/") == "http://docs.test/"
        assert normalize_url("https://docs.test:443/a/") == "https://docs.test/a"

    def test_keeps_non_default_port(self) -> None:
        assert normalize_url("http://docs.test:8080/a") == "http://docs.test:8080/a"
        assert normalize_url("https://docs.test:80/a") == "https://docs.test:80/a"


class TestOrigins:
    def test_same_origin_with_default_port(self) -> None:
        assert same_origin("http://docs.test/a", "http://docs.test:80/b")

    def test_different_scheme_is_cross_origin(self) -> None:
        assert not same_origin("http://docs.test/a", "https://docs.test/a")

    def test_different_port_is_cross_origin(self) -> None:
        assert not same_origin("http://docs.test:8080/a", "http://docs.test/a")

    def test_non_http_scheme_has_no_origin(self) -> None:
        assert not same_origin("mailto:x@docs.test", "http://docs.test/")

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("https://docs.test", True),
            ("http://127.0.0.1:8000/index.html", True),
            ("ftp://docs.test/file", False),
            ("docs.test/page", False),
            ("/relative/path", False),
        ],
    )
    def test_is_http_url(self, value: str, expected: bool) -> None:
        assert is_http_url(value) is expected


# ---------------------------------------------------------------------------
# fetch_url tests
# ---------------------------------------------------------------------------

class TestFetchUrl:
    def test_successful_fetch_returns_raw_page(self) -> None:
        with respx.mock:
            respx.get("https://docs.test/article").mock(
                return_value=httpx.Response(200, html=_SIMPLE_HTML)
            )
            raw = fetch_url("https://docs.test/article")

        assert isinstance(raw, RawPage)
        assert raw.url == "https://docs.test/article"
        assert raw.status_code == 200
        assert raw.content_type.startswith("text/html")
        assert "<title>Test Page</title>" in raw.body

    def test_content_type_lowercased(self) -> None:
        with respx.mock:
            respx.get("https://docs.test/readme").mock(
                return_value=httpx.Response(
                    200, text="hello", headers={"Content-Type": "Text/Markdown"}
                )
            )
            raw = fetch_url("https://docs.test/readme")

        assert raw.content_type == "text/markdown"

    def test_http_error_raises(self) -> None:
        with respx.mock:
            respx.get("https://docs.test/missing").mock(
                return_value=httpx.Response(404, text="Not Found")
            )
            with pytest.raises(httpx.HTTPStatusError):
                fetch_url("https://docs.test/missing")

    def test_sends_configured_user_agent(self) -> None:
        settings = Settings(user_agent="docs-bot/9.9")
        with respx.mock:
            route = respx.get("https://docs.test/").mock(
                return_value=httpx.Response(200, text="ok")
            )
            with make_client(settings) as client:
                fetch_url("https://docs.test/", client)

        assert route.calls.last.request.headers["user-agent"] == "docs-bot/9.9"

    def test_redirect_returned_not_followed(self) -> None:
        with respx.mock:
            respx.get("https://docs.test/moved").mock(
                return_value=httpx.Response(302, headers={"Location": "/new-home"})
            )
            target = respx.get("https://docs.test/new-home").mock(
                return_value=httpx.Response(200, text="new")
            )
            with make_client() as client:
                raw = fetch_url("https://docs.test/moved", client)

        assert raw.status_code == 302
        assert raw.location == "https://docs.test/new-home"
        assert raw.body == ""
        assert not target.called

    def test_client_has_explicit_timeout(self) -> None:
        with make_client(Settings(request_timeout=3.5)) as client:
            assert client.timeout.read == 3.5


# ---------------------------------------------------------------------------
# Extractor tests
# ---------------------------------------------------------------------------

class TestExtractContent:
    def test_returns_clean_page(self) -> None:
        page = extract_content(_SIMPLE_HTML, "https://docs.test/guide")
        assert isinstance(page, CleanPage)
        assert page.url == "https://docs.test/guide"
        assert page.title == "Test Page"

    def test_strips_script_style_noscript(self) -> None:
        page = extract_content(_SIMPLE_HTML, "https://docs.test/guide")
        assert "alert" not in page.text
        assert "color" not in page.text
        assert "Enable JavaScript" not in page.text
        assert "main content of the test page" in page.text

    def test_text_is_whitespace_normalised(self) -> None:
        page = extract_content(_SIMPLE_HTML, "https://docs.test/guide")
        assert "\n" not in page.text
        assert "  " not in page.text
        assert page.text.startswith("Main Heading This is the main content")

    def test_links_are_same_origin_sorted_and_defragmented(self) -> None:
        page = extract_content(_SIMPLE_HTML, "https://docs.test/guide")
        assert page.links == [
            "https://docs.test/guide",
            "https://docs.test/page1",
            "https://docs.test/page2",
            "https://docs.test/page3",
        ]

    def test_h1_fallback_title(self) -> None:
        html = "<html><body><h1>  Getting\n Started </h1><p>x</p></body></html>"
        assert extract_content(html, "https://docs.test/start").title == "Getting Started"

    def test_path_fallback_title(self) -> None:
        html = "<html><body><p>Only text.</p></body></html>"
        page = extract_content(html, "https://docs.test/api-reference")
        assert page.title == "Api Reference"

    def test_root_path_fallback_title_is_home(self) -> None:
        html = "<html><body><p>Only text.</p></body></html>"
        assert extract_content(html, "https://docs.test/").title == "Home"

    def test_empty_html_does_not_raise(self) -> None:
        page = extract_content("<html></html>", "https://docs.test/")
        assert page.text == ""
        assert page.links == []


class TestExtractHtml:
    def test_local_html_has_no_links(self) -> None:
        page = extract_html(_SIMPLE_HTML, source="docs/page.html")
        assert page.links == []
        assert page.url == "docs/page.html"

    def test_fragment_without_body_excludes_title(self) -> None:
        page = extract_html("<title>T</title><p>Hello there</p>", source="frag.html")
        assert page.title == "T"
        assert page.text == "Hello there"


# ---------------------------------------------------------------------------
# Robots policy tests
# ---------------------------------------------------------------------------

class TestRobotsPolicy:
    AGENT = "llms-txt-generator/0.1"

    def test_empty_policy_allows_all(self) -> None:
        policy = RobotsPolicy.allow_all("https://docs.test/")
        assert policy.is_allowed("https://docs.test/anything", self.AGENT)

    def test_disallow_rule_for_all_agents(self) -> None:
        policy = RobotsPolicy("https://docs.test/", "User-agent: *\nDisallow: /private\n")
        assert not policy.is_allowed("https://docs.test/private/page", self.AGENT)
        assert policy.is_allowed("https://docs.test/public", self.AGENT)

    def test_agent_specific_rule(self) -> None:
        robots = "User-agent: llms-txt-generator\nDisallow: /\n\nUser-agent: *\nAllow: /\n"
        policy = RobotsPolicy("https://docs.test/", robots)
        assert not policy.is_allowed("https://docs.test/guide", self.AGENT)
        assert policy.is_allowed("https://docs.test/guide", "other-bot/1.0")

    def test_longest_match_wins(self) -> None:
        robots = "User-agent: *\nDisallow: /\nAllow: /public\n"
        policy = RobotsPolicy("https://docs.test/", robots)
        assert policy.is_allowed("https://docs.test/public/page", self.AGENT)
        assert not policy.is_allowed("https://docs.test/private", self.AGENT)

    def test_wildcards(self) -> None:
        robots = "User-agent: *\nDisallow: /*/secret\nDisallow: /*.json$\n"
        policy = RobotsPolicy("https://docs.test/", robots)
        assert not policy.is_allowed("https://docs.test/team/secret", self.AGENT)
        assert not policy.is_allowed("https://docs.test/data/export.json", self.AGENT)
        assert policy.is_allowed("https://docs.test/data/export.json.html", self.AGENT)
        assert policy.is_allowed("https://docs.test/secret", self.AGENT)

    def test_other_origin_never_allowed(self) -> None:
        policy = RobotsPolicy.allow_all("https://docs.test/")
        assert not policy.is_allowed("https://other.test/", self.AGENT)


class TestLoadRobots:
    def test_parses_fetched_robots(self) -> None:
        with respx.mock:
            respx.get("https://docs.test/robots.txt").mock(
                return_value=httpx.Response(200, text="User-agent: *\nDisallow: /admin\n")
            )
            with httpx.Client() as client:
                policy = load_robots("https://docs.test/guide", client)

        assert not policy.is_allowed("https://docs.test/admin", "bot")
        assert policy.is_allowed("https://docs.test/guide", "bot")

    def test_non_2xx_fails_open(self) -> None:
        with respx.mock:
            respx.get("https://docs.test/robots.txt").mock(
                return_value=httpx.Response(403, text="User-agent: *\nDisallow: /\n")
            )
            with httpx.Client() as client:
                policy = load_robots("https://docs.test/", client)

        assert policy.is_allowed("https://docs.test/guide", "bot")

    def test_redirect_fails_open(self) -> None:
        with respx.mock:
            respx.get("https://docs.test/robots.txt").mock(
                return_value=httpx.Response(
                    301, headers={"Location": "https://cdn.test/robots.txt"}
                )
            )
            with httpx.Client() as client:
                policy = load_robots("https://docs.test/", client)

        assert policy.is_allowed("https://docs.test/guide", "bot")

    def test_network_error_fails_open(self) -> None:
        with respx.mock:
            respx.get("https://docs.test/robots.txt").mock(
                side_effect=httpx.ConnectError("connection refused")
            )
            with httpx.Client() as client:
                policy = load_robots("https://docs.test/", client)

        assert policy.is_allowed("https://docs.test/guide", "bot")
