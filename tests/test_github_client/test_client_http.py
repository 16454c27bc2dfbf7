"""Tests for GitHub client against a local HTTP server."""

import json
import threading
from collections.abc import Generator
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any
from urllib.parse import parse_qs, urlparse

import pytest

from rotten_issues.errors import FetchError
from rotten_issues.github_client.client import GitHubClient


class StubGitHubHandler(BaseHTTPRequestHandler):
    """Answers every GET with the server's canned status and body."""

    server: "StubGitHubServer"

    def do_GET(self) -> None:
        self.server.requests.append(self.path)
        body = self.server.body.encode("utf-8")
        self.send_response(self.server.status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: Any) -> None:
        pass


class StubGitHubServer(ThreadingHTTPServer):
    """Local server recording the paths it was asked for."""

    def __init__(self) -> None:
        super().__init__(("127.0.0.1", 0), StubGitHubHandler)
        self.requests: list[str] = []
        self.status = 200
        self.body = "[]"

    @property
    def base_url(self) -> str:
        host, port = self.server_address[:2]
        return f"http://{host}:{port}"

    def reply(self, status: int, payload: Any) -> None:
        """Set the response for upcoming requests."""
        self.status = status
        self.body = payload if isinstance(payload, str) else json.dumps(payload)


@pytest.fixture
def github_server() -> Generator[StubGitHubServer]:
    """Run a stub GitHub API in a background thread."""
    server = StubGitHubServer()
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield server
    server.shutdown()
    server.server_close()


@pytest.fixture
def client(
    github_server: StubGitHubServer, monkeypatch: pytest.MonkeyPatch
) -> GitHubClient:
    """Client talking to the stub server."""
    monkeypatch.setenv("NO_PROXY", "127.0.0.1")
    return GitHubClient(token="test_token", base_url=github_server.base_url)


class TestGitHubClientHTTP:
    """Test the real PyGitHub requester configuration."""

    def test_single_request_for_first_page(
        self,
        client: GitHubClient,
        github_server: StubGitHubServer,
        raw_issue: dict[str, Any],
    ) -> None:
        """Test one GET with the issue filters and page size."""
        github_server.reply(200, [raw_issue])

        issues = client.fetch_open_issues("acme")

        assert [issue.title for issue in issues] == ["Crash on `startup`"]
        assert len(github_server.requests) == 1
        url = urlparse(github_server.requests[0])
        assert url.path == "/orgs/acme/issues"
        assert parse_qs(url.query) == {
            "filter": ["all"],
            "state": ["open"],
            "per_page": ["100"],
        }

    def test_server_error_is_not_retried(
        self, client: GitHubClient, github_server: StubGitHubServer
    ) -> None:
        """Test a 5xx reply fails at once after a single request."""
        github_server.reply(502, {"message": "Bad Gateway"})

        with pytest.raises(FetchError, match="status code 502"):
            client.fetch_open_issues("acme")

        assert len(github_server.requests) == 1

    def test_rate_limited_reply_is_not_retried(
        self, client: GitHubClient, github_server: StubGitHubServer
    ) -> None:
        """Test a 403 reply fails at once instead of waiting for a reset."""
        github_server.reply(403, {"message": "API rate limit exceeded"})

        with pytest.raises(FetchError, match="status code 403"):
            client.fetch_open_issues("acme")

        assert len(github_server.requests) == 1

    def test_truncated_json_body(
        self, client: GitHubClient, github_server: StubGitHubServer
    ) -> None:
        """Test a body cut short is rejected."""
        github_server.reply(200, '[{"title": "half an iss')

        with pytest.raises(FetchError, match="not JSON"):
            client.fetch_open_issues("acme")

    def test_object_instead_of_list(
        self, client: GitHubClient, github_server: StubGitHubServer
    ) -> None:
        """Test a JSON object where a list is expected is rejected."""
        github_server.reply(200, {"message": "ok"})

        with pytest.raises(FetchError, match="expected a list"):
            client.fetch_open_issues("acme")

    def test_issue_missing_fields(
        self, client: GitHubClient, github_server: StubGitHubServer
    ) -> None:
        """Test a list of incomplete issues is rejected."""
        github_server.reply(200, [{"title": "no url or repository"}])

        with pytest.raises(FetchError, match="Malformed issue"):
            client.fetch_open_issues("acme")
