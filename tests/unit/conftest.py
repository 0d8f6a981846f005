"""
Unit Test Fixtures.

The admin server is replaced by an in-memory FakeAdminServer mounted on
httpx.MockTransport, and operator input by a ScriptedPrompter.
Unit tests never open a network connection.
"""

import io
import json
from collections import deque
from typing import Any

import httpx
import pytest
from rich.console import Console

from rpadmin.cli.admin_api import AdminAPI
from rpadmin.cli.client import APIClient
from rpadmin.cli.prompts import OperatorExit

BASE_URL = "http://admin.test"


# =============================================================================
# Fake admin server
# =============================================================================


class FakeAdminServer:
    """
    In-memory stand-in for the RPNow admin endpoints.

    Attributes:
        calls: (method, path) of every request received, in order.
        fail_paths: Paths that raise a transport error instead of answering.
        delete_status: Status code returned for DELETE.
    """

    def __init__(self, rps: list[dict[str, Any]], urls: dict[str, list[dict[str, str]]]) -> None:
        self.rps = list(rps)
        self.urls = dict(urls)
        self.status = {"rpnow": "RPNow server v3, up 2 days", "pid": 4242}
        self.calls: list[tuple[str, str]] = []
        self.fail_paths: set[str] = set()
        self.delete_status = 204

    def count(self, method: str, path: str) -> int:
        return self.calls.count((method, path))

    def handle(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.calls.append((request.method, path))

        if path in self.fail_paths:
            raise httpx.ConnectError("Connection refused", request=request)

        if path == "/status" and request.method == "GET":
            return httpx.Response(200, json=self.status)
        if path == "/rps" and request.method == "GET":
            return httpx.Response(200, json=self.rps)

        if path.startswith("/rps/"):
            rpid = path[len("/rps/"):]
            if request.method == "GET":
                if rpid not in self.urls:
                    return httpx.Response(404, json={"error": "not found"})
                return httpx.Response(200, json=self.urls[rpid])
            if request.method == "DELETE":
                if 200 <= self.delete_status < 300:
                    self.rps = [rp for rp in self.rps if rp["rpid"] != rpid]
                    self.urls.pop(rpid, None)
                return httpx.Response(self.delete_status)

        return httpx.Response(404, content=b"Not Found")


@pytest.fixture
def fake_server(rp_payloads, url_payloads) -> FakeAdminServer:
    return FakeAdminServer(rp_payloads, url_payloads)


@pytest.fixture
def api_client(fake_server: FakeAdminServer) -> APIClient:
    """APIClient wired to the fake server."""
    return APIClient(BASE_URL, transport=httpx.MockTransport(fake_server.handle))


@pytest.fixture
def admin_api(api_client: APIClient) -> AdminAPI:
    return AdminAPI(api_client)


@pytest.fixture
def json_transport():
    """Factory for a transport answering every request with the same body."""

    def factory(status_code: int, body: Any) -> httpx.MockTransport:
        content = body if isinstance(body, bytes) else json.dumps(body).encode()
        return httpx.MockTransport(lambda request: httpx.Response(status_code, content=content))

    return factory


# =============================================================================
# Operator input
# =============================================================================


class ScriptedPrompter:
    """
    Prompter answering from pre-recorded scripts.

    `selections` holds the index (or None for quit) returned by each
    select call; `answers` the text returned by each ask call. Running
    out of script raises OperatorExit, like Ctrl-D.
    """

    def __init__(self, selections: list[int | None], answers: list[str] | None = None) -> None:
        self.selections = deque(selections)
        self.answers = deque(answers or [])
        self.select_calls: list[dict[str, Any]] = []
        self.ask_calls: list[str] = []

    def select(self, label, items, searcher=None, allow_quit=False):
        self.select_calls.append(
            {"label": label, "items": list(items), "searcher": searcher, "allow_quit": allow_quit}
        )
        if not self.selections:
            raise OperatorExit()
        return self.selections.popleft()

    def ask(self, label):
        self.ask_calls.append(label)
        if not self.answers:
            raise OperatorExit()
        return self.answers.popleft()


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(output: io.StringIO) -> Console:
    """Plain, wide console writing to an in-memory buffer."""
    return Console(file=output, width=200, color_system=None, force_terminal=False)


@pytest.fixture
def make_prompter() -> type[ScriptedPrompter]:
    """ScriptedPrompter factory: make_prompter(selections, answers)."""
    return ScriptedPrompter
