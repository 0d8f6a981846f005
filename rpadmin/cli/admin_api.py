"""
Admin Server Operations.

The four calls the console makes against the RPNow admin server:

    GET    /status        -> ServerStatus
    GET    /rps           -> list[RPSummary]
    GET    /rps/{rpid}    -> list[RPUrl]
    DELETE /rps/{rpid}    -> body ignored

Nothing is retried or cached. Every failure is raised as an
ExternalServiceError subclass.
"""

from typing import Any
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from rpadmin.cli.client import APIClient
from rpadmin.cli.models import (
    RPSummary,
    RPSummaryList,
    RPUrl,
    RPUrlList,
    ServerStatus,
)
from rpadmin.core.exceptions import ResponseDecodeError, UnexpectedStatusError
from rpadmin.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

_StatusAdapter = TypeAdapter(ServerStatus)


def rp_path(rpid: str) -> str:
    """Detail path for an RP. The id is percent-encoded as a single segment."""
    return f"/rps/{quote(rpid, safe='')}"


def _check_status(response: httpx.Response) -> None:
    if not response.is_success:
        request = response.request
        raise UnexpectedStatusError(
            f"{request.method} {request.url.path} returned HTTP {response.status_code}",
            status_code=response.status_code,
        )


def _decode(response: httpx.Response, adapter: TypeAdapter) -> Any:
    _check_status(response)
    try:
        return adapter.validate_json(response.content)
    except ValidationError as e:
        raise ResponseDecodeError(
            f"Unexpected response body from {response.request.url.path}: {e}"
        ) from e


class AdminAPI:
    """
    Typed wrapper over the admin server endpoints.

    Args:
        client: Transport to the admin server.
        destroy_checks_status: When False, a DELETE that completes the HTTP
            exchange counts as success whatever its status code.
    """

    def __init__(self, client: APIClient, destroy_checks_status: bool = True) -> None:
        self.client = client
        self.destroy_checks_status = destroy_checks_status

    async def check_status(self) -> ServerStatus:
        """Fetch the server banner and process id."""
        response = await self.client.get("/status")
        status = _decode(response, _StatusAdapter)
        log_with_source(logger, "cli", "debug", "Server status", pid=status.pid)
        return status

    async def list_rps(self) -> list[RPSummary]:
        """Fetch all RPs. An empty list is a valid answer."""
        response = await self.client.get("/rps")
        return _decode(response, RPSummaryList)

    async def get_rp_urls(self, rpid: str) -> list[RPUrl]:
        """Fetch the access URLs of one RP."""
        response = await self.client.get(rp_path(rpid))
        return _decode(response, RPUrlList)

    async def destroy_rp(self, rpid: str) -> None:
        """Delete an RP. The response body is not inspected."""
        response = await self.client.delete(rp_path(rpid))
        if self.destroy_checks_status:
            _check_status(response)
        elif not response.is_success:
            log_with_source(
                logger,
                "cli",
                "warning",
                "Destroy returned non-success status, ignored",
                rpid=rpid,
                status_code=response.status_code,
            )
