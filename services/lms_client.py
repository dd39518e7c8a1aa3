"""
LMS Client Service

Thin async gateway to the Logitech Media Server JSON-RPC endpoint.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from models.errors import FieldMissing, FieldTypeMismatch, TransportError
from services.lms_response import LmsResponse

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 3.0
JSONRPC_PATH = "/jsonrpc.js"


class LmsClient:
    """Sends ``slim.request`` commands and returns typed accessors over their results."""

    def __init__(
        self,
        host: str,
        port: int,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the client.

        Args:
            host: Server host name or IP address
            port: Server HTTP port (9000 on a stock install)
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport, used by tests
        """
        self.base_url = f"http://{host}:{port}"
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )
        self._request_id = 0

    async def query(self, scope: str, args: list[Any]) -> LmsResponse:
        """
        Run one command on the server.

        Args:
            scope: Player id the command applies to, or "-" for server-wide commands
            args: Command and its arguments, e.g. ["status", 0, 9999]

        Returns:
            Accessor over the response's ``result`` mapping

        Raises:
            TransportError: On network failure, timeout, HTTP error status or a non-JSON body
            FieldMissing: If the envelope has no ``result``
            FieldTypeMismatch: If ``result`` is not an object
        """
        self._request_id += 1
        payload = {
            "id": self._request_id,
            "method": "slim.request",
            "params": [scope, args],
        }
        logger.debug(f"-> {scope} {args}")

        try:
            response = await self._client.post(JSONRPC_PATH, json=payload)
            response.raise_for_status()
            document = response.json()
        except httpx.TimeoutException as e:
            logger.error(f"Request {args[0]!r} to {self.base_url} timed out")
            raise TransportError(f"Request to {self.base_url} timed out") from e
        except httpx.HTTPError as e:
            logger.error(f"Request {args[0]!r} to {self.base_url} failed: {e}")
            raise TransportError(f"Request to {self.base_url} failed: {e}") from e
        except ValueError as e:
            logger.error(f"Response from {self.base_url} is not valid JSON: {e}")
            raise TransportError(f"Invalid JSON from {self.base_url}") from e

        if not isinstance(document, dict):
            raise FieldTypeMismatch("<envelope>", "object", document)
        if "result" not in document:
            raise FieldMissing("result")
        result = document["result"]
        if not isinstance(result, dict):
            raise FieldTypeMismatch("result", "object", result)

        return LmsResponse(result)

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._client.aclose()
