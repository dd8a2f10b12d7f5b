"""HTTP transport: one request in, one ``Envelope`` out.

The transport owns connection pooling and error statuses. Multiple-choices
(3xx) answers are not followed; they are returned like any success so the
decoder can surface them as ``Ambiguous``.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

import httpx

from wynn_api.core.types import Envelope, StatusClass
from wynn_api.exceptions import TransportError

log = logging.getLogger(__name__)


@runtime_checkable
class Transport(Protocol):
    """Anything that can perform a request and return its raw envelope."""

    async def send(  # noqa: D102
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Envelope: ...

    async def aclose(self) -> None: ...  # noqa: D102


class HttpxTransport:
    """Transport backed by a single shared ``httpx.AsyncClient``.

    Safe to use from concurrent tasks; every call runs over the same pool.
    """

    def __init__(
        self,
        timeout: float,
        user_agent: str,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=timeout,
            headers={"User-Agent": user_agent},
            follow_redirects=False,
        )

    async def send(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Envelope:
        """Perform one request.

        Raises:
            TransportError: On connection, TLS or timeout failures, and on
                4xx/5xx statuses.
        """
        log.debug("%s %s params=%s", method, url, params)
        try:
            response = await self._client.request(
                method, url, params=params, json=json, follow_redirects=False
            )
        except httpx.HTTPError as e:
            raise TransportError(f"couldn't connect to the api: {e}", url=url) from e

        final_url = str(response.url)
        if StatusClass.from_code(response.status_code) is StatusClass.ERROR:
            raise TransportError(
                f"api answered {response.status_code} {response.reason_phrase}",
                url=final_url,
                status_code=response.status_code,
            )

        log.debug("%s %s -> %d", method, final_url, response.status_code)
        return Envelope(
            status_code=response.status_code, body=response.content, url=final_url
        )

    async def aclose(self) -> None:
        """Release the connection pool (only when this transport created it)."""
        if self._owns_client:
            await self._client.aclose()
