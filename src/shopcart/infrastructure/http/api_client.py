"""Thin JSON client for the product/stock REST API.

Every transport or protocol problem is turned into LookupFailedError, so
repositories only ever see domain exceptions. A short-lived
``httpx.AsyncClient`` is opened per request; lookups are rare and each
CLI invocation runs in its own event loop.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from shopcart.domain.exceptions import LookupFailedError

logger = logging.getLogger(__name__)


class ApiClient:

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url
        self._timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
            headers={"Accept": "application/json"},
        )

    async def get_json(self, path: str) -> Any | None:
        """GET ``path`` and decode the JSON body.

        Returns None on 404; raises LookupFailedError for any other
        failure (connection errors, timeouts, non-2xx statuses, bodies
        that aren't JSON).
        """
        logger.debug("GET %s: sending request", path)
        try:
            async with self._client() as client:
                resp = await client.get(path)
        except httpx.RequestError as exc:
            logger.error("GET %s failed: %s", path, exc)
            raise LookupFailedError(f"Request to {path} failed: {exc}") from exc

        if resp.status_code == httpx.codes.NOT_FOUND:
            logger.debug("GET %s: not found", path)
            return None
        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error("GET %s returned HTTP %s", path, resp.status_code)
            raise LookupFailedError(
                f"Request to {path} returned HTTP {resp.status_code}"
            ) from exc

        try:
            data = resp.json()
        except ValueError as exc:
            logger.error("GET %s returned a non-JSON body", path)
            raise LookupFailedError(f"Response from {path} is not JSON") from exc
        logger.debug("GET %s: status %s, body %s", path, resp.status_code, resp.text)
        return data
