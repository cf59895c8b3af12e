"""Transports – HttpTransport, POSTs each batch as a JSON array."""
from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from clientlog.records import LogRecord

logger = logging.getLogger(__name__)


def _require_httpx() -> Any:
    try:
        import httpx  # type: ignore[import-untyped]
        return httpx
    except ImportError as exc:
        raise ImportError("Install 'clientlog[http]' to use the HTTP transport") from exc


class HttpTransport:
    """Send batches to *url*.

    Network errors and non-2xx responses are logged and dropped; there is
    no retry and no offline buffering. Pass *client* to reuse an
    ``httpx.AsyncClient`` you own; otherwise one is opened per batch.

    An ``AsyncClient`` is bound to the event loop it first ran on. Outside
    a running loop the logger delivers each full batch through a fresh
    ``asyncio.run`` loop, so a caller-owned *client* only works when
    logging happens inside one long-lived loop. Leave *client* unset in
    plain synchronous scripts.
    """

    def __init__(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        timeout: float = 10.0,
        client: Any = None,
        name: str = "http",
    ) -> None:
        self._httpx = _require_httpx()
        self.name = name
        self.url = url
        self.headers = {"Content-Type": "application/json", **(headers or {})}
        self.timeout = timeout
        self._client = client

    async def write(self, batch: Sequence[LogRecord]) -> None:
        httpx = self._httpx
        payload = [r.to_dict() for r in batch]
        try:
            if self._client is not None:
                response = await self._client.post(self.url, json=payload, headers=self.headers)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.post(self.url, json=payload, headers=self.headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "http_transport.rejected url=%s status=%d records=%d",
                self.url, exc.response.status_code, len(payload),
            )
        except httpx.HTTPError as exc:
            logger.warning("http_transport.failed url=%s error=%r records=%d", self.url, exc, len(payload))


__all__ = ["HttpTransport"]
