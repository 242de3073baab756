"""Async client for the eternal metadata service.

Blueprints are embedded in the normal metadata document when the request
carries ``?include=blueprint``::

    GET https://pix.ls/meta/eternals/123?include=blueprint

The outcome is reported as a status code rather than an exception, since a
missing or unknown eternal is an ordinary result for a viewer:

* ``200``: the metadata holds a blueprint, parsed into :class:`Blueprint`.
* ``204``: the request succeeded but the metadata is empty or has no blueprint.
* any non-2xx status is passed through verbatim (usually ``404``).
* ``0``: no HTTP status at all (connection failure, timeout, invalid JSON).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from eternals.blueprint import Blueprint
from eternals.config import DEFAULT_FETCH_CONFIG, FetchConfig

log = logging.getLogger(__name__)

STATUS_OK = 200
STATUS_NO_BLUEPRINT = 204
STATUS_UNAVAILABLE = 0


@dataclass(frozen=True)
class FetchResult:
    """Outcome of one blueprint request.

    Attributes:
        status: 200, 204, the service's error status, or 0 without a response.
        blueprint: Parsed blueprint, only present with status 200.
        meta: Full decoded metadata document, when one was received.
    """

    status: int
    blueprint: Optional[Blueprint] = None
    meta: Optional[Dict[str, Any]] = None

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK


class BlueprintClient:
    """Minimal async wrapper around the metadata endpoint."""

    def __init__(
        self,
        config: FetchConfig = DEFAULT_FETCH_CONFIG,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def start(self) -> None:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._config.base_url.rstrip("/"),
                timeout=self._config.timeout_s,
                follow_redirects=True,
                transport=self._transport,
            )

    async def stop(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def fetch(self, eternal_id: str) -> FetchResult:
        """Request the metadata of ``eternal_id`` with its blueprint.

        Raises:
            BlueprintError: If the service returns a blueprint that does not
                match the schema.
        """
        client = self._require_client()
        log.debug("Fetching blueprint for eternal %s", eternal_id)
        try:
            resp = await client.get(
                f"/{eternal_id}", params={"include": self._config.include}
            )
        except httpx.HTTPError as e:
            msg = str(e).strip() or e.__class__.__name__
            log.warning("Blueprint request for %s failed: %s", eternal_id, msg)
            return FetchResult(status=STATUS_UNAVAILABLE)

        if not resp.is_success:
            log.debug("Blueprint request for %s returned %d", eternal_id, resp.status_code)
            return FetchResult(status=resp.status_code)

        if resp.status_code == STATUS_NO_BLUEPRINT or not resp.content:
            log.debug("Metadata for eternal %s is empty", eternal_id)
            return FetchResult(status=STATUS_NO_BLUEPRINT)

        try:
            meta = resp.json()
        except ValueError:
            log.warning("Invalid JSON in metadata for eternal %s", eternal_id)
            return FetchResult(status=STATUS_UNAVAILABLE)

        if not isinstance(meta, dict):
            return FetchResult(status=STATUS_NO_BLUEPRINT)

        payload = meta.get("blueprint")
        if not payload:
            log.debug("Metadata for eternal %s has no blueprint", eternal_id)
            return FetchResult(status=STATUS_NO_BLUEPRINT, meta=meta)

        return FetchResult(
            status=STATUS_OK, blueprint=Blueprint.from_dict(payload), meta=meta
        )

    def _require_client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("blueprint client not started")
        return self._client


async def fetch_blueprint(
    eternal_id: str,
    config: FetchConfig = DEFAULT_FETCH_CONFIG,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FetchResult:
    """One-shot fetch with a short-lived client."""
    client = BlueprintClient(config, transport=transport)
    await client.start()
    try:
        return await client.fetch(eternal_id)
    finally:
        await client.stop()
