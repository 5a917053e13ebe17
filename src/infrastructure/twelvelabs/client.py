"""httpx-based client for the TwelveLabs REST API."""

import json as jsonlib
from collections.abc import Mapping
from typing import Any

import httpx

from src.commons.settings.models import TwelveLabsSettings
from src.commons.telemetry import get_logger, timed
from src.domain.exceptions import MalformedUpstreamResponse, UpstreamError
from src.infrastructure.twelvelabs.base import QueryValue, VideoIntelligenceClientBase

logger = get_logger(__name__)

_BODY_PREVIEW_CHARS = 500


class TwelveLabsClient(VideoIntelligenceClientBase):
    """TwelveLabs API client.

    Every request carries the static API key in the ``x-api-key`` header.
    The client is shared by all tool handlers; it holds no per-call state.
    """

    def __init__(
        self,
        settings: TwelveLabsSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Immutable upstream settings carrying key and base URL.
            transport: Optional transport override, used by tests.
        """
        self._base_url = settings.base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            headers={"x-api-key": settings.api_key},
            timeout=httpx.Timeout(settings.timeout_seconds),
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        """API root every path is resolved against."""
        return self._base_url

    @timed
    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, QueryValue | None] | None = None,
        json: Mapping[str, Any] | None = None,
        form: Mapping[str, str] | None = None,
        expect_json: bool = True,
    ) -> dict[str, Any]:
        """Send one request and decode the JSON object it returns."""
        url = f"{self._base_url}{path}"
        query = {k: v for k, v in (params or {}).items() if v is not None}
        # (None, value) tuples render as plain multipart fields
        files = {k: (None, v) for k, v in form.items()} if form else None

        logger.info(
            "Upstream request initiated",
            extra={"method": method, "path": path},
        )
        if json is not None:
            logger.debug(f"Request body: {jsonlib.dumps(dict(json), default=str)}")

        response = await self._client.request(
            method,
            url,
            params=query or None,
            json=json,
            files=files,
        )
        body = response.text

        logger.info(
            "Upstream response received",
            extra={"status_code": response.status_code, "path": path},
        )
        logger.debug(f"Response body: {body[:_BODY_PREVIEW_CHARS]}")

        if not response.is_success:
            logger.warning(
                f"Upstream error response: {body}",
                extra={"status_code": response.status_code},
            )
            raise UpstreamError(response.status_code, body)

        if not expect_json:
            return {}

        try:
            payload = response.json()
        except ValueError as e:
            logger.warning(f"Response parsing failed: {e}")
            raise MalformedUpstreamResponse(body) from e

        if not isinstance(payload, dict):
            logger.warning("Response parsing failed: payload is not an object")
            raise MalformedUpstreamResponse(body, reason="Expected a JSON object")

        logger.debug(f"Response parsed, keys: {', '.join(payload.keys())}")
        return payload

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()
