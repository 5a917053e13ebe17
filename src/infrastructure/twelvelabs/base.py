"""Abstract base class for the upstream video intelligence API."""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any

QueryValue = str | int | float | bool | Sequence[str]


class VideoIntelligenceClientBase(ABC):
    """Abstract base class for video intelligence API clients.

    Implementations perform exactly one HTTP round trip per call and never
    retry. Errors are reported through the domain exception taxonomy:
    non-success statuses raise UpstreamError and unparsable bodies raise
    MalformedUpstreamResponse.
    """

    @abstractmethod
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
        """Send one request to the API and return the decoded JSON object.

        Args:
            method: HTTP method.
            path: Path relative to the API base URL, starting with '/'.
            params: Query parameters. None values are dropped and sequence
                values are sent as repeated keys.
            json: JSON request body.
            form: Fields sent as multipart/form-data.
            expect_json: When False, a successful response body is ignored
                and an empty dict is returned.

        Returns:
            Decoded JSON object.

        Raises:
            UpstreamError: If the API answers with a non-success status.
            MalformedUpstreamResponse: If the body is not a JSON object.
        """

    @abstractmethod
    async def close(self) -> None:
        """Release network resources."""
