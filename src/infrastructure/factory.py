"""Infrastructure factory for creating service instances from configuration."""

from typing import Any, cast

import httpx

from src.commons.settings.models import Settings
from src.commons.telemetry import get_logger
from src.infrastructure.twelvelabs import TwelveLabsClient, VideoIntelligenceClientBase

logger = get_logger(__name__)


class InfrastructureFactory:
    """Factory for creating infrastructure service instances.

    Instances are created lazily and cached, so every tool handler shares
    the same HTTP connection pool.
    """

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize factory with settings.

        Args:
            settings: Application settings.
            transport: Optional HTTP transport override for the API client.
        """
        self._settings = settings
        self._transport = transport
        self._instances: dict[str, Any] = {}

    @property
    def settings(self) -> Settings:
        """Settings the factory was built from."""
        return self._settings

    def get_video_client(self) -> VideoIntelligenceClientBase:
        """Get the video intelligence API client.

        Returns:
            Configured TwelveLabs client.
        """
        if "video_client" not in self._instances:
            self._instances["video_client"] = TwelveLabsClient(
                settings=self._settings.twelvelabs,
                transport=self._transport,
            )
        return cast("VideoIntelligenceClientBase", self._instances["video_client"])

    async def close_all(self) -> None:
        """Close all service connections."""
        for name, instance in self._instances.items():
            try:
                await instance.close()
            except Exception:
                logger.warning(f"Failed to close {name}", exc_info=True)

        self._instances.clear()
