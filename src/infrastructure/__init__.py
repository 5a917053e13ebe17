"""Infrastructure layer - upstream API clients."""

from src.infrastructure.factory import InfrastructureFactory
from src.infrastructure.twelvelabs import TwelveLabsClient, VideoIntelligenceClientBase

__all__ = [
    "InfrastructureFactory",
    "TwelveLabsClient",
    "VideoIntelligenceClientBase",
]
