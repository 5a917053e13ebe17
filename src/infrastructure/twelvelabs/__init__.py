"""TwelveLabs video intelligence API client."""

from src.infrastructure.twelvelabs.base import QueryValue, VideoIntelligenceClientBase
from src.infrastructure.twelvelabs.client import TwelveLabsClient

__all__ = [
    "QueryValue",
    "TwelveLabsClient",
    "VideoIntelligenceClientBase",
]
