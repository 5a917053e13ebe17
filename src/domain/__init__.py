"""Domain layer - business models and errors."""

from src.domain.exceptions import (
    DomainException,
    InvalidInvocation,
    InvalidState,
    MalformedUpstreamResponse,
    MissingCredentialError,
    UnknownTool,
    UpstreamError,
)
from src.domain.models import (
    DEFAULT_INDEX_MODELS,
    IndexModelSpec,
    ModelOption,
    TaskStatus,
)

__all__ = [
    # Exceptions
    "DomainException",
    "InvalidInvocation",
    "UnknownTool",
    "InvalidState",
    "UpstreamError",
    "MalformedUpstreamResponse",
    "MissingCredentialError",
    # Models
    "DEFAULT_INDEX_MODELS",
    "IndexModelSpec",
    "ModelOption",
    "TaskStatus",
]
