"""Domain models."""

from src.domain.models.index import DEFAULT_INDEX_MODELS, IndexModelSpec, ModelOption
from src.domain.models.task import TaskStatus

__all__ = [
    # Index
    "DEFAULT_INDEX_MODELS",
    "IndexModelSpec",
    "ModelOption",
    # Task
    "TaskStatus",
]
