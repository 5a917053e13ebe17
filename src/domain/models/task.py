"""Ingestion task domain model."""

from enum import Enum


class TaskStatus(str, Enum):
    """Lifecycle status of an upstream video ingestion task."""

    READY = "ready"  # Indexed and searchable
    UPLOADING = "uploading"
    VALIDATING = "validating"
    PENDING = "pending"
    QUEUED = "queued"
    INDEXING = "indexing"
    FAILED = "failed"

    @classmethod
    def deletable(cls) -> frozenset["TaskStatus"]:
        """Statuses in which the upstream API accepts a task deletion."""
        return frozenset({cls.READY, cls.FAILED})

    @classmethod
    def is_deletable(cls, status: str | None) -> bool:
        """Check whether a raw upstream status allows deletion.

        Args:
            status: Status string as reported by the task endpoint.

        Returns:
            True only for exactly 'ready' or 'failed'.
        """
        return status in {s.value for s in cls.deletable()}
