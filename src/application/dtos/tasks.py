"""DTOs for video ingestion, task and import tools."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from src.application.dtos.base import (
    PageRequest,
    ToolRequest,
    ToolResponse,
    dict_field,
    list_field,
    resource_id,
)
from src.domain.models.task import TaskStatus


class UploadVideoRequest(ToolRequest):
    """Arguments of upload_videos.

    Only direct video URLs are supported; a local ``filePath`` is rejected.
    """

    index_id: str = Field(min_length=1, description="Target index ID")
    url: str | None = Field(default=None, description="Direct URL to the video file")
    file_path: str | None = Field(default=None, description="Local file path")
    enable_video_stream: bool = Field(
        default=True,
        description="Enable HLS streaming of the uploaded video",
    )

    @model_validator(mode="after")
    def check_source(self) -> Self:
        """Require a URL; local uploads are not supported."""
        if self.url:
            return self
        if self.file_path:
            raise ValueError(
                "Uploading from a local file path is not supported, use url instead"
            )
        raise ValueError("Either url or filePath is required")


class ListTasksRequest(PageRequest):
    """Arguments of list_tasks."""

    index_id: str | None = Field(default=None, description="Filter by index ID")
    status: list[TaskStatus] | None = Field(
        default=None,
        description="Filter by task status",
    )


class GetTaskRequest(ToolRequest):
    """Arguments of get_task."""

    task_id: str = Field(min_length=1, description="ID of the task to retrieve")


class DeleteTaskRequest(ToolRequest):
    """Arguments of delete_task."""

    task_id: str = Field(min_length=1, description="ID of the task to delete")


class ImportVideosRequest(ToolRequest):
    """Arguments of import_videos."""

    integration_id: str = Field(min_length=1, description="Integration ID")
    index_id: str = Field(min_length=1, description="Index ID")
    incremental_import: bool = Field(
        default=True,
        description="Only import files added since the last import",
    )
    retry_failed: bool = Field(
        default=False,
        description="Retry files that failed in a previous import",
    )


class ImportStatusRequest(ToolRequest):
    """Arguments of get_import_status."""

    integration_id: str = Field(min_length=1, description="Integration ID")
    index_id: str = Field(min_length=1, description="Index ID")


class ImportLogsRequest(ToolRequest):
    """Arguments of get_import_logs."""

    integration_id: str = Field(min_length=1, description="Integration ID")


class UploadVideoResponse(ToolResponse):
    """Result of upload_videos."""

    task_id: str | None
    video_id: str | None
    index_id: str
    message: str = "Video upload task started"


class TaskListResponse(ToolResponse):
    """One page of ingestion tasks."""

    total_count: int = Field(ge=0, description="Number of tasks on this page")
    tasks: list[Any] = Field(default_factory=list)
    page_info: dict[str, Any] = Field(default_factory=dict)


class TaskDetail(BaseModel):
    """Normalized view of one ingestion task."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    index_id: str | None = None
    video_id: str | None = None
    status: str | None = None
    estimated_time: str | None = None
    system_metadata: dict[str, Any] = Field(default_factory=dict)
    stream_url: str | None = None
    thumbnails: list[Any] | None = None

    @field_validator(
        "id",
        "created_at",
        "updated_at",
        "index_id",
        "video_id",
        "status",
        "estimated_time",
        "stream_url",
        mode="before",
    )
    @classmethod
    def stringify(cls, value: Any) -> Any:
        """Upstream scalars are rendered as strings."""
        return str(value) if value is not None else None

    @classmethod
    def from_upstream(cls, payload: dict[str, Any]) -> "TaskDetail":
        """Build the view from a raw task payload.

        Stream URL and thumbnails are only reported when the task exposes
        an HLS video URL.
        """
        hls = dict_field(payload, "hls")
        has_stream = bool(hls.get("video_url"))
        return cls(
            id=resource_id(payload),
            created_at=payload.get("created_at"),
            updated_at=payload.get("updated_at"),
            index_id=payload.get("index_id"),
            video_id=payload.get("video_id"),
            status=payload.get("status"),
            estimated_time=payload.get("estimated_time"),
            system_metadata=dict_field(payload, "system_metadata"),
            stream_url=hls.get("video_url") if has_stream else None,
            thumbnails=list_field(hls, "thumbnail_urls") if has_stream else None,
        )


class TaskResponse(ToolResponse):
    """Result of get_task."""

    task: TaskDetail


class DeleteTaskResponse(ToolResponse):
    """Result of delete_task."""

    task_id: str
    message: str


class ImportVideosResponse(ToolResponse):
    """Result of import_videos."""

    imported_videos: list[Any] = Field(default_factory=list)
    failed_files: list[Any] = Field(default_factory=list)
    message: str


class ImportStatusResponse(ToolResponse):
    """Per-status buckets of videos for one integration and index."""

    not_imported: list[Any] = Field(default_factory=list)
    validating: list[Any] = Field(default_factory=list)
    pending: list[Any] = Field(default_factory=list)
    queued: list[Any] = Field(default_factory=list)
    indexing: list[Any] = Field(default_factory=list)
    ready: list[Any] = Field(default_factory=list)
    failed: list[Any] = Field(default_factory=list)


class ImportLogsResponse(ToolResponse):
    """Import logs of one integration."""

    logs: list[Any] = Field(default_factory=list)
