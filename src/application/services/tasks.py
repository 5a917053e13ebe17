"""Video ingestion service: uploads, ingestion tasks and integration imports."""

from typing import Any
from urllib.parse import quote

from src.application.dtos.base import dict_field, list_field, resource_id
from src.application.dtos.tasks import (
    DeleteTaskRequest,
    DeleteTaskResponse,
    GetTaskRequest,
    ImportLogsRequest,
    ImportLogsResponse,
    ImportStatusRequest,
    ImportStatusResponse,
    ImportVideosRequest,
    ImportVideosResponse,
    ListTasksRequest,
    TaskDetail,
    TaskListResponse,
    TaskResponse,
    UploadVideoRequest,
    UploadVideoResponse,
)
from src.commons.telemetry import get_logger
from src.domain.exceptions import InvalidState
from src.domain.models.task import TaskStatus
from src.infrastructure.twelvelabs.base import VideoIntelligenceClientBase


def _task_path(task_id: str) -> str:
    return f"/tasks/{quote(task_id, safe='')}"


def _optional_str(value: Any) -> str | None:
    return str(value) if value is not None else None


def _import_path(integration_id: str) -> str:
    return f"/tasks/transfers/import/{quote(integration_id, safe='')}"


class TaskService:
    """Starts and tracks upstream ingestion work.

    Handles:
    - Video uploads by URL (one ingestion task per video)
    - Listing, inspecting and deleting ingestion tasks
    - Bulk imports from a cloud storage integration
    """

    def __init__(self, client: VideoIntelligenceClientBase) -> None:
        """Initialize task service.

        Args:
            client: Video intelligence API client.
        """
        self._client = client
        self._logger = get_logger(__name__)

    # =========================================================================
    # Uploads
    # =========================================================================

    async def upload_video(self, request: UploadVideoRequest) -> UploadVideoResponse:
        """Create an ingestion task for a video reachable by URL."""
        form = {
            "index_id": request.index_id,
            "enable_video_stream": str(request.enable_video_stream).lower(),
            "video_url": request.url or "",
        }
        self._logger.info("Uploading video by URL", extra={"video_url": request.url})
        result = await self._client.request("POST", "/tasks", form=form)

        response = UploadVideoResponse(
            task_id=resource_id(result),
            video_id=_optional_str(result.get("video_id")),
            index_id=request.index_id,
        )
        self._logger.info(
            "Ingestion task created",
            extra={"task_id": response.task_id, "video_id": response.video_id},
        )
        return response

    # =========================================================================
    # Tasks
    # =========================================================================

    async def list_tasks(self, request: ListTasksRequest) -> TaskListResponse:
        """List one page of ingestion tasks."""
        params: dict[str, Any] = {
            **request.page_params(),
            "index_id": request.index_id,
            "status": [s.value for s in request.status] if request.status else None,
        }
        result = await self._client.request("GET", "/tasks", params=params)

        tasks = list_field(result, "data")
        self._logger.info("Tasks listed", extra={"count": len(tasks)})
        return TaskListResponse(
            total_count=len(tasks),
            tasks=tasks,
            page_info=dict_field(result, "page_info"),
        )

    async def get_task(self, request: GetTaskRequest) -> TaskResponse:
        """Retrieve one ingestion task."""
        result = await self._client.request("GET", _task_path(request.task_id))
        task = TaskDetail.from_upstream(result)
        self._logger.info(
            "Task retrieved",
            extra={"task_id": task.id, "task_status": task.status},
        )
        return TaskResponse(task=task)

    async def delete_task(self, request: DeleteTaskRequest) -> DeleteTaskResponse:
        """Delete an ingestion task that has finished.

        The task's status is looked up first; deletion is only attempted
        when it is exactly 'ready' or 'failed'.

        Raises:
            InvalidState: If the task is still in progress.
        """
        current = await self.get_task(GetTaskRequest(task_id=request.task_id))
        if not TaskStatus.is_deletable(current.task.status):
            raise InvalidState(request.task_id, current.task.status)

        await self._client.request(
            "DELETE", _task_path(request.task_id), expect_json=False
        )
        self._logger.info("Task deleted", extra={"task_id": request.task_id})
        return DeleteTaskResponse(
            task_id=request.task_id,
            message=f"Task {request.task_id} was deleted successfully",
        )

    # =========================================================================
    # Integration imports
    # =========================================================================

    async def import_videos(self, request: ImportVideosRequest) -> ImportVideosResponse:
        """Import the videos of an integration into an index."""
        body = {
            "index_id": request.index_id,
            "incremental_import": request.incremental_import,
            "retry_failed": request.retry_failed,
        }
        result = await self._client.request(
            "POST", _import_path(request.integration_id), json=body
        )

        videos = list_field(result, "videos")
        failed = list_field(result, "failed_files")
        self._logger.info(
            "Import started",
            extra={"imported": len(videos), "failed": len(failed)},
        )
        return ImportVideosResponse(
            imported_videos=videos,
            failed_files=failed,
            message=f"Import started for {len(videos)} video(s)",
        )

    async def get_import_status(
        self, request: ImportStatusRequest
    ) -> ImportStatusResponse:
        """Report each integration video grouped by its import status."""
        result = await self._client.request(
            "GET",
            f"{_import_path(request.integration_id)}/status",
            params={"index_id": request.index_id},
        )
        return ImportStatusResponse(
            not_imported=list_field(result, "not_imported"),
            validating=list_field(result, "validating"),
            pending=list_field(result, "pending"),
            queued=list_field(result, "queued"),
            indexing=list_field(result, "indexing"),
            ready=list_field(result, "ready"),
            failed=list_field(result, "failed"),
        )

    async def get_import_logs(self, request: ImportLogsRequest) -> ImportLogsResponse:
        """Retrieve the import history of an integration."""
        result = await self._client.request(
            "GET", f"{_import_path(request.integration_id)}/logs"
        )
        logs = list_field(result, "data")
        self._logger.info("Import logs retrieved", extra={"count": len(logs)})
        return ImportLogsResponse(logs=logs)
