"""MCP tool implementations for the TwelveLabs video server."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from src.application.dtos.analysis import (
    GenerateGistRequest,
    GenerateSummaryRequest,
    GenerateTextRequest,
    SearchVideosRequest,
)
from src.application.dtos.base import ToolRequest, ToolResponse
from src.application.dtos.indexes import (
    CreateIndexRequest,
    DeleteIndexRequest,
    GetIndexRequest,
    ListIndexesRequest,
    UpdateIndexRequest,
)
from src.application.dtos.tasks import (
    DeleteTaskRequest,
    GetTaskRequest,
    ImportLogsRequest,
    ImportStatusRequest,
    ImportVideosRequest,
    ListTasksRequest,
    UploadVideoRequest,
)
from src.application.services.analysis import AnalysisService
from src.application.services.indexes import IndexService
from src.application.services.tasks import TaskService
from src.infrastructure.factory import InfrastructureFactory


@dataclass(frozen=True)
class ToolServices:
    """Services shared by every tool handler."""

    indexes: IndexService
    tasks: TaskService
    analysis: AnalysisService


ToolHandler = Callable[[ToolServices, Any], Awaitable[ToolResponse]]


@dataclass(frozen=True)
class ToolBinding:
    """Argument model and handler behind one tool name."""

    request_model: type[ToolRequest]
    handler: ToolHandler


def create_tool_services(factory: InfrastructureFactory) -> ToolServices:
    """Create the tool services from the infrastructure factory."""
    client = factory.get_video_client()
    return ToolServices(
        indexes=IndexService(client, factory.settings.twelvelabs),
        tasks=TaskService(client),
        analysis=AnalysisService(client),
    )


# =============================================================================
# Indexes
# =============================================================================


async def create_index_tool(
    services: ToolServices, request: CreateIndexRequest
) -> ToolResponse:
    """Create an index."""
    return await services.indexes.create_index(request)


async def list_indexes_tool(
    services: ToolServices, request: ListIndexesRequest
) -> ToolResponse:
    """List indexes."""
    return await services.indexes.list_indexes(request)


async def get_index_tool(
    services: ToolServices, request: GetIndexRequest
) -> ToolResponse:
    """Get an index by ID."""
    return await services.indexes.get_index(request)


async def update_index_tool(
    services: ToolServices, request: UpdateIndexRequest
) -> ToolResponse:
    """Rename an index."""
    return await services.indexes.update_index(request)


async def delete_index_tool(
    services: ToolServices, request: DeleteIndexRequest
) -> ToolResponse:
    """Delete an index."""
    return await services.indexes.delete_index(request)


# =============================================================================
# Uploads, tasks and imports
# =============================================================================


async def upload_videos_tool(
    services: ToolServices, request: UploadVideoRequest
) -> ToolResponse:
    """Upload a video by URL."""
    return await services.tasks.upload_video(request)


async def import_videos_tool(
    services: ToolServices, request: ImportVideosRequest
) -> ToolResponse:
    """Import videos from an integration."""
    return await services.tasks.import_videos(request)


async def get_import_status_tool(
    services: ToolServices, request: ImportStatusRequest
) -> ToolResponse:
    """Get per-video import status."""
    return await services.tasks.get_import_status(request)


async def get_import_logs_tool(
    services: ToolServices, request: ImportLogsRequest
) -> ToolResponse:
    """Get import logs."""
    return await services.tasks.get_import_logs(request)


async def list_tasks_tool(
    services: ToolServices, request: ListTasksRequest
) -> ToolResponse:
    """List ingestion tasks."""
    return await services.tasks.list_tasks(request)


async def get_task_tool(
    services: ToolServices, request: GetTaskRequest
) -> ToolResponse:
    """Get an ingestion task."""
    return await services.tasks.get_task(request)


async def delete_task_tool(
    services: ToolServices, request: DeleteTaskRequest
) -> ToolResponse:
    """Delete a finished ingestion task."""
    return await services.tasks.delete_task(request)


# =============================================================================
# Search and generation
# =============================================================================


async def search_videos_tool(
    services: ToolServices, request: SearchVideosRequest
) -> ToolResponse:
    """Search an index."""
    return await services.analysis.search_videos(request)


async def generate_text_tool(
    services: ToolServices, request: GenerateTextRequest
) -> ToolResponse:
    """Generate free text from a video."""
    return await services.analysis.generate_text(request)


async def generate_gist_tool(
    services: ToolServices, request: GenerateGistRequest
) -> ToolResponse:
    """Generate title, topics and hashtags."""
    return await services.analysis.generate_gist(request)


async def generate_summary_tool(
    services: ToolServices, request: GenerateSummaryRequest
) -> ToolResponse:
    """Generate a summary, chapters or highlights."""
    return await services.analysis.generate_summary(request)


TOOL_BINDINGS: dict[str, ToolBinding] = {
    "create_index": ToolBinding(CreateIndexRequest, create_index_tool),
    "list_indexes": ToolBinding(ListIndexesRequest, list_indexes_tool),
    "get_index": ToolBinding(GetIndexRequest, get_index_tool),
    "update_index": ToolBinding(UpdateIndexRequest, update_index_tool),
    "delete_index": ToolBinding(DeleteIndexRequest, delete_index_tool),
    "upload_videos": ToolBinding(UploadVideoRequest, upload_videos_tool),
    "import_videos": ToolBinding(ImportVideosRequest, import_videos_tool),
    "get_import_status": ToolBinding(ImportStatusRequest, get_import_status_tool),
    "get_import_logs": ToolBinding(ImportLogsRequest, get_import_logs_tool),
    "list_tasks": ToolBinding(ListTasksRequest, list_tasks_tool),
    "get_task": ToolBinding(GetTaskRequest, get_task_tool),
    "delete_task": ToolBinding(DeleteTaskRequest, delete_task_tool),
    "search_videos": ToolBinding(SearchVideosRequest, search_videos_tool),
    "generate_text": ToolBinding(GenerateTextRequest, generate_text_tool),
    "generate_gist": ToolBinding(GenerateGistRequest, generate_gist_tool),
    "generate_summary": ToolBinding(GenerateSummaryRequest, generate_summary_tool),
}
