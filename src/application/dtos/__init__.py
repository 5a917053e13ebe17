"""Data Transfer Objects for application layer."""

from src.application.dtos.analysis import (
    GenerateGistRequest,
    GenerateSummaryRequest,
    GenerateTextRequest,
    GenerateTextResponse,
    GistResponse,
    GistType,
    SearchOperator,
    SearchOption,
    SearchVideosRequest,
    SearchVideosResponse,
    SummaryResponse,
    SummaryType,
)
from src.application.dtos.base import (
    PageRequest,
    SortDirection,
    SortField,
    ToolRequest,
    ToolResponse,
)
from src.application.dtos.indexes import (
    CreateIndexRequest,
    CreateIndexResponse,
    DeleteIndexRequest,
    DeleteIndexResponse,
    GetIndexRequest,
    IndexListResponse,
    IndexResponse,
    ListIndexesRequest,
    UpdateIndexRequest,
    UpdateIndexResponse,
)
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

__all__ = [
    # Base
    "PageRequest",
    "SortDirection",
    "SortField",
    "ToolRequest",
    "ToolResponse",
    # Indexes
    "CreateIndexRequest",
    "CreateIndexResponse",
    "DeleteIndexRequest",
    "DeleteIndexResponse",
    "GetIndexRequest",
    "IndexListResponse",
    "IndexResponse",
    "ListIndexesRequest",
    "UpdateIndexRequest",
    "UpdateIndexResponse",
    # Tasks and imports
    "DeleteTaskRequest",
    "DeleteTaskResponse",
    "GetTaskRequest",
    "ImportLogsRequest",
    "ImportLogsResponse",
    "ImportStatusRequest",
    "ImportStatusResponse",
    "ImportVideosRequest",
    "ImportVideosResponse",
    "ListTasksRequest",
    "TaskDetail",
    "TaskListResponse",
    "TaskResponse",
    "UploadVideoRequest",
    "UploadVideoResponse",
    # Search and generation
    "GenerateGistRequest",
    "GenerateSummaryRequest",
    "GenerateTextRequest",
    "GenerateTextResponse",
    "GistResponse",
    "GistType",
    "SearchOperator",
    "SearchOption",
    "SearchVideosRequest",
    "SearchVideosResponse",
    "SummaryResponse",
    "SummaryType",
]
