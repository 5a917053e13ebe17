"""DTOs for index management tools."""

from typing import Any

from pydantic import Field

from src.application.dtos.base import PageRequest, ToolRequest, ToolResponse


class CreateIndexRequest(ToolRequest):
    """Arguments of create_index."""

    index_name: str = Field(min_length=1, description="Name of the new index")


class ListIndexesRequest(PageRequest):
    """Arguments of list_indexes."""

    index_name: str | None = Field(default=None, description="Filter by index name")


class GetIndexRequest(ToolRequest):
    """Arguments of get_index."""

    index_id: str = Field(min_length=1, description="ID of the index to retrieve")


class UpdateIndexRequest(ToolRequest):
    """Arguments of update_index."""

    index_id: str = Field(min_length=1, description="ID of the index to update")
    index_name: str = Field(min_length=1, description="New name for the index")


class DeleteIndexRequest(ToolRequest):
    """Arguments of delete_index."""

    index_id: str = Field(min_length=1, description="ID of the index to delete")


class CreateIndexResponse(ToolResponse):
    """Result of create_index."""

    index_id: str | None = Field(description="Identifier assigned upstream")
    index_name: str = Field(description="Name of the created index")
    message: str = "Index created successfully"


class IndexListResponse(ToolResponse):
    """One page of indexes."""

    total_count: int = Field(ge=0, description="Number of indexes on this page")
    indexes: list[Any] = Field(default_factory=list)
    page_info: dict[str, Any] = Field(default_factory=dict)


class IndexResponse(ToolResponse):
    """A single index as reported upstream."""

    index: dict[str, Any] = Field(default_factory=dict)


class UpdateIndexResponse(ToolResponse):
    """Result of update_index."""

    index_id: str
    index_name: str
    message: str = "Index renamed successfully"


class DeleteIndexResponse(ToolResponse):
    """Result of delete_index."""

    index_id: str
    message: str
