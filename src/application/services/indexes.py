"""Index management service."""

from urllib.parse import quote

from src.application.dtos.base import dict_field, list_field, resource_id
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
from src.commons.settings.models import TwelveLabsSettings
from src.commons.telemetry import get_logger
from src.infrastructure.twelvelabs.base import VideoIntelligenceClientBase


class IndexService:
    """Creates, lists, renames and deletes upstream indexes."""

    def __init__(
        self,
        client: VideoIntelligenceClientBase,
        settings: TwelveLabsSettings,
    ) -> None:
        """Initialize index service.

        Args:
            client: Video intelligence API client.
            settings: Upstream settings; supplies the models new indexes use.
        """
        self._client = client
        self._settings = settings
        self._logger = get_logger(__name__)

    async def create_index(self, request: CreateIndexRequest) -> CreateIndexResponse:
        """Create an index enabled for search and generation models."""
        body = {
            "index_name": request.index_name,
            "models": [spec.to_payload() for spec in self._settings.index_models],
            "addons": list(self._settings.index_addons),
        }
        result = await self._client.request("POST", "/indexes", json=body)

        response = CreateIndexResponse(
            index_id=resource_id(result),
            index_name=str(result.get("index_name") or request.index_name),
        )
        self._logger.info(
            "Index created",
            extra={"index_id": response.index_id, "index_name": response.index_name},
        )
        return response

    async def list_indexes(self, request: ListIndexesRequest) -> IndexListResponse:
        """List one page of indexes."""
        params = {**request.page_params(), "index_name": request.index_name}
        result = await self._client.request("GET", "/indexes", params=params)

        indexes = list_field(result, "data")
        self._logger.info("Indexes listed", extra={"count": len(indexes)})
        return IndexListResponse(
            total_count=len(indexes),
            indexes=indexes,
            page_info=dict_field(result, "page_info"),
        )

    async def get_index(self, request: GetIndexRequest) -> IndexResponse:
        """Retrieve one index by its ID."""
        result = await self._client.request(
            "GET", f"/indexes/{quote(request.index_id, safe='')}"
        )
        self._logger.info("Index retrieved", extra={"index_id": resource_id(result)})
        return IndexResponse(index=result)

    async def update_index(self, request: UpdateIndexRequest) -> UpdateIndexResponse:
        """Rename an index.

        The API answers with an empty body on success.
        """
        await self._client.request(
            "PUT",
            f"/indexes/{quote(request.index_id, safe='')}",
            json={"index_name": request.index_name},
            expect_json=False,
        )
        self._logger.info("Index renamed", extra={"index_id": request.index_id})
        return UpdateIndexResponse(
            index_id=request.index_id,
            index_name=request.index_name,
        )

    async def delete_index(self, request: DeleteIndexRequest) -> DeleteIndexResponse:
        """Delete an index together with every video it holds."""
        await self._client.request(
            "DELETE",
            f"/indexes/{quote(request.index_id, safe='')}",
            expect_json=False,
        )
        self._logger.info("Index deleted", extra={"index_id": request.index_id})
        return DeleteIndexResponse(
            index_id=request.index_id,
            message=f"Index {request.index_id} was deleted successfully",
        )
