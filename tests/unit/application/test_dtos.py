"""Unit tests for Application DTOs."""

import pytest
from pydantic import ValidationError

from src.application.dtos.analysis import (
    GenerateGistRequest,
    GenerateSummaryRequest,
    GenerateTextRequest,
    SearchOperator,
    SearchOption,
    SearchVideosRequest,
    SummaryResponse,
    SummaryType,
)
from src.application.dtos.base import (
    PageRequest,
    SortDirection,
    SortField,
    dict_field,
    list_field,
    resource_id,
)
from src.application.dtos.indexes import (
    CreateIndexRequest,
    CreateIndexResponse,
    IndexListResponse,
    UpdateIndexRequest,
)
from src.application.dtos.tasks import (
    ListTasksRequest,
    TaskDetail,
    UploadVideoRequest,
)
from src.domain.models.task import TaskStatus


class TestToolRequest:
    """Tests for argument parsing shared by every tool."""

    def test_accepts_camel_case(self):
        """Test that camelCase tool arguments populate snake_case fields."""
        request = UpdateIndexRequest.model_validate(
            {"indexId": "idx-1", "indexName": "renamed"}
        )
        assert request.index_id == "idx-1"
        assert request.index_name == "renamed"

    def test_accepts_field_names(self):
        """Test that snake_case names are accepted too."""
        request = UpdateIndexRequest(index_id="idx-1", index_name="renamed")
        assert request.index_id == "idx-1"

    def test_unknown_arguments_ignored(self):
        """Test that extra arguments do not fail validation."""
        request = CreateIndexRequest.model_validate(
            {"indexName": "clips", "color": "blue"}
        )
        assert request.index_name == "clips"

    def test_missing_required_field(self):
        """Test that a missing required argument fails validation."""
        with pytest.raises(ValidationError):
            CreateIndexRequest.model_validate({})

    def test_empty_required_string(self):
        """Test that an empty required string fails validation."""
        with pytest.raises(ValidationError):
            CreateIndexRequest.model_validate({"indexName": ""})


class TestPageRequest:
    """Tests for PageRequest."""

    def test_defaults_produce_empty_params(self):
        """Test that unset paging leaves every parameter None."""
        params = PageRequest().page_params()
        assert all(value is None for value in params.values())

    def test_page_params(self):
        """Test mapping of paging fields to upstream parameters."""
        request = PageRequest.model_validate(
            {"page": 2, "pageLimit": 25, "sortBy": "updated_at", "sortOption": "asc"}
        )
        assert request.sort_by == SortField.UPDATED_AT
        assert request.sort_option == SortDirection.ASC
        assert request.page_params() == {
            "page": 2,
            "page_limit": 25,
            "sort_by": "updated_at",
            "sort_option": "asc",
        }

    @pytest.mark.parametrize("page_limit", [0, 51])
    def test_page_limit_bounds(self, page_limit):
        """Test that the page size is limited to 1..50."""
        with pytest.raises(ValidationError):
            PageRequest.model_validate({"pageLimit": page_limit})

    def test_invalid_sort_field(self):
        """Test that unknown sort fields are rejected."""
        with pytest.raises(ValidationError):
            PageRequest.model_validate({"sortBy": "name"})


class TestUploadVideoRequest:
    """Tests for UploadVideoRequest."""

    def test_url_upload(self):
        """Test a URL upload with defaults."""
        request = UploadVideoRequest.model_validate(
            {"indexId": "idx-1", "url": "https://cdn.test/video.mp4"}
        )
        assert request.url == "https://cdn.test/video.mp4"
        assert request.enable_video_stream is True

    def test_file_path_rejected(self):
        """Test that local file uploads are refused."""
        with pytest.raises(ValidationError, match="local file path is not supported"):
            UploadVideoRequest.model_validate(
                {"indexId": "idx-1", "filePath": "/tmp/video.mp4"}
            )

    def test_source_required(self):
        """Test that a source must be given."""
        with pytest.raises(ValidationError, match="Either url or filePath"):
            UploadVideoRequest.model_validate({"indexId": "idx-1"})

    def test_url_wins_over_file_path(self):
        """Test that a URL is used when both sources are given."""
        request = UploadVideoRequest.model_validate(
            {"indexId": "idx-1", "url": "https://cdn.test/v.mp4", "filePath": "/tmp/v"}
        )
        assert request.url == "https://cdn.test/v.mp4"


class TestListTasksRequest:
    """Tests for ListTasksRequest."""

    def test_status_filter(self):
        """Test parsing of the status filter."""
        request = ListTasksRequest.model_validate({"status": ["ready", "failed"]})
        assert request.status == [TaskStatus.READY, TaskStatus.FAILED]

    def test_unknown_status_rejected(self):
        """Test that unknown statuses are rejected."""
        with pytest.raises(ValidationError):
            ListTasksRequest.model_validate({"status": ["done"]})


class TestAnalysisRequests:
    """Tests for search and generation arguments."""

    def test_search_defaults(self):
        """Test search defaults."""
        request = SearchVideosRequest.model_validate(
            {"indexId": "idx-1", "query": "a red car"}
        )
        assert request.options == [SearchOption.VISUAL, SearchOption.AUDIO]
        assert request.operator == SearchOperator.OR
        assert request.limit == 10

    def test_search_requires_option(self):
        """Test that an empty options list is rejected."""
        with pytest.raises(ValidationError):
            SearchVideosRequest.model_validate(
                {"indexId": "idx-1", "query": "car", "options": []}
            )

    def test_generate_text_defaults(self):
        """Test generate_text defaults."""
        request = GenerateTextRequest.model_validate({"videoId": "vid-1"})
        assert request.mode == "transcript"
        assert request.prompt is None
        assert request.temperature == 0.2

    @pytest.mark.parametrize("temperature", [-0.1, 1.5])
    def test_temperature_bounds(self, temperature):
        """Test that temperature is limited to 0..1."""
        with pytest.raises(ValidationError):
            GenerateSummaryRequest.model_validate(
                {"videoId": "vid-1", "type": "summary", "temperature": temperature}
            )

    def test_gist_types_required(self):
        """Test that at least one gist type is required."""
        with pytest.raises(ValidationError):
            GenerateGistRequest.model_validate({"videoId": "vid-1", "types": []})

    def test_summary_type_enum(self):
        """Test that the summary type is parsed."""
        request = GenerateSummaryRequest.model_validate(
            {"videoId": "vid-1", "type": "chapter"}
        )
        assert request.type == SummaryType.CHAPTER


class TestToolResponse:
    """Tests for result payload rendering."""

    def test_payload_uses_camel_case(self):
        """Test that results are rendered with camelCase keys."""
        payload = CreateIndexResponse(index_id="idx-1", index_name="clips").to_payload()
        assert payload == {
            "status": "success",
            "indexId": "idx-1",
            "indexName": "clips",
            "message": "Index created successfully",
        }

    def test_list_payload(self):
        """Test rendering of a list result."""
        payload = IndexListResponse(
            total_count=1,
            indexes=[{"_id": "idx-1"}],
            page_info={"page": 1},
        ).to_payload()
        assert payload["totalCount"] == 1
        assert payload["indexes"] == [{"_id": "idx-1"}]
        assert payload["pageInfo"] == {"page": 1}

    def test_enum_rendered_as_value(self):
        """Test that enums are rendered as their string value."""
        payload = SummaryResponse(
            type=SummaryType.HIGHLIGHT, video_id="vid-1"
        ).to_payload()
        assert payload["type"] == "highlight"
        assert payload["videoId"] == "vid-1"


class TestTaskDetail:
    """Tests for TaskDetail.from_upstream."""

    def test_with_stream(self):
        """Test a task that exposes an HLS stream."""
        task = TaskDetail.from_upstream(
            {
                "_id": "task-1",
                "status": "ready",
                "index_id": "idx-1",
                "video_id": "vid-1",
                "created_at": "2024-01-01T00:00:00Z",
                "system_metadata": {"duration": 12.5},
                "hls": {
                    "video_url": "https://stream.test/v.m3u8",
                    "thumbnail_urls": ["https://stream.test/t.jpg"],
                },
            }
        )
        assert task.id == "task-1"
        assert task.status == "ready"
        assert task.system_metadata == {"duration": 12.5}
        assert task.stream_url == "https://stream.test/v.m3u8"
        assert task.thumbnails == ["https://stream.test/t.jpg"]

    def test_without_stream(self):
        """Test that thumbnails are omitted without a stream URL."""
        task = TaskDetail.from_upstream(
            {"_id": "task-1", "status": "indexing", "hls": {"thumbnail_urls": ["x"]}}
        )
        assert task.stream_url is None
        assert task.thumbnails is None
        assert task.system_metadata == {}

    def test_estimated_time_stringified(self):
        """Test that numeric fields are rendered as strings."""
        task = TaskDetail.from_upstream({"id": 42, "estimated_time": 120})
        assert task.id == "42"
        assert task.estimated_time == "120"


class TestPayloadHelpers:
    """Tests for upstream payload helpers."""

    def test_list_field(self):
        assert list_field({"data": [1]}, "data") == [1]
        assert list_field({"data": None}, "data") == []
        assert list_field({}, "data") == []

    def test_dict_field(self):
        assert dict_field({"usage": {"tokens": 3}}, "usage") == {"tokens": 3}
        assert dict_field({"usage": "n/a"}, "usage") == {}

    def test_resource_id(self):
        assert resource_id({"_id": "a"}) == "a"
        assert resource_id({"id": "b"}) == "b"
        assert resource_id({}) is None
