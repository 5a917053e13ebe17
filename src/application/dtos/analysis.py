"""DTOs for search and generation tools."""

from enum import Enum
from typing import Any

from pydantic import Field

from src.application.dtos.base import ToolRequest, ToolResponse


class SearchOption(str, Enum):
    """Modalities a search can match against."""

    VISUAL = "visual"
    AUDIO = "audio"


class SearchOperator(str, Enum):
    """How matches from several search options are combined."""

    AND = "and"
    OR = "or"


class GistType(str, Enum):
    """Kinds of gist the API can produce."""

    TITLE = "title"
    TOPIC = "topic"
    HASHTAG = "hashtag"


class SummaryType(str, Enum):
    """Kinds of summary the API can produce."""

    SUMMARY = "summary"
    CHAPTER = "chapter"
    HIGHLIGHT = "highlight"


class SearchVideosRequest(ToolRequest):
    """Arguments of search_videos."""

    index_id: str = Field(min_length=1, description="Index ID to search")
    query: str = Field(min_length=1, description="Search query text")
    options: list[SearchOption] = Field(
        default_factory=lambda: [SearchOption.VISUAL, SearchOption.AUDIO],
        min_length=1,
        description="Search options",
    )
    operator: SearchOperator = Field(
        default=SearchOperator.OR,
        description="Operator combining multiple options",
    )
    limit: int = Field(default=10, ge=1, le=50, description="Results per page")


class GenerateTextRequest(ToolRequest):
    """Arguments of generate_text.

    Without a prompt, ``mode`` selects a canned transcript or summary prompt;
    any other mode value is itself used as the prompt.
    """

    video_id: str = Field(min_length=1, description="ID of the target video")
    mode: str = Field(default="transcript", min_length=1)
    prompt: str | None = Field(default=None, description="Custom prompt")
    temperature: float = Field(default=0.2, ge=0, le=1)


class GenerateGistRequest(ToolRequest):
    """Arguments of generate_gist."""

    video_id: str = Field(min_length=1, description="ID of the target video")
    types: list[GistType] = Field(min_length=1, description="Gist types")


class GenerateSummaryRequest(ToolRequest):
    """Arguments of generate_summary."""

    video_id: str = Field(min_length=1, description="ID of the target video")
    type: SummaryType = Field(description="Type of summary to generate")
    prompt: str | None = Field(default=None, description="Guidance prompt")
    temperature: float = Field(default=0.2, ge=0, le=1)


class SearchVideosResponse(ToolResponse):
    """One page of search results grouped by video."""

    total_count: int = Field(ge=0, description="Number of results on this page")
    results: list[Any] = Field(default_factory=list)
    page_info: dict[str, Any] = Field(default_factory=dict)


class GenerateTextResponse(ToolResponse):
    """Result of generate_text."""

    text: str = ""
    id: str = ""
    usage: dict[str, Any] = Field(default_factory=dict)
    video_id: str
    mode: str
    temperature: float


class GistResponse(ToolResponse):
    """Result of generate_gist."""

    id: str = ""
    title: str = ""
    topics: list[str] = Field(default_factory=list)
    hashtags: list[str] = Field(default_factory=list)
    usage: dict[str, Any] = Field(default_factory=dict)
    video_id: str


class SummaryResponse(ToolResponse):
    """Result of generate_summary.

    ``data`` holds whichever of ``summary``, ``chapters`` or ``highlights``
    the API returned.
    """

    id: str = ""
    data: dict[str, Any] = Field(default_factory=dict)
    usage: dict[str, Any] = Field(default_factory=dict)
    type: SummaryType
    video_id: str
