"""Search and generation service over indexed videos."""

from typing import Any
from urllib.parse import quote

from src.application.dtos.analysis import (
    GenerateGistRequest,
    GenerateSummaryRequest,
    GenerateTextRequest,
    GenerateTextResponse,
    GistResponse,
    SearchVideosRequest,
    SearchVideosResponse,
    SummaryResponse,
)
from src.application.dtos.base import dict_field, list_field
from src.commons.telemetry import get_logger
from src.infrastructure.twelvelabs.base import VideoIntelligenceClientBase

MODE_PROMPTS: dict[str, str] = {
    "transcript": "Generate a complete transcript of this video in detail.",
    "summary": (
        "Generate a concise summary of this video highlighting the main points "
        "and key takeaways."
    ),
}

# Keys under which /summarize returns its payload, by summary type
_SUMMARY_KEYS = ("summary", "chapters", "highlights")


def resolve_prompt(mode: str, prompt: str | None) -> str:
    """Pick the prompt sent for generate_text.

    An explicit prompt always wins. Otherwise known modes map to a canned
    prompt and any other mode string is used verbatim.
    """
    if prompt:
        return prompt
    return MODE_PROMPTS.get(mode, mode)


class AnalysisService:
    """Runs semantic search and generative analysis on indexed videos."""

    def __init__(self, client: VideoIntelligenceClientBase) -> None:
        """Initialize analysis service.

        Args:
            client: Video intelligence API client.
        """
        self._client = client
        self._logger = get_logger(__name__)

    async def search_videos(self, request: SearchVideosRequest) -> SearchVideosResponse:
        """Search an index with a text query, grouping hits by video."""
        body = {
            "query_text": request.query,
            "search_options": [option.value for option in request.options],
            "operator": request.operator.value,
            "group_by": "video",
            "page_limit": request.limit,
        }
        result = await self._client.request(
            "POST",
            f"/indexes/{quote(request.index_id, safe='')}/search",
            json=body,
        )

        hits = list_field(result, "data")
        self._logger.info("Search completed", extra={"count": len(hits)})
        return SearchVideosResponse(
            total_count=len(hits),
            results=hits,
            page_info=dict_field(result, "page_info"),
        )

    async def generate_text(self, request: GenerateTextRequest) -> GenerateTextResponse:
        """Generate open-ended text from a video."""
        body = {
            "video_id": request.video_id,
            "prompt": resolve_prompt(request.mode, request.prompt),
            "temperature": request.temperature,
            "stream": False,
        }
        result = await self._client.request("POST", "/generate", json=body)

        self._logger.info("Text generated", extra={"video_id": request.video_id})
        return GenerateTextResponse(
            text=str(result.get("data") or ""),
            id=str(result.get("id") or ""),
            usage=dict_field(result, "usage"),
            video_id=request.video_id,
            mode=request.mode,
            temperature=request.temperature,
        )

    async def generate_gist(self, request: GenerateGistRequest) -> GistResponse:
        """Generate a title, topics and/or hashtags for a video."""
        body = {
            "video_id": request.video_id,
            "types": [gist_type.value for gist_type in request.types],
        }
        result = await self._client.request("POST", "/gist", json=body)

        self._logger.info("Gist generated", extra={"video_id": request.video_id})
        return GistResponse(
            id=str(result.get("id") or ""),
            title=str(result.get("title") or ""),
            topics=[str(t) for t in list_field(result, "topics")],
            hashtags=[str(h) for h in list_field(result, "hashtags")],
            usage=dict_field(result, "usage"),
            video_id=request.video_id,
        )

    async def generate_summary(self, request: GenerateSummaryRequest) -> SummaryResponse:
        """Generate a summary, chapter list or highlight list for a video."""
        body: dict[str, Any] = {
            "video_id": request.video_id,
            "type": request.type.value,
            "temperature": request.temperature,
        }
        if request.prompt:
            body["prompt"] = request.prompt

        result = await self._client.request("POST", "/summarize", json=body)

        data = dict_field(result, "data")
        for key in _SUMMARY_KEYS:
            if key in result:
                data[key] = result[key]

        self._logger.info(
            "Summary generated",
            extra={"video_id": request.video_id, "summary_type": request.type.value},
        )
        return SummaryResponse(
            id=str(result.get("id") or ""),
            data=data,
            usage=dict_field(result, "usage"),
            type=request.type,
            video_id=request.video_id,
        )
