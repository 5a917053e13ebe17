"""Static registry of the tools exposed over MCP."""

from mcp.types import Tool

_PAGE_PROPERTIES = {
    "page": {
        "type": "integer",
        "minimum": 1,
        "description": "Page number (default: 1)",
    },
    "pageLimit": {
        "type": "integer",
        "minimum": 1,
        "maximum": 50,
        "description": "Number of items per page (default: 10, max: 50)",
    },
    "sortBy": {
        "type": "string",
        "enum": ["created_at", "updated_at"],
        "description": "Field to sort by",
    },
    "sortOption": {
        "type": "string",
        "enum": ["asc", "desc"],
        "description": "Sort direction",
    },
}

_TEMPERATURE = {
    "type": "number",
    "minimum": 0,
    "maximum": 1,
    "default": 0.2,
    "description": "Controls randomness (0.0-1.0)",
}

TOOL_DESCRIPTORS: tuple[Tool, ...] = (
    Tool(
        name="create_index",
        description=(
            "Creates a new index in TwelveLabs. "
            "Useful before uploading videos or performing searches."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "indexName": {
                    "type": "string",
                    "description": "Name of the new index",
                },
            },
            "required": ["indexName"],
        },
    ),
    Tool(
        name="list_indexes",
        description="Lists the indexes in your TwelveLabs account, one page at a time.",
        inputSchema={
            "type": "object",
            "properties": {
                **_PAGE_PROPERTIES,
                "indexName": {
                    "type": "string",
                    "description": "Filter by index name",
                },
            },
        },
    ),
    Tool(
        name="get_index",
        description="Retrieves details of a specific index.",
        inputSchema={
            "type": "object",
            "properties": {
                "indexId": {
                    "type": "string",
                    "description": "ID of the index to retrieve",
                },
            },
            "required": ["indexId"],
        },
    ),
    Tool(
        name="update_index",
        description="Updates the name of a specific index.",
        inputSchema={
            "type": "object",
            "properties": {
                "indexId": {
                    "type": "string",
                    "description": "ID of the index to update",
                },
                "indexName": {
                    "type": "string",
                    "description": "New name for the index",
                },
            },
            "required": ["indexId", "indexName"],
        },
    ),
    Tool(
        name="delete_index",
        description=(
            "Deletes a specific index and all videos within it. "
            "This action cannot be undone."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "indexId": {
                    "type": "string",
                    "description": "ID of the index to delete",
                },
            },
            "required": ["indexId"],
        },
    ),
    Tool(
        name="upload_videos",
        description=(
            "Uploads a video to an existing index from a direct URL. "
            "Returns the ingestion task tracking its processing."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "indexId": {
                    "type": "string",
                    "description": "Target index ID",
                },
                "url": {
                    "type": "string",
                    "description": "Direct URL to the video file (not YouTube)",
                },
                "filePath": {
                    "type": "string",
                    "description": "Local file path to the video (not supported)",
                },
                "enableVideoStream": {
                    "type": "boolean",
                    "default": True,
                    "description": "Enable video streaming",
                },
            },
            "required": ["indexId"],
        },
    ),
    Tool(
        name="import_videos",
        description="Imports videos from a cloud storage integration into an index.",
        inputSchema={
            "type": "object",
            "properties": {
                "integrationId": {
                    "type": "string",
                    "description": "Integration ID",
                },
                "indexId": {
                    "type": "string",
                    "description": "Index ID",
                },
                "incrementalImport": {
                    "type": "boolean",
                    "default": True,
                    "description": "Only import files added since the last import",
                },
                "retryFailed": {
                    "type": "boolean",
                    "default": False,
                    "description": "Retry files that failed in a previous import",
                },
            },
            "required": ["integrationId", "indexId"],
        },
    ),
    Tool(
        name="get_import_status",
        description=(
            "Retrieves the current import status of each video "
            "from an integration into an index."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "integrationId": {
                    "type": "string",
                    "description": "Integration ID",
                },
                "indexId": {
                    "type": "string",
                    "description": "Index ID",
                },
            },
            "required": ["integrationId", "indexId"],
        },
    ),
    Tool(
        name="get_import_logs",
        description="Retrieves the import logs of an integration.",
        inputSchema={
            "type": "object",
            "properties": {
                "integrationId": {
                    "type": "string",
                    "description": "Integration ID",
                },
            },
            "required": ["integrationId"],
        },
    ),
    Tool(
        name="list_tasks",
        description="Lists video indexing tasks in your account, one page at a time.",
        inputSchema={
            "type": "object",
            "properties": {
                **_PAGE_PROPERTIES,
                "indexId": {
                    "type": "string",
                    "description": "Filter by index ID",
                },
                "status": {
                    "type": "array",
                    "items": {
                        "type": "string",
                        "enum": [
                            "ready",
                            "uploading",
                            "validating",
                            "pending",
                            "queued",
                            "indexing",
                            "failed",
                        ],
                    },
                    "description": "Filter by task status",
                },
            },
        },
    ),
    Tool(
        name="get_task",
        description="Retrieves details of a specific video indexing task.",
        inputSchema={
            "type": "object",
            "properties": {
                "taskId": {
                    "type": "string",
                    "description": "ID of the task to retrieve",
                },
            },
            "required": ["taskId"],
        },
    ),
    Tool(
        name="delete_task",
        description=(
            "Deletes a specific video indexing task. "
            "Only tasks with status 'ready' or 'failed' can be deleted."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "taskId": {
                    "type": "string",
                    "description": "ID of the task to delete",
                },
            },
            "required": ["taskId"],
        },
    ),
    Tool(
        name="search_videos",
        description="Searches the videos of an index using a text query.",
        inputSchema={
            "type": "object",
            "properties": {
                "indexId": {
                    "type": "string",
                    "description": "Index ID to search",
                },
                "query": {
                    "type": "string",
                    "description": "Search query text",
                },
                "options": {
                    "type": "array",
                    "items": {"type": "string", "enum": ["visual", "audio"]},
                    "default": ["visual", "audio"],
                    "description": "Search options: visual, audio, or both",
                },
                "operator": {
                    "type": "string",
                    "enum": ["and", "or"],
                    "default": "or",
                    "description": "Operator used when multiple options are given",
                },
                "limit": {
                    "type": "integer",
                    "minimum": 1,
                    "maximum": 50,
                    "default": 10,
                    "description": "Number of results to retrieve",
                },
            },
            "required": ["indexId", "query"],
        },
    ),
    Tool(
        name="generate_text",
        description=(
            "Generates text (transcription or summary) from a video. "
            "mode is 'transcript', 'summary', or a custom instruction; "
            "an explicit prompt overrides the mode."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "videoId": {
                    "type": "string",
                    "description": "ID of the target video",
                },
                "mode": {
                    "type": "string",
                    "default": "transcript",
                    "description": "transcript or summary",
                },
                "prompt": {
                    "type": "string",
                    "description": "Custom prompt for text generation",
                },
                "temperature": _TEMPERATURE,
            },
            "required": ["videoId"],
        },
    ),
    Tool(
        name="generate_gist",
        description="Generates titles, topics, and hashtags for a video.",
        inputSchema={
            "type": "object",
            "properties": {
                "videoId": {
                    "type": "string",
                    "description": "ID of the target video",
                },
                "types": {
                    "type": "array",
                    "items": {
                        "type": "string",
                        "enum": ["title", "topic", "hashtag"],
                    },
                    "minItems": 1,
                    "description": "Types of gist to generate",
                },
            },
            "required": ["videoId", "types"],
        },
    ),
    Tool(
        name="generate_summary",
        description="Generates a summary, chapters, or highlights for a video.",
        inputSchema={
            "type": "object",
            "properties": {
                "videoId": {
                    "type": "string",
                    "description": "ID of the target video",
                },
                "type": {
                    "type": "string",
                    "enum": ["summary", "chapter", "highlight"],
                    "description": "Type of summary to generate",
                },
                "prompt": {
                    "type": "string",
                    "description": "Optional prompt to guide the summarization",
                },
                "temperature": _TEMPERATURE,
            },
            "required": ["videoId", "type"],
        },
    ),
)


def list_tool_descriptors() -> list[Tool]:
    """Return every registered tool, always in the same order."""
    return list(TOOL_DESCRIPTORS)


def tool_names() -> tuple[str, ...]:
    """Names of the registered tools, in registry order."""
    return tuple(tool.name for tool in TOOL_DESCRIPTORS)
