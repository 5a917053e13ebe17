"""Domain exceptions for the TwelveLabs MCP server."""

from __future__ import annotations


class DomainException(Exception):
    """Base exception for domain errors."""


class InvalidInvocation(DomainException):
    """Raised when a tool call is missing arguments or carries invalid ones."""

    def __init__(self, tool_name: str, reason: str) -> None:
        self.tool_name = tool_name
        self.reason = reason
        super().__init__(f"Invalid arguments for {tool_name}: {reason}")


class UnknownTool(DomainException):
    """Raised when a tool name matches no registered tool."""

    def __init__(self, tool_name: str) -> None:
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: {tool_name}")


class InvalidState(DomainException):
    """Raised when a task cannot be deleted in its current status."""

    def __init__(self, task_id: str, status: str | None) -> None:
        self.task_id = task_id
        self.status = status
        super().__init__(
            f"Task {task_id} cannot be deleted in status '{status}'. "
            "Only tasks with status 'ready' or 'failed' can be deleted."
        )


class UpstreamError(DomainException):
    """Raised when the video API answers with a non-success status."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Upstream request failed with status {status_code}: {body}")


class MalformedUpstreamResponse(DomainException):
    """Raised when the video API answers with a body that is not a JSON object."""

    def __init__(self, body: str, reason: str = "Response is not valid JSON") -> None:
        self.body = body
        self.reason = reason
        super().__init__(f"Could not parse upstream response ({reason}): {body}")


class MissingCredentialError(DomainException):
    """Raised at startup when the API key is not configured."""

    def __init__(self, variable: str) -> None:
        self.variable = variable
        super().__init__(f"{variable} environment variable is required.")
