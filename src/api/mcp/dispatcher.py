"""Dispatch of MCP tool calls to their handlers."""

import json
from collections.abc import Mapping
from typing import Any

from mcp.types import CallToolResult, TextContent
from pydantic import ValidationError

from src.api.mcp.registry import tool_names
from src.api.mcp.tools import TOOL_BINDINGS, ToolBinding, ToolServices
from src.commons.telemetry import LogContext, get_logger
from src.domain.exceptions import DomainException, InvalidInvocation, UnknownTool

logger = get_logger(__name__)


def success_result(payload: dict[str, Any]) -> CallToolResult:
    """Wrap a re-shaped tool result in a success envelope."""
    text = json.dumps(payload, indent=2, ensure_ascii=False, default=str)
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=False)


def error_result(message: str) -> CallToolResult:
    """Wrap a failure message in an error-flagged envelope."""
    return CallToolResult(content=[TextContent(type="text", text=message)], isError=True)


def _describe_validation_error(error: ValidationError) -> str:
    problems = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "arguments"
        problems.append(f"{location}: {detail['msg']}")
    return "; ".join(problems)


class ToolDispatcher:
    """Executes one tool invocation end to end.

    Every failure is converted to an error-flagged result at this boundary;
    callers never see a raised exception.
    """

    def __init__(
        self,
        services: ToolServices,
        bindings: Mapping[str, ToolBinding] | None = None,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            services: Services handed to every handler.
            bindings: Tool name to handler mapping. Defaults to all tools.

        Raises:
            ValueError: If the bindings do not cover exactly the registry.
        """
        self._services = services
        self._bindings = dict(bindings if bindings is not None else TOOL_BINDINGS)

        registered = set(tool_names())
        bound = set(self._bindings)
        if registered != bound:
            raise ValueError(
                "Tool registry and handlers disagree: "
                f"unhandled={sorted(registered - bound)}, "
                f"unregistered={sorted(bound - registered)}"
            )

    async def dispatch(
        self,
        name: str,
        arguments: Mapping[str, Any] | None,
    ) -> CallToolResult:
        """Run a tool and return its result envelope.

        Args:
            name: Tool name.
            arguments: Tool arguments as sent by the host.

        Returns:
            Success envelope with the JSON result, or an error-flagged
            envelope with a human-readable message.
        """
        with LogContext(new_correlation_id=True, tool=name):
            logger.info("Tool call received")
            try:
                payload = await self._invoke(name, arguments)
            except DomainException as e:
                logger.warning(
                    f"Tool call failed: {e}",
                    extra={"error_type": type(e).__name__},
                )
                return error_result(str(e))
            except Exception as e:
                logger.exception(f"Error calling tool {name}: {e}")
                return error_result(f"Error: {e}")

            logger.info("Tool call succeeded")
            return success_result(payload)

    async def _invoke(
        self,
        name: str,
        arguments: Mapping[str, Any] | None,
    ) -> dict[str, Any]:
        binding = self._bindings.get(name)
        if binding is None:
            raise UnknownTool(name)
        if arguments is None:
            raise InvalidInvocation(name, "No arguments provided")

        try:
            request = binding.request_model.model_validate(dict(arguments))
        except ValidationError as e:
            raise InvalidInvocation(name, _describe_validation_error(e)) from e

        response = await binding.handler(self._services, request)
        return response.to_payload()
