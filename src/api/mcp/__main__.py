"""Command-line entry point: ``python -m src.api.mcp``."""

import asyncio
import sys

from pydantic import ValidationError

from src.api.mcp.server import run_mcp_server
from src.commons.settings.loader import get_settings
from src.commons.telemetry import configure_logging, get_logger
from src.domain.exceptions import MissingCredentialError

logger = get_logger(__name__)


def main() -> None:
    """Validate configuration and serve tools over stdio until the host exits.

    Exits with status 1 before any MCP traffic when the API key is missing
    or the configuration cannot be loaded.
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        sys.stderr.write(f"Error: invalid configuration: {e}\n")
        sys.exit(1)

    configure_logging(
        level=settings.telemetry.log_level,
        format_type=settings.telemetry.log_format,
        logger_name="src",
        enabled=settings.telemetry.enabled,
    )

    try:
        settings.require_api_key()
    except MissingCredentialError as e:
        # Written directly so the diagnostic survives silenced logging
        sys.stderr.write(f"Error: {e}\n")
        sys.exit(1)

    try:
        asyncio.run(run_mcp_server(settings))
    except KeyboardInterrupt:
        logger.info("MCP server stopped")
    except Exception:
        logger.exception("Fatal error running server")
        sys.exit(1)


if __name__ == "__main__":
    main()
