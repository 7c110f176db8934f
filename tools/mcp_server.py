# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes every enabled catalog entry as an MCP tool and routes calls to
#   core/router.py.
#
# HOW IT WORKS (the flow):
#   1. The agent lists tools → FastMCP returns name, description and the
#      JSON schema from each ToolDefinition
#   2. The agent calls a tool by name with an argument dict
#   3. CatalogTool.run() checks required fields, then calls router.invoke()
#   4. A success result goes back as one text block; an error result
#      (payment required, API error, network error) is raised as ToolError,
#      which FastMCP sends back as an isError result with that same text
#
# ONE TOOL CLASS FOR EVERY TOOL:
#   Input schemas come from core/catalog.py, not from Python signatures, so
#   each catalog entry is registered as a CatalogTool instance instead of an
#   @mcp.tool() function.
# =============================================================================

import logging
from typing import Any, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult as MCPToolResult
from mcp.types import TextContent
from pydantic import Field

from core.catalog import list_tools
from core.config import Settings
from core.dispatcher import RetryingDispatcher
from core.models import ToolDefinition
from core.router import ToolRouter

SERVER_NAME = "aifais-mcp-server"
SERVER_VERSION = "1.4.0"


class CatalogTool(Tool):
    """An MCP tool backed by a ToolDefinition and the shared router."""

    router: Any = Field(default=None, exclude=True)
    required_fields: tuple[str, ...] = Field(default=(), exclude=True)

    @classmethod
    def from_definition(cls, definition: ToolDefinition, router: ToolRouter) -> "CatalogTool":
        return cls(
            name=definition.name,
            description=definition.description,
            parameters=definition.input_schema,
            router=router,
            required_fields=tuple(definition.required_fields),
        )

    async def run(self, arguments: dict[str, Any]) -> MCPToolResult:
        missing = [name for name in self.required_fields if arguments.get(name) is None]
        if missing:
            raise ToolError(f"Error: missing required argument(s): {', '.join(missing)}")

        result = await self.router.invoke(self.name, arguments)
        if result.is_error:
            raise ToolError(result.text)
        return MCPToolResult(
            content=[TextContent(type="text", text=block.text) for block in result.content]
        )


def create_server(
    settings: Settings,
    logger: logging.Logger,
    dispatcher: Optional[RetryingDispatcher] = None,
) -> FastMCP:
    """Build the FastMCP server for the given settings.

    Args:
        settings: Loaded environment settings.
        logger: Logger shared by the dispatcher and router.
        dispatcher: Optional pre-built dispatcher (tests pass one with a
                    mocked HTTP client).
    """
    if dispatcher is None:
        dispatcher = RetryingDispatcher(
            logger,
            max_attempts=settings.max_retries,
            base_delay_ms=settings.retry_base_delay_ms,
            timeout_seconds=settings.timeout_seconds,
        )

    definitions = list_tools(settings.enabled_tools)
    router = ToolRouter(
        dispatcher,
        base_url=settings.api_base,
        logger=logger,
        tools={definition.name: definition for definition in definitions},
    )

    mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION)
    for definition in definitions:
        mcp.add_tool(CatalogTool.from_definition(definition, router))
    logger.debug(f"Registered {len(definitions)} tools: {', '.join(d.name for d in definitions)}")
    return mcp
