"""MCP stdio server exposing tmux tools to an agent.

Run as: python -m tmux_mcp.mcp_server
"""

import asyncio
import logging

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from tmux_mcp.config import Settings, get_settings
from tmux_mcp.errors import TmuxMcpError
from tmux_mcp.tmux import TmuxClient
from tmux_mcp.tools.definitions import TOOLS
from tmux_mcp.tools.handlers import make_handlers
from tmux_mcp.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


def create_registry(settings: Settings | None = None) -> ToolRegistry:
    """Build the tool registry, failing if definitions and handlers disagree."""
    settings = settings or get_settings()
    client = TmuxClient(settings.tmux_binary, settings.socket_name)
    return ToolRegistry.build(TOOLS, make_handlers(client))


# Built at import so a definition/handler mismatch fails at startup.
registry = create_registry()

# ---------------------------------------------------------------------------
# MCP server setup
# ---------------------------------------------------------------------------
server = Server(get_settings().server_name)


@server.list_tools()
async def list_tools() -> list[Tool]:
    return [
        Tool(
            name=definition.name,
            description=definition.description,
            inputSchema=definition.input_schema,
        )
        for definition in registry.get_definitions()
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict | None) -> list[TextContent]:
    try:
        result = await registry.dispatch(name, arguments)
    except TmuxMcpError as e:
        logger.warning("Tool %s failed: %s", name, e)
        raise
    except Exception:
        logger.exception("Tool %s failed", name)
        raise
    return [TextContent(type="text", text=result)]


async def main() -> None:
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def run() -> None:
    logging.basicConfig(
        level=getattr(logging, get_settings().log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.info("Starting %s", get_settings().server_name)
    asyncio.run(main())


if __name__ == "__main__":
    run()
