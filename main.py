# =============================================================================
# main.py  —  Entry Point for the AIFAIS MCP Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py          (or the installed `aifais-mcp-server`)
#
# WHAT HAPPENS:
#   1. Loads .env into the environment (AIFAIS_API_BASE, DEBUG, ...)
#   2. Reads Settings and builds the stderr logger
#   3. Builds the FastMCP server (tools/mcp_server.py)
#   4. Serves MCP over stdio until the agent disconnects
#
# If anything in steps 2-4 fails at startup, the error is logged and the
# process exits with status 1.  Failures during a tool call never reach
# this far: they come back to the agent as error results.
# =============================================================================

import sys

from dotenv import load_dotenv

from core.config import load_settings
from core.logger import build_logger
from tools.mcp_server import SERVER_VERSION, create_server


def main() -> None:
    load_dotenv()
    logger = build_logger()

    try:
        settings = load_settings()
        logger = build_logger(settings.debug)
        mcp = create_server(settings, logger)
        logger.info(
            f"AIFAIS MCP Server v{SERVER_VERSION} running on stdio "
            f"(Base API: {settings.api_base})"
        )
        mcp.run()
    except Exception as e:
        logger.error(f"Fatal error in main(): {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
