# =============================================================================
# core/__init__.py
# =============================================================================
# The forwarding core of the AIFAIS MCP server:
#
#   catalog.py     → which tools exist and where they point
#   dispatcher.py  → HTTP POST with retry/backoff
#   classifier.py  → HTTP status/body → Verdict
#   router.py      → catalog lookup → dispatch → classify → ToolResult
#   config.py, logger.py, errors.py, models.py → supporting pieces
#
# Nothing in this package imports FastMCP.  The MCP wiring lives in tools/.
# =============================================================================
