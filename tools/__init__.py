# =============================================================================
# tools/__init__.py
# =============================================================================
# The MCP layer: translates between the MCP protocol (via FastMCP) and the
# forwarding core in core/.
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT talk HTTP (that's core/dispatcher.py)
#   - They do NOT interpret API responses (that's core/classifier.py)
#   - They do NOT define tools one by one (that's the data in core/catalog.py)
# =============================================================================
