"""Ghost MCP Server package.

This package contains the FastMCP server, the Ghost Admin and Content API
clients, and the tools that expose them to MCP clients.
"""

# Submodules are not re-exported so that importing the package does not load
# configuration from the environment. Import ``server`` or ``client`` directly.

__all__: list[str] = []
