"""mcpgen: Harvest, sanitize, and merge MCP server configurations."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
