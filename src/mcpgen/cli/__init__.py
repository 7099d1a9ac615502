"""mcpgen command-line interface."""
