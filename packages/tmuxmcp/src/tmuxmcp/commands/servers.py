"""MCP server registration commands.

PUBLIC API:
  - claude_mcp_add: Register an MCP server with the claude CLI
  - claude_mcp_list: List registered MCP servers
"""

from typing import Optional

from ..app import app
from ..registry import TOOLS
from ..types import Transport


@app.command(
    fastmcp={
        "type": "tool",
        "tags": {"mcp", "config"},
        "description": TOOLS["claude_mcp_add"].description,
    },
)
def claude_mcp_add(
    state,
    name: str,
    command: Optional[str] = None,
    args: Optional[list[str]] = None,
    env: Optional[dict[str, str]] = None,
    transport: Transport = "stdio",
    url: Optional[str] = None,
) -> str:
    """Register an MCP server.

    stdio servers need a command; sse and http servers need a URL.

    Args:
        state: Application state.
        name: Name for the MCP server.
        command: Program that runs the server (stdio only).
        args: Arguments for the program.
        env: Environment variables for the server.
        transport: "stdio", "sse" or "http".
        url: Server endpoint (sse/http only).

    Examples:
        claude_mcp_add("fs", command="npx", args=["-y", "@modelcontextprotocol/server-filesystem", "."])
        claude_mcp_add("remote", transport="sse", url="https://example.com/sse")
    """
    return state.call(
        "claude_mcp_add", name=name, command=command, args=args, env=env, transport=transport, url=url
    )


@app.command(
    fastmcp={"type": "tool", "tags": {"mcp", "config"}, "description": TOOLS["claude_mcp_list"].description},
)
def claude_mcp_list(state) -> str:
    """List all configured MCP servers."""
    return state.call("claude_mcp_list")
