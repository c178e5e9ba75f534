"""Builders for the MCP server registration CLI (claude mcp ...).

PUBLIC API:
  - mcp_add: Register an MCP server
  - mcp_list: List registered MCP servers
"""

from typing import Optional

from .config import ShimConfig
from .errors import MissingFieldError
from .types import NETWORK_TRANSPORTS, CommandLine, Transport


def mcp_add(
    config: ShimConfig,
    name: str,
    command: Optional[str] = None,
    args: Optional[list[str]] = None,
    env: Optional[dict[str, str]] = None,
    transport: Optional[Transport] = "stdio",
    url: Optional[str] = None,
) -> CommandLine:
    """Build command registering an MCP server.

    Network transports (sse, http) need a URL. The local stdio transport needs
    a command, which is placed after "--" so its arguments are not read as
    CLI options.

    Args:
        config: Active configuration.
        name: Server name.
        command: Program to run for stdio servers.
        args: Arguments for the program.
        env: Environment variables, passed as repeated --env KEY=VALUE.
        transport: "stdio", "sse" or "http". None means stdio.
        url: Endpoint for network servers.

    Raises:
        MissingFieldError: If the transport's command or URL is absent.
    """
    cmd = [config.mcp_cli, "mcp", "add"]

    if transport and transport != "stdio":
        cmd.extend(["--transport", transport])

    for key, value in (env or {}).items():
        cmd.extend(["--env", f"{key}={value}"])

    cmd.append(name)

    if transport in NETWORK_TRANSPORTS:
        if not url:
            raise MissingFieldError("URL is required for sse/http transport")
        cmd.append(url)
    else:
        if not command:
            raise MissingFieldError("Command is required for stdio transport")
        cmd.extend(["--", command])
        cmd.extend(args or [])

    return cmd


def mcp_list(config: ShimConfig) -> CommandLine:
    """Build command listing registered MCP servers."""
    return [config.mcp_cli, "mcp", "list"]
