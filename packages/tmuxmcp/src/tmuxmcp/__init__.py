"""tmux and MCP-registration tools over MCP.

Command-dispatch shim that turns typed tool calls into tmux and claude CLI
invocations. Built on ReplKit2 for dual REPL/MCP functionality.

PUBLIC API:
  - app: ReplKit2 application instance with tmux-mcp commands (tmuxmcp.app)
  - Dispatcher: Routes tool calls to builders and the subprocess runner
  - ShimConfig: Process-wide configuration
  - load_config: Build configuration from defaults and tmux-mcp.toml
"""

from .config import ShimConfig, load_config
from .dispatcher import Dispatcher

__version__ = "0.1.0"
__all__ = ["Dispatcher", "ShimConfig", "load_config"]
