"""tmux-mcp ReplKit2 application.

Exposes the tmux and MCP-registration tools as both REPL commands and MCP
tools. Commands are thin wrappers; all work goes through the Dispatcher held
in the application state.
"""

from dataclasses import dataclass, field
from typing import Any

from replkit2 import App

from .config import ShimConfig, load_config
from .dispatcher import Dispatcher


@dataclass
class TmuxMcpState:
    """Application state for tmux-mcp.

    Built once at start-up and never mutated afterwards.

    Attributes:
        config: Configuration loaded from defaults and tmux-mcp.toml.
        dispatcher: Dispatcher bound to that configuration.
    """

    config: ShimConfig = field(default_factory=load_config)
    dispatcher: Dispatcher = field(init=False)

    def __post_init__(self):
        self.dispatcher = Dispatcher(self.config)

    def call(self, tool_name: str, **fields: Any) -> str:
        """Dispatch a tool call and return its reply text.

        Fields left as None are treated as not given.
        """
        given = {name: value for name, value in fields.items() if value is not None}
        return self.dispatcher.handle(tool_name, given).text


# Must be created before command imports for decorator registration
app = App(
    "tmux-mcp",
    TmuxMcpState,
    uri_scheme="tmux-mcp",
    fastmcp={
        "description": "tmux pane, window and MCP server management",
        "tags": {"terminal", "tmux", "mcp"},
    },
)


# Command imports trigger @app.command decorator registration
from .commands import panes  # noqa: E402, F401
from .commands import listing  # noqa: E402, F401
from .commands import editor  # noqa: E402, F401
from .commands import servers  # noqa: E402, F401
