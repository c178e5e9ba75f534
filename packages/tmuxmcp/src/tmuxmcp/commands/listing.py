"""Read-only listing commands - sessions, windows and the tool list."""

from ..app import app
from ..registry import TOOLS


@app.command(
    fastmcp={"type": "tool", "tags": {"tmux", "session"}, "description": TOOLS["tmux_list_sessions"].description},
)
def tmux_list_sessions(state) -> str:
    """List all tmux sessions with their window counts."""
    return state.call("tmux_list_sessions")


@app.command(
    fastmcp={"type": "tool", "tags": {"tmux", "window"}, "description": TOOLS["tmux_list_windows"].description},
)
def tmux_list_windows(state) -> str:
    """List windows in the current session with their pane counts."""
    return state.call("tmux_list_windows")


@app.command(
    display="table",
    headers=["Tool", "Required", "Optional", "Description"],
    fastmcp={"enabled": False},  # MCP clients discover tools through fastmcp's own listing
)
def tools(state):
    """List available tools with their required and optional fields."""
    rows = []
    for tool in state.dispatcher.list_tools():
        optional = [name for name in tool.fields if name not in tool.required_fields]
        rows.append(
            {
                "Tool": tool.name,
                "Required": ", ".join(tool.required_fields) or "-",
                "Optional": ", ".join(optional) or "-",
                "Description": tool.description,
            }
        )
    return rows
