"""Pane and window commands - split, new window, send keys.

PUBLIC API:
  - tmux_split_window: Split current window into panes
  - tmux_new_window: Create a new window
  - tmux_send_keys: Send keys to a pane
"""

from typing import Optional

from ..app import app
from ..registry import TOOLS
from ..types import SplitDirection


@app.command(
    fastmcp={
        "type": "tool",
        "tags": {"tmux", "pane"},
        "description": TOOLS["tmux_split_window"].description,
    },
)
def tmux_split_window(
    state, direction: SplitDirection, command: Optional[str] = None, directory: Optional[str] = None
) -> str:
    """Split the current tmux window into panes.

    Args:
        state: Application state.
        direction: "horizontal" (side by side) or "vertical" (stacked).
        command: Command to run in the new pane.
        directory: Directory to start in.

    Returns:
        Confirmation text, or "Error: ..." on failure.
    """
    return state.call("tmux_split_window", direction=direction, command=command, directory=directory)


@app.command(
    fastmcp={
        "type": "tool",
        "tags": {"tmux", "window"},
        "description": TOOLS["tmux_new_window"].description,
    },
)
def tmux_new_window(
    state, name: Optional[str] = None, command: Optional[str] = None, directory: Optional[str] = None
) -> str:
    """Create a new tmux window.

    Args:
        state: Application state.
        name: Name for the new window.
        command: Command to run in the new window.
        directory: Directory to start in.
    """
    return state.call("tmux_new_window", name=name, command=command, directory=directory)


@app.command(
    fastmcp={
        "type": "tool",
        "tags": {"tmux", "input"},
        "description": TOOLS["tmux_send_keys"].description,
    },
)
def tmux_send_keys(state, keys: str, pane: Optional[str] = None, enter: Optional[bool] = True) -> str:
    """Send keys to a tmux pane.

    Args:
        state: Application state.
        keys: Keys to send, delivered as one argument.
        pane: Target pane. Defaults to the current pane.
        enter: Whether to press Enter after the keys. None counts as not given.

    Examples:
        tmux_send_keys("ls -la")                  # Type and run
        tmux_send_keys("C-c", enter=False)        # Just Ctrl+C
        tmux_send_keys(":wq", pane="%3")          # Into a specific pane
    """
    return state.call("tmux_send_keys", keys=keys, pane=pane, enter=enter)
