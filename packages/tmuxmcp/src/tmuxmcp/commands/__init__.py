"""tmux-mcp commands."""

from .panes import tmux_split_window, tmux_new_window, tmux_send_keys
from .listing import tmux_list_sessions, tmux_list_windows, tools
from .editor import tmux_open_nvim, tmux_open_obsidian_note
from .servers import claude_mcp_add, claude_mcp_list

__all__ = [
    "tmux_split_window",
    "tmux_new_window",
    "tmux_send_keys",
    "tmux_list_sessions",
    "tmux_list_windows",
    "tools",
    "tmux_open_nvim",
    "tmux_open_obsidian_note",
    "claude_mcp_add",
    "claude_mcp_list",
]
