"""Pure tmux command builders.

PUBLIC API:
  - split_window: Split the current window
  - new_window: Create a window
  - list_sessions: List sessions
  - list_windows: List windows of the current session
  - send_keys: Send keys to a pane
  - open_editor: Split and start the editor
  - open_note: Split inside a vault and edit a note
"""

from .commands import (
    split_window,
    new_window,
    list_sessions,
    list_windows,
    send_keys,
    open_editor,
    open_note,
)

__all__ = [
    "split_window",
    "new_window",
    "list_sessions",
    "list_windows",
    "send_keys",
    "open_editor",
    "open_note",
]
