"""Editor commands - open files and vault notes in a new pane.

PUBLIC API:
  - tmux_open_nvim: Open the editor in a new pane
  - tmux_open_obsidian_note: Open a note from a vault in a new pane
"""

from typing import Optional

from ..app import app
from ..registry import TOOLS
from ..types import SplitDirection


@app.command(
    fastmcp={
        "type": "tool",
        "tags": {"tmux", "editor"},
        "description": TOOLS["tmux_open_nvim"].description,
    },
)
def tmux_open_nvim(
    state, file: Optional[str] = None, directory: Optional[str] = None, split: SplitDirection = "horizontal"
) -> str:
    """Open the editor in a new pane.

    Args:
        state: Application state.
        file: File to open.
        directory: Directory to start the editor in.
        split: How to split for the new pane.
    """
    return state.call("tmux_open_nvim", file=file, directory=directory, split=split)


@app.command(
    fastmcp={
        "type": "tool",
        "tags": {"tmux", "editor", "notes"},
        "description": TOOLS["tmux_open_obsidian_note"].description,
    },
)
def tmux_open_obsidian_note(
    state, vault: Optional[str] = None, note_name: Optional[str] = None, split: SplitDirection = "horizontal"
) -> str:
    """Open a new note in the editor, inside a vault.

    Without a vault, lists the available vaults and opens nothing.

    Args:
        state: Application state.
        vault: Vault name.
        note_name: Note filename. Defaults to a UTC timestamp like
            "2026-10-18_09-30-00.md".
        split: How to split for the new pane.
    """
    return state.call("tmux_open_obsidian_note", vault=vault, note_name=note_name, split=split)
