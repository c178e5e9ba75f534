"""tmux command builders.

Pure functions turning validated tool input into tmux argument lists. Nothing
here runs a process.

PUBLIC API:
  - split_flag: Map a split direction to its tmux flag
  - split_window: Split the current window
  - new_window: Create a window
  - list_sessions: List sessions with a summary format
  - list_windows: List windows of the current session
  - send_keys: Send keys to a pane
  - open_editor: Split and start the editor
  - open_note: Split inside a vault and edit a note
"""

import shlex
from pathlib import Path
from typing import Optional

from ..config import ShimConfig
from ..types import CommandLine, SplitDirection

SESSION_FORMAT = "#{session_name}: #{session_windows} windows"
WINDOW_FORMAT = "#{window_index}: #{window_name} (#{window_panes} panes)"


def split_flag(direction: Optional[SplitDirection]) -> str:
    """Map a split direction to its tmux flag.

    Anything other than "vertical" splits horizontally, which is also the
    default when no direction is given.
    """
    return "-v" if direction == "vertical" else "-h"


def split_window(
    config: ShimConfig,
    direction: SplitDirection,
    command: Optional[str] = None,
    directory: Optional[str] = None,
) -> CommandLine:
    """Build split-window command.

    Args:
        config: Active configuration.
        direction: "horizontal" (-h) or "vertical" (-v).
        command: Shell command to run in the new pane.
        directory: Start directory for the new pane.
    """
    args = [config.tmux, "split-window", split_flag(direction)]
    if directory:
        args.extend(["-c", directory])
    if command:
        args.append(command)
    return args


def new_window(
    config: ShimConfig,
    name: Optional[str] = None,
    command: Optional[str] = None,
    directory: Optional[str] = None,
) -> CommandLine:
    """Build new-window command."""
    args = [config.tmux, "new-window"]
    if name:
        args.extend(["-n", name])
    if directory:
        args.extend(["-c", directory])
    if command:
        args.append(command)
    return args


def list_sessions(config: ShimConfig) -> CommandLine:
    """Build list-sessions command."""
    return [config.tmux, "list-sessions", "-F", SESSION_FORMAT]


def list_windows(config: ShimConfig) -> CommandLine:
    """Build list-windows command for the current session."""
    return [config.tmux, "list-windows", "-F", WINDOW_FORMAT]


def send_keys(config: ShimConfig, keys: str, pane: Optional[str] = None, enter: Optional[bool] = True) -> CommandLine:
    """Build send-keys command.

    Keys travel as one argument. Enter is appended unless enter is exactly
    False; None counts as not given.

    Args:
        config: Active configuration.
        keys: Text or key names to send.
        pane: Target pane, defaults to the current one.
        enter: Whether to press Enter afterwards.
    """
    args = [config.tmux, "send-keys"]
    if pane:
        args.extend(["-t", pane])
    args.append(keys)
    if enter is not False:
        args.append("Enter")
    return args


def editor_command(config: ShimConfig, file: Optional[str | Path] = None) -> str:
    """Build the shell command tmux runs inside the new pane."""
    if file:
        return shlex.join([config.editor, str(file)])
    return shlex.quote(config.editor)


def open_editor(
    config: ShimConfig,
    file: Optional[str] = None,
    directory: Optional[str] = None,
    split: Optional[SplitDirection] = "horizontal",
) -> CommandLine:
    """Build command splitting the window and starting the editor.

    Args:
        config: Active configuration.
        file: File to open, if any.
        directory: Start directory for the new pane.
        split: Split direction, horizontal unless "vertical".
    """
    args = [config.tmux, "split-window", split_flag(split)]
    if directory:
        args.extend(["-c", directory])
    args.append(editor_command(config, file))
    return args


def open_note(
    config: ShimConfig,
    vault_dir: Path,
    note: Path,
    split: Optional[SplitDirection] = "horizontal",
) -> CommandLine:
    """Build command splitting the window inside a vault to edit a note."""
    return [
        config.tmux,
        "split-window",
        split_flag(split),
        "-c",
        str(vault_dir),
        editor_command(config, note),
    ]
