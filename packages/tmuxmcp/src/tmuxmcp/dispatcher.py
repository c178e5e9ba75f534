"""Tool call dispatcher.

Looks up a tool, validates its fields, builds one command line, runs it once
and formats the reply. Every failure becomes an "Error: ..." reply instead of
an exception.

PUBLIC API:
  - Dispatcher: Routes tool calls to their handlers
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from . import remote, tmux, vault
from .config import ShimConfig
from .errors import ShimError, string_error_response
from .executor import Runner, run_command
from .registry import (
    McpAddInput,
    NewWindowInput,
    OpenEditorInput,
    OpenNoteInput,
    SendKeysInput,
    SplitWindowInput,
    ToolDescriptor,
    ToolInput,
    get_tool,
    list_tools,
)
from .types import CallResult

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Dispatcher:
    """Routes tool calls to command builders and the subprocess runner.

    Holds no per-call state, so concurrent calls do not interfere.

    Attributes:
        config: Process-wide configuration.
        runner: Runs one argument list and returns its output.
    """

    def __init__(
        self,
        config: ShimConfig,
        runner: Runner = run_command,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.config = config
        self.runner = runner
        self._clock = clock or _utcnow
        self._handlers: dict[str, Callable[[Any], str]] = {
            "tmux_split_window": self._split_window,
            "tmux_new_window": self._new_window,
            "tmux_list_sessions": self._list_sessions,
            "tmux_list_windows": self._list_windows,
            "tmux_send_keys": self._send_keys,
            "tmux_open_nvim": self._open_editor,
            "tmux_open_obsidian_note": self._open_note,
            "claude_mcp_add": self._mcp_add,
            "claude_mcp_list": self._mcp_list,
        }

    @property
    def handled_tools(self) -> frozenset[str]:
        """Names of all tools with a handler."""
        return frozenset(self._handlers)

    def list_tools(self) -> list[ToolDescriptor]:
        """Enumerate available tools."""
        return list_tools()

    def handle(self, tool_name: str, fields: Optional[dict[str, Any]] = None) -> CallResult:
        """Handle one tool call.

        Args:
            tool_name: Name of the tool to call.
            fields: Arguments as supplied by the caller.

        Returns:
            CallResult with the reply text, or a single "Error: ..." block.
        """
        try:
            descriptor = get_tool(tool_name)
            params = descriptor.validate(fields)
            text = self._handlers[descriptor.name](params)
        except ShimError as e:
            logger.warning(f"{tool_name} failed: {e}")
            return CallResult.from_error(string_error_response(str(e)))
        except Exception as e:
            logger.exception(f"{tool_name} raised unexpectedly")
            return CallResult.from_error(string_error_response(str(e)))

        return CallResult.from_text(text)

    def _split_window(self, params: SplitWindowInput) -> str:
        self.runner(tmux.split_window(self.config, params.direction, params.command, params.directory))

        text = f"Split window {params.direction}ly"
        if params.command:
            text += f" and ran: {params.command}"
        return text

    def _new_window(self, params: NewWindowInput) -> str:
        self.runner(tmux.new_window(self.config, params.name, params.command, params.directory))
        text = "Created new window"
        if params.name:
            text += f" '{params.name}'"
        return text

    def _list_sessions(self, params: ToolInput) -> str:
        output = self.runner(tmux.list_sessions(self.config))
        return f"Tmux sessions:\n{output.stdout}"

    def _list_windows(self, params: ToolInput) -> str:
        output = self.runner(tmux.list_windows(self.config))
        return f"Current session windows:\n{output.stdout}"

    def _send_keys(self, params: SendKeysInput) -> str:
        self.runner(tmux.send_keys(self.config, params.keys, params.pane, params.enter))

        text = f"Sent keys: {params.keys}"
        if params.enter is not False:
            text += " (with Enter)"
        return text

    def _open_editor(self, params: OpenEditorInput) -> str:
        self.runner(tmux.open_editor(self.config, params.file, params.directory, params.split))

        file_part = f" with file: {params.file}" if params.file else ""
        return f"Opened {self.config.editor}{file_part} in new pane"

    def _open_note(self, params: OpenNoteInput) -> str:
        # Without a vault, list the choices instead of opening anything
        if not params.vault:
            output = self.runner(vault.list_vaults_command(self.config))
            return f"Available vaults:\n{output.stdout}"

        note_name, path = vault.note_path(self.config, params.vault, params.note_name, self._clock())
        vault_dir = vault.vault_path(self.config, params.vault)
        self.runner(tmux.open_note(self.config, vault_dir, path, params.split))
        return f'Opened new Obsidian note "{note_name}" in vault "{params.vault}"'

    def _mcp_add(self, params: McpAddInput) -> str:
        cmd = remote.mcp_add(
            self.config,
            params.name,
            command=params.command,
            args=params.args,
            env=params.env,
            transport=params.transport,
            url=params.url,
        )
        output = self.runner(cmd)

        text = f'Added MCP server "{params.name}"\n{output.stdout}'
        if output.stderr:
            text += f"\nErrors: {output.stderr}"
        return text

    def _mcp_list(self, params: ToolInput) -> str:
        output = self.runner(remote.mcp_list(self.config))
        return f"Configured MCP servers:\n{output.stdout}"
