"""Tests for tmux and MCP CLI command builders."""

from __future__ import annotations

from pathlib import Path

import pytest
from tmuxmcp import remote, tmux
from tmuxmcp.config import ShimConfig
from tmuxmcp.errors import MissingFieldError

WHITESPACE_VALUES = ["my project", "a\tb", "two  spaces", " lead", "quote \"inside\" 'it'"]


@pytest.mark.unit
def test_split_window_direction_flags(config: ShimConfig) -> None:
    assert tmux.split_window(config, "horizontal") == ["tmux", "split-window", "-h"]
    assert tmux.split_window(config, "vertical") == ["tmux", "split-window", "-v"]


@pytest.mark.unit
def test_split_window_directory_then_command(config: ShimConfig) -> None:
    cmd = tmux.split_window(config, "vertical", command="htop", directory="/srv")

    assert cmd == ["tmux", "split-window", "-v", "-c", "/srv", "htop"]


@pytest.mark.unit
def test_new_window_optional_parts(config: ShimConfig) -> None:
    assert tmux.new_window(config) == ["tmux", "new-window"]
    assert tmux.new_window(config, name="logs", command="tail -f app.log", directory="/var/log") == [
        "tmux",
        "new-window",
        "-n",
        "logs",
        "-c",
        "/var/log",
        "tail -f app.log",
    ]


@pytest.mark.unit
def test_listing_formats(config: ShimConfig) -> None:
    assert tmux.list_sessions(config) == [
        "tmux",
        "list-sessions",
        "-F",
        "#{session_name}: #{session_windows} windows",
    ]
    assert tmux.list_windows(config) == [
        "tmux",
        "list-windows",
        "-F",
        "#{window_index}: #{window_name} (#{window_panes} panes)",
    ]


@pytest.mark.unit
@pytest.mark.parametrize(("enter", "expect_enter"), [(True, True), (None, True), (False, False)])
def test_send_keys_enter_default(config: ShimConfig, enter: bool | None, expect_enter: bool) -> None:
    cmd = tmux.send_keys(config, "ls -la", enter=enter)

    assert cmd[:3] == ["tmux", "send-keys", "ls -la"]
    assert (cmd[-1] == "Enter") is expect_enter


@pytest.mark.unit
def test_send_keys_target_pane(config: ShimConfig) -> None:
    assert tmux.send_keys(config, "q", pane="%3") == ["tmux", "send-keys", "-t", "%3", "q", "Enter"]


@pytest.mark.unit
def test_open_editor_defaults_to_horizontal(config: ShimConfig) -> None:
    assert tmux.open_editor(config) == ["tmux", "split-window", "-h", "nvim"]
    assert tmux.open_editor(config, split=None)[2] == "-h"
    assert tmux.open_editor(config, split="vertical")[2] == "-v"


@pytest.mark.unit
def test_open_editor_quotes_file_for_inner_shell(config: ShimConfig) -> None:
    cmd = tmux.open_editor(config, file="notes/my file.md", directory="/home/me")

    assert cmd == ["tmux", "split-window", "-h", "-c", "/home/me", "nvim 'notes/my file.md'"]


@pytest.mark.unit
def test_open_note_runs_inside_vault(config: ShimConfig) -> None:
    vault_dir = Path("/vaults/Work Notes")
    cmd = tmux.open_note(config, vault_dir, vault_dir / "today.md", split="vertical")

    assert cmd == [
        "tmux",
        "split-window",
        "-v",
        "-c",
        "/vaults/Work Notes",
        "nvim '/vaults/Work Notes/today.md'",
    ]


@pytest.mark.unit
def test_configured_binaries_are_used(vault_root: Path) -> None:
    config = ShimConfig(tmux="/opt/bin/tmux", editor="vim", mcp_cli="claude-dev", vault_root=vault_root)

    assert tmux.list_windows(config)[0] == "/opt/bin/tmux"
    assert tmux.open_editor(config)[-1] == "vim"
    assert remote.mcp_list(config) == ["claude-dev", "mcp", "list"]


@pytest.mark.unit
@pytest.mark.parametrize("value", WHITESPACE_VALUES)
def test_whitespace_never_splits_arguments(config: ShimConfig, value: str) -> None:
    cmds = [
        tmux.split_window(config, "horizontal", command=value, directory=value),
        tmux.new_window(config, name=value, command=value, directory=value),
        tmux.send_keys(config, value, pane=value),
        remote.mcp_add(config, value, command=value, args=[value, value], env={"KEY": value}),
        remote.mcp_add(config, value, transport="http", url=value),
    ]

    for cmd in cmds:
        assert value in cmd or f"KEY={value}" in cmd
    assert cmds[2].count(value) == 2
    assert cmds[3].count(value) == 4


@pytest.mark.unit
def test_mcp_add_stdio_order(config: ShimConfig) -> None:
    cmd = remote.mcp_add(
        config,
        "fs",
        command="npx",
        args=["-y", "server-filesystem"],
        env={"A": "1", "B": "2"},
    )

    assert cmd == [
        "claude", "mcp", "add",
        "--env", "A=1", "--env", "B=2",
        "fs", "--", "npx", "-y", "server-filesystem",
    ]


@pytest.mark.unit
@pytest.mark.parametrize("transport", ["sse", "http"])
def test_mcp_add_network_transport(config: ShimConfig, transport: str) -> None:
    cmd = remote.mcp_add(config, "remote", transport=transport, url="https://example.com/mcp")

    assert cmd == ["claude", "mcp", "add", "--transport", transport, "remote", "https://example.com/mcp"]


@pytest.mark.unit
@pytest.mark.parametrize("transport", ["sse", "http"])
def test_mcp_add_network_transport_requires_url(config: ShimConfig, transport: str) -> None:
    with pytest.raises(MissingFieldError, match="URL is required for sse/http transport"):
        remote.mcp_add(config, "remote", command="ignored", transport=transport)


@pytest.mark.unit
@pytest.mark.parametrize("transport", ["stdio", None])
def test_mcp_add_stdio_requires_command(config: ShimConfig, transport: str | None) -> None:
    with pytest.raises(MissingFieldError, match="Command is required for stdio transport"):
        remote.mcp_add(config, "local", url="https://example.com", transport=transport)
