"""Configuration management for tmux-mcp.

Builds one immutable ShimConfig at start-up. Defaults can be overridden by the
[default] table of tmux-mcp.toml in the current or a parent directory.

PUBLIC API:
  - ShimConfig: Process-wide configuration
  - load_config: Build configuration from defaults and tmux-mcp.toml
"""

import logging
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "tmux-mcp.toml"

DEFAULT_VAULT_ROOT = "~/Library/Mobile Documents/iCloud~md~obsidian/Documents"


@dataclass(frozen=True)
class ShimConfig:
    """Process-wide settings passed explicitly to the dispatcher.

    Attributes:
        tmux: tmux executable.
        editor: Editor launched in new panes.
        mcp_cli: CLI used to register and list MCP servers.
        vault_root: Directory holding one subdirectory per note vault.
        note_timestamp_format: strftime format for generated note names.
        note_suffix: Extension appended to generated note names.
    """

    tmux: str = "tmux"
    editor: str = "nvim"
    mcp_cli: str = "claude"
    vault_root: Path = Path(DEFAULT_VAULT_ROOT).expanduser()
    note_timestamp_format: str = "%Y-%m-%d_%H-%M-%S"
    note_suffix: str = ".md"


def _find_config_file() -> Optional[Path]:
    """Find tmux-mcp.toml in current or parent directories."""
    current = Path.cwd()

    for parent in [current] + list(current.parents):
        config_file = parent / CONFIG_FILENAME
        if config_file.exists():
            return config_file

    return None


def _load_raw(path: Path) -> dict:
    """Load raw configuration from file."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e


def load_config(path: Optional[Path] = None) -> ShimConfig:
    """Build configuration from defaults and tmux-mcp.toml.

    Args:
        path: Explicit config file. If None, searches cwd and its parents.

    Returns:
        ShimConfig with file overrides applied.

    Raises:
        ConfigError: If the file is unreadable or has unknown or mistyped keys.
    """
    if path is None:
        path = _find_config_file()

    if path is None:
        return ShimConfig()

    defaults = _load_raw(path).get("default", {})
    if not isinstance(defaults, dict):
        raise ConfigError(f"[default] in {path} must be a table")

    known = {f.name for f in fields(ShimConfig)}
    unknown = sorted(set(defaults) - known)
    if unknown:
        raise ConfigError(f"Unknown keys in {path}: {', '.join(unknown)}")

    overrides = {}
    for key, value in defaults.items():
        if not isinstance(value, str):
            raise ConfigError(f"{key} in {path} must be a string")
        overrides[key] = Path(value).expanduser() if key == "vault_root" else value

    logger.info(f"Loaded configuration from {path}")
    return replace(ShimConfig(), **overrides)
