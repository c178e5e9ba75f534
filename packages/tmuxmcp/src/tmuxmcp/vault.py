"""Note vault helpers.

A vault is a directory under the configured vault root. Notes are created by
the editor when it saves, so nothing here writes to disk.

PUBLIC API:
  - vault_path: Directory of a named vault
  - default_note_name: Timestamp-derived note filename
  - note_path: Full path of a note inside a vault
  - list_vaults_command: Read-only listing of the vault root
"""

from datetime import datetime
from pathlib import Path
from typing import Optional

from .config import ShimConfig
from .types import CommandLine


def vault_path(config: ShimConfig, vault: str) -> Path:
    """Get the directory of a named vault."""
    return config.vault_root / vault


def default_note_name(config: ShimConfig, now: datetime) -> str:
    """Build a note filename from a timestamp, e.g. "2026-10-18_09-30-00.md"."""
    return now.strftime(config.note_timestamp_format) + config.note_suffix


def note_path(config: ShimConfig, vault: str, note_name: Optional[str], now: datetime) -> tuple[str, Path]:
    """Resolve the note filename and its full path.

    Args:
        config: Active configuration.
        vault: Vault name.
        note_name: Caller-given filename, used as-is. None or empty generates one.
        now: Timestamp used for generated names.

    Returns:
        Tuple of (note filename, full note path).
    """
    name = note_name or default_note_name(config, now)
    return name, vault_path(config, vault) / name


def list_vaults_command(config: ShimConfig) -> CommandLine:
    """Build the read-only vault listing command."""
    return ["ls", str(config.vault_root)]
