"""Shared pytest fixtures and test-run configuration."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

import pytest
from tmuxmcp.config import ShimConfig
from tmuxmcp.dispatcher import Dispatcher
from tmuxmcp.types import CommandOutput

FIXED_NOW = datetime(2026, 10, 18, 9, 30, 5, tzinfo=timezone.utc)


def pytest_addoption(parser: pytest.Parser) -> None:
    """Add custom pytest options for integration test execution."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run tests marked as integration (needs a tmux server).",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip integration tests unless explicitly enabled."""
    run_integration = config.getoption("--run-integration")
    env_enabled = os.getenv("RUN_INTEGRATION_TESTS") == "1"
    if run_integration or env_enabled:
        return

    skip_marker = pytest.mark.skip(
        reason=(
            "Integration tests are disabled by default. "
            "Use --run-integration or set RUN_INTEGRATION_TESTS=1."
        )
    )
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_marker)


@dataclass
class RecordingRunner:
    """Stands in for run_command and records every argument list."""

    stdout: str = ""
    stderr: str = ""
    error: Exception | None = None
    calls: list[list[str]] = field(default_factory=list)

    def __call__(self, argv: Sequence[str]) -> CommandOutput:
        self.calls.append(list(argv))
        if self.error is not None:
            raise self.error
        return CommandOutput(self.stdout, self.stderr)


@pytest.fixture
def vault_root(tmp_path: Path) -> Path:
    root = tmp_path / "vaults"
    root.mkdir()
    return root


@pytest.fixture
def config(vault_root: Path) -> ShimConfig:
    return ShimConfig(vault_root=vault_root)


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def dispatcher(config: ShimConfig, runner: RecordingRunner) -> Dispatcher:
    return Dispatcher(config, runner=runner, clock=lambda: FIXED_NOW)
