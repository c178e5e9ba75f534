"""Subprocess execution for tool calls.

PUBLIC API:
  - Runner: Callable signature shared by run_command and test doubles
  - run_command: Run an argument list and capture its output
"""

import logging
import shlex
import subprocess
from typing import Callable, Sequence, TypeAlias

from .errors import CommandError
from .types import CommandOutput

logger = logging.getLogger(__name__)

Runner: TypeAlias = Callable[[Sequence[str]], CommandOutput]


def run_command(argv: Sequence[str]) -> CommandOutput:
    """Run command and wait for it to exit.

    No shell is involved, so each element reaches the program as exactly one
    argument. There is no timeout.

    Args:
        argv: Program followed by its arguments.

    Returns:
        CommandOutput with captured stdout and stderr.

    Raises:
        CommandError: If the program is missing, cannot be spawned, or exits
            with a non-zero status.
    """
    cmd = list(argv)
    logger.debug(f"Running: {shlex.join(cmd)}")

    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except FileNotFoundError as e:
        raise CommandError(f"Command not found: {cmd[0]}") from e
    except OSError as e:
        raise CommandError(f"Failed to run {cmd[0]}: {e}") from e

    if result.returncode != 0:
        message = f"Command failed: {shlex.join(cmd)}"
        if result.stderr.strip():
            message += f"\n{result.stderr.strip()}"
        raise CommandError(message, returncode=result.returncode, stderr=result.stderr)

    return CommandOutput(result.stdout, result.stderr)
