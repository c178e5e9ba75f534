"""Shared error types and error formatting for tmux-mcp.

Every failure a tool call can hit is a ShimError subclass. The dispatcher
turns them into plain "Error: ..." replies so nothing crosses the MCP boundary
as an exception.

PUBLIC API:
  - ShimError: Base exception for all tmux-mcp failures
  - UnknownToolError: Tool name has no descriptor
  - InvalidArgumentsError: Fields do not match the tool's input shape
  - MissingFieldError: Required field absent
  - CommandError: Subprocess could not run or exited non-zero
  - ConfigError: Configuration file is malformed
  - string_error_response: Format a message as an error reply
"""

from typing import Optional


class ShimError(Exception):
    """Base exception for all tmux-mcp operations."""

    pass


class UnknownToolError(ShimError):
    """Raised when a call names a tool that is not registered."""

    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class InvalidArgumentsError(ShimError):
    """Raised when call fields fail validation against the input shape."""

    pass


class MissingFieldError(InvalidArgumentsError):
    """Raised when a required field is absent."""

    pass


class CommandError(ShimError):
    """Raised when a subprocess cannot be spawned or exits non-zero.

    Attributes:
        returncode: Exit status, or None if the process never started.
        stderr: Captured standard error, if any.
    """

    def __init__(self, message: str, returncode: Optional[int] = None, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class ConfigError(ShimError):
    """Raised when tmux-mcp.toml cannot be loaded."""

    pass


def string_error_response(message: str) -> str:
    """Create error response text.

    Args:
        message: The error message to display

    Returns:
        Formatted error string
    """
    return f"Error: {message}"
