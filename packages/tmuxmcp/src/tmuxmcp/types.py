"""Type definitions for tmux-mcp.

Tool inputs are validated pydantic models, commands are argument lists, and
replies are lists of text blocks in the MCP content shape.
"""

from dataclasses import dataclass, field
from typing import Literal, NamedTuple, TypeAlias, TypedDict

# Split direction for new panes
SplitDirection = Literal["horizontal", "vertical"]

# Connection method when registering a remote MCP server
Transport = Literal["stdio", "sse", "http"]

# Transports that need a URL instead of a command
NETWORK_TRANSPORTS = frozenset(["sse", "http"])

# Command line as an argument array - never shell-parsed
CommandLine: TypeAlias = list[str]


class TextContent(TypedDict):
    """Single text block of a tool reply."""

    type: Literal["text"]
    text: str


class CommandOutput(NamedTuple):
    """Captured output of a finished subprocess.

    Attributes:
        stdout: Standard output text.
        stderr: Standard error text.
    """

    stdout: str
    stderr: str


@dataclass
class CallResult:
    """Reply to a tool call.

    Attributes:
        content: Text blocks returned to the caller.
        is_error: True when the call failed. Still a normal reply, not a fault;
            the text of a failed reply always starts with "Error:".
    """

    content: list[TextContent] = field(default_factory=list)
    is_error: bool = False

    @classmethod
    def from_text(cls, text: str) -> "CallResult":
        """Build a successful single-block reply."""
        return cls(content=[{"type": "text", "text": text}])

    @classmethod
    def from_error(cls, text: str) -> "CallResult":
        """Build a failed single-block reply."""
        return cls(content=[{"type": "text", "text": text}], is_error=True)

    @property
    def text(self) -> str:
        """All text blocks joined by newlines."""
        return "\n".join(block["text"] for block in self.content)
