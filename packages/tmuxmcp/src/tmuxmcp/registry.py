"""Tool registry - the fixed set of tools and their input shapes.

Each tool's input is a pydantic model. The model validates every call that
reaches the Dispatcher and gives the per-field shapes shown by the REPL
`tools` command. MCP clients see the schema fastmcp derives from the command
signatures in tmuxmcp.commands, which declare the same fields, enums and
defaults; unknown tool names and mistyped fields sent over MCP are rejected
by fastmcp before the Dispatcher runs.

PUBLIC API:
  - FieldShape: Declared shape of one input field
  - ToolDescriptor: Name, description and input model of one tool
  - TOOLS: All descriptors keyed by tool name
  - list_tools: Enumerate descriptors in declaration order
  - get_tool: Look up a descriptor by name
"""

import types
from dataclasses import dataclass
from typing import Any, Literal, Optional, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.fields import FieldInfo
from pydantic_core import PydanticUndefined

from .errors import InvalidArgumentsError, MissingFieldError, UnknownToolError
from .types import SplitDirection, Transport


class ToolInput(BaseModel):
    """Base for tool inputs. Unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid", frozen=True)


class SplitWindowInput(ToolInput):
    direction: SplitDirection = Field(description="Direction to split the window")
    command: Optional[str] = Field(None, description="Command to run in the new pane (optional)")
    directory: Optional[str] = Field(None, description="Directory to start in (optional)")


class NewWindowInput(ToolInput):
    name: Optional[str] = Field(None, description="Name for the new window (optional)")
    command: Optional[str] = Field(None, description="Command to run in the new window (optional)")
    directory: Optional[str] = Field(None, description="Directory to start in (optional)")


class NoInput(ToolInput):
    pass


class SendKeysInput(ToolInput):
    keys: str = Field(description="Keys to send to the pane")
    pane: Optional[str] = Field(None, description="Target pane (optional, defaults to current)")
    # None means "not given" and still sends Enter
    enter: Optional[bool] = Field(True, description="Whether to send Enter after the keys")


class OpenEditorInput(ToolInput):
    file: Optional[str] = Field(None, description="File path to open in the editor (optional)")
    directory: Optional[str] = Field(None, description="Directory to start the editor in (optional)")
    split: SplitDirection = Field("horizontal", description="How to split for the new pane")


class OpenNoteInput(ToolInput):
    vault: Optional[str] = Field(
        None, description="Vault name (optional, will list available vaults if not provided)"
    )
    note_name: Optional[str] = Field(
        None, description="Name of the new note file (optional, will generate timestamp if not provided)"
    )
    split: SplitDirection = Field("horizontal", description="How to split for the new pane")


class McpAddInput(ToolInput):
    name: str = Field(description="Name for the MCP server")
    command: Optional[str] = Field(None, description="Command to run the MCP server")
    args: Optional[list[str]] = Field(None, description="Arguments for the command (optional)")
    env: Optional[dict[str, str]] = Field(None, description="Environment variables (optional)")
    transport: Transport = Field("stdio", description="Transport type (default: stdio)")
    url: Optional[str] = Field(None, description="URL for remote servers (required for sse/http)")


@dataclass(frozen=True)
class FieldShape:
    """Declared shape of one input field.

    Attributes:
        type: JSON type name ("string", "boolean", "array", "object").
        required: Whether the caller must supply the field.
        description: Human-readable description.
        enum: Allowed values, if the field is enumerated.
        default: Default value, if any.
    """

    type: str
    required: bool
    description: str = ""
    enum: Optional[tuple[str, ...]] = None
    default: Any = None


_JSON_TYPES = {str: "string", bool: "boolean", list: "array", dict: "object", int: "integer"}


def _unwrap_optional(annotation: Any) -> Any:
    """Strip None from Optional[X] / X | None."""
    if get_origin(annotation) in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _field_shape(info: FieldInfo) -> FieldShape:
    """Derive the declared shape of a pydantic field."""
    annotation = _unwrap_optional(info.annotation)
    origin = get_origin(annotation)

    enum = None
    if origin is Literal:
        enum = tuple(get_args(annotation))
        json_type = _JSON_TYPES[type(enum[0])]
    else:
        json_type = _JSON_TYPES[origin or annotation]

    default = None if info.default is PydanticUndefined else info.default
    return FieldShape(
        type=json_type,
        required=info.is_required(),
        description=info.description or "",
        enum=enum,
        default=default,
    )


@dataclass(frozen=True)
class ToolDescriptor:
    """One tool exposed to callers.

    Attributes:
        name: Tool name used in calls.
        description: Human-readable summary.
        input_model: Pydantic model validating the call fields.
    """

    name: str
    description: str
    input_model: type[ToolInput]

    @property
    def fields(self) -> dict[str, FieldShape]:
        """Per-field shapes in declaration order."""
        return {name: _field_shape(info) for name, info in self.input_model.model_fields.items()}

    @property
    def required_fields(self) -> list[str]:
        """Names of fields the caller must supply."""
        return [name for name, shape in self.fields.items() if shape.required]

    def validate(self, fields: Optional[dict[str, Any]]) -> ToolInput:
        """Validate call fields against the input model.

        Args:
            fields: Field mapping as supplied by the caller (None means empty).

        Returns:
            Validated input model instance.

        Raises:
            MissingFieldError: If the only problems are absent required fields.
            InvalidArgumentsError: For any other mismatch.
        """
        try:
            return self.input_model.model_validate(fields or {})
        except ValidationError as e:
            errors = e.errors()
            locations = [".".join(str(part) for part in err["loc"]) for err in errors]

            if all(err["type"] == "missing" for err in errors):
                raise MissingFieldError(
                    f"Missing required field for {self.name}: {', '.join(locations)}"
                ) from e

            details = "; ".join(f"{loc}: {err['msg']}" for loc, err in zip(locations, errors))
            raise InvalidArgumentsError(f"Invalid arguments for {self.name}: {details}") from e


TOOLS: dict[str, ToolDescriptor] = {
    tool.name: tool
    for tool in (
        ToolDescriptor("tmux_split_window", "Split current tmux window into panes", SplitWindowInput),
        ToolDescriptor("tmux_new_window", "Create a new tmux window", NewWindowInput),
        ToolDescriptor("tmux_list_sessions", "List all tmux sessions", NoInput),
        ToolDescriptor("tmux_list_windows", "List windows in current session", NoInput),
        ToolDescriptor("tmux_send_keys", "Send keys to a tmux pane", SendKeysInput),
        ToolDescriptor("tmux_open_nvim", "Open the editor in a new pane with optional file", OpenEditorInput),
        ToolDescriptor(
            "tmux_open_obsidian_note", "Open a new Obsidian note in the editor in a new pane", OpenNoteInput
        ),
        ToolDescriptor("claude_mcp_add", "Add a new MCP server to Claude Code", McpAddInput),
        ToolDescriptor("claude_mcp_list", "List all configured MCP servers in Claude Code", NoInput),
    )
}


def list_tools() -> list[ToolDescriptor]:
    """Enumerate all tools in declaration order."""
    return list(TOOLS.values())


def get_tool(name: str) -> ToolDescriptor:
    """Look up a tool by name.

    Raises:
        UnknownToolError: If no tool has this name.
    """
    try:
        return TOOLS[name]
    except KeyError:
        raise UnknownToolError(name) from None
