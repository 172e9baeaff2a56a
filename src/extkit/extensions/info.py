"""Extension and tool metadata used when building prompts."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mcp.types import Tool


class PermissionLevel(str, Enum):
    """How the agent may call a tool."""

    ALWAYS_ALLOW = "always_allow"
    ASK_BEFORE = "ask_before"
    NEVER_ALLOW = "never_allow"


@dataclass
class ExtensionInfo:
    """An extension as presented to the model."""

    name: str
    instructions: str
    has_resources: bool = False


@dataclass
class ToolInfo:
    """A tool as presented to the model."""

    name: str
    description: str
    parameters: list[str] = field(default_factory=list)
    permission: PermissionLevel | None = None

    @classmethod
    def from_mcp_tool(cls, tool: Tool, permission: PermissionLevel | None = None) -> ToolInfo:
        """Build tool info from an MCP tool definition.

        Args:
            tool: MCP tool with a JSON Schema ``inputSchema``
            permission: Permission level to attach, if known

        Returns:
            ToolInfo listing the tool's parameter names
        """
        # Keyed by the wire name, which mcp keeps stable across attribute renames
        schema = tool.model_dump(by_alias=True).get("inputSchema") or {}
        properties = schema.get("properties", {})
        return cls(
            name=tool.name,
            description=tool.description or "",
            parameters=list(properties),
            permission=permission,
        )
