"""Extension configuration variants.

An extension is reached through exactly one transport. Each transport has
its own model, and the closed union :data:`ExtensionConfig` selects between
them on the ``type`` field of the serialized form.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Annotated, Any, Literal, Union

from mcp.types import Tool
from pydantic import BaseModel, Field, TypeAdapter

from extkit.config.defaults import (
    DEFAULT_DISPLAY_NAME,
    DEFAULT_EXTENSION,
    DEFAULT_EXTENSION_TIMEOUT,
)
from extkit.extensions.env import Envs
from extkit.extensions.keys import name_to_key


class _ExtensionBase(BaseModel):
    """Fields and behaviour shared by every extension variant."""

    name: str = Field(description="The name used to identify this extension")

    def key(self) -> str:
        """Normalized identity used for lookup and equality of extensions."""
        return name_to_key(self.name)

    def with_args(self, args: Iterable[str]) -> ExtensionConfig:
        """Return the extension with its command arguments replaced.

        Only stdio extensions take arguments; every other variant is
        returned unchanged.
        """
        return self  # type: ignore[return-value]

    def render(self) -> str:
        """Short human-readable summary for logs and diagnostics."""
        return str(self)


class SseExtension(_ExtensionBase):
    """Server-sent events client with a URI endpoint."""

    type: Literal["sse"] = "sse"
    uri: str
    envs: Envs = Field(default_factory=Envs)
    env_keys: list[str] = Field(
        default_factory=list,
        description="Names of environment variables resolved at launch time",
    )
    description: str | None = None
    # Optional for compatibility with older configurations
    timeout: int | None = Field(default=None, ge=0, description="Timeout in seconds")
    bundled: bool | None = Field(
        default=None, description="Whether this extension ships with the application"
    )

    def __str__(self) -> str:
        return f"SSE({self.name}: {self.uri})"


class StreamableHttpExtension(_ExtensionBase):
    """Streamable HTTP client with a URI endpoint."""

    type: Literal["streamable_http"] = "streamable_http"
    uri: str
    envs: Envs = Field(default_factory=Envs)
    env_keys: list[str] = Field(default_factory=list)
    headers: dict[str, str] = Field(default_factory=dict)
    description: str | None = None
    timeout: int | None = Field(default=None, ge=0)
    bundled: bool | None = None

    def __str__(self) -> str:
        return f"StreamableHttp({self.name}: {self.uri})"


class StdioExtension(_ExtensionBase):
    """Standard I/O client with command and arguments."""

    type: Literal["stdio"] = "stdio"
    cmd: str
    args: list[str] = Field(default_factory=list)
    envs: Envs = Field(default_factory=Envs)
    env_keys: list[str] = Field(default_factory=list)
    description: str | None = None
    timeout: int | None = Field(default=None, ge=0)
    bundled: bool | None = None

    def with_args(self, args: Iterable[str]) -> StdioExtension:
        return self.model_copy(update={"args": [str(arg) for arg in args]}, deep=True)

    def __str__(self) -> str:
        return f"Stdio({self.name}: {self.cmd} {' '.join(self.args)})"


class BuiltinExtension(_ExtensionBase):
    """Built-in extension that runs in-process."""

    type: Literal["builtin"] = "builtin"
    display_name: str | None = Field(default=None, description="Name shown in the UI")
    description: str | None = None
    timeout: int | None = Field(default=None, ge=0)
    bundled: bool | None = None

    def __str__(self) -> str:
        return f"Builtin({self.name})"


class FrontendExtension(_ExtensionBase):
    """Tools provided by the frontend and called through it."""

    type: Literal["frontend"] = "frontend"
    tools: list[Tool] = Field(description="The tools provided by the frontend")
    instructions: str | None = Field(
        default=None, description="Instructions for how to use these tools"
    )
    bundled: bool | None = None

    def __str__(self) -> str:
        return f"Frontend({self.name}: {len(self.tools)} tools)"


class InlinePythonExtension(_ExtensionBase):
    """Inline Python code executed as an extension server."""

    type: Literal["inline_python"] = "inline_python"
    code: str = Field(description="The Python code to execute")
    description: str | None = None
    timeout: int | None = Field(default=None, ge=0)
    dependencies: list[str] | None = Field(
        default=None, description="Python packages required by the code"
    )

    def __str__(self) -> str:
        return f"InlinePython({self.name}: {len(self.code)} chars)"


ExtensionConfig = Annotated[
    Union[
        SseExtension,
        StdioExtension,
        BuiltinExtension,
        StreamableHttpExtension,
        FrontendExtension,
        InlinePythonExtension,
    ],
    Field(discriminator="type"),
]

# Variants whose transport launches with an environment of its own
ENV_CARRYING_TYPES = (SseExtension, StdioExtension, StreamableHttpExtension)

_ADAPTER: TypeAdapter[ExtensionConfig] = TypeAdapter(ExtensionConfig)


def parse_extension(data: dict[str, Any]) -> ExtensionConfig:
    """Build an extension from its serialized form.

    Raises:
        pydantic.ValidationError: If ``type`` is unknown or fields are invalid
    """
    return _ADAPTER.validate_python(data)


def parse_extension_json(raw: str | bytes) -> ExtensionConfig:
    """Build an extension from a JSON document."""
    return _ADAPTER.validate_json(raw)


def dump_extension(extension: ExtensionConfig) -> dict[str, Any]:
    """Serialize an extension to JSON-compatible data."""
    return extension.model_dump(mode="json", by_alias=True)


def sse(name: str, uri: str, description: str, timeout: int) -> SseExtension:
    """Create an SSE extension."""
    return SseExtension(name=name, uri=uri, description=description, timeout=timeout)


def streamable_http(
    name: str, uri: str, description: str, timeout: int
) -> StreamableHttpExtension:
    """Create a streamable HTTP extension."""
    return StreamableHttpExtension(
        name=name, uri=uri, description=description, timeout=timeout
    )


def stdio(name: str, cmd: str, description: str, timeout: int) -> StdioExtension:
    """Create a stdio extension with no arguments.

    Use :meth:`StdioExtension.with_args` to set the arguments.
    """
    return StdioExtension(name=name, cmd=cmd, description=description, timeout=timeout)


def inline_python(
    name: str, code: str, description: str, timeout: int
) -> InlinePythonExtension:
    """Create an inline Python extension without dependencies."""
    return InlinePythonExtension(
        name=name, code=code, description=description, timeout=timeout
    )


def builtin(
    name: str,
    display_name: str | None = None,
    description: str | None = None,
    timeout: int | None = None,
    bundled: bool | None = None,
) -> BuiltinExtension:
    """Create a built-in extension."""
    return BuiltinExtension(
        name=name,
        display_name=display_name,
        description=description,
        timeout=timeout,
        bundled=bundled,
    )


def frontend(
    name: str, tools: Iterable[Tool], instructions: str | None = None
) -> FrontendExtension:
    """Create an extension backed by frontend-provided tools."""
    return FrontendExtension(name=name, tools=list(tools), instructions=instructions)


def default_extension() -> BuiltinExtension:
    """The extension used when no configuration is supplied."""
    return BuiltinExtension(
        name=DEFAULT_EXTENSION,
        display_name=DEFAULT_DISPLAY_NAME,
        description=None,
        timeout=DEFAULT_EXTENSION_TIMEOUT,
        bundled=True,
    )
