"""Extension configuration, environment safety and errors."""

from extkit.extensions.activation import resolve_environment, stdio_parameters, validate_extension
from extkit.extensions.config import (
    BuiltinExtension,
    ExtensionConfig,
    FrontendExtension,
    InlinePythonExtension,
    SseExtension,
    StdioExtension,
    StreamableHttpExtension,
    default_extension,
    dump_extension,
    parse_extension,
    parse_extension_json,
)
from extkit.extensions.env import DISALLOWED_ENV_KEYS, Envs, is_disallowed
from extkit.extensions.errors import (
    ClientError,
    ContextLimitError,
    ExtensionError,
    ExtensionIOError,
    InitializationError,
    InvalidEnvVarError,
    SetupError,
    TaskJoinError,
    TransportError,
)
from extkit.extensions.info import ExtensionInfo, PermissionLevel, ToolInfo
from extkit.extensions.keys import name_to_key

__all__ = [
    "DISALLOWED_ENV_KEYS",
    "BuiltinExtension",
    "ClientError",
    "ContextLimitError",
    "Envs",
    "ExtensionConfig",
    "ExtensionError",
    "ExtensionIOError",
    "ExtensionInfo",
    "FrontendExtension",
    "InitializationError",
    "InlinePythonExtension",
    "InvalidEnvVarError",
    "PermissionLevel",
    "SetupError",
    "SseExtension",
    "StdioExtension",
    "StreamableHttpExtension",
    "TaskJoinError",
    "ToolInfo",
    "TransportError",
    "default_extension",
    "dump_extension",
    "is_disallowed",
    "name_to_key",
    "parse_extension",
    "parse_extension_json",
    "resolve_environment",
    "stdio_parameters",
    "validate_extension",
]
