"""Errors raised while configuring, validating or starting extensions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from extkit.extensions.config import ExtensionConfig


class ExtensionError(Exception):
    """Base class for all extension errors."""


class InitializationError(ExtensionError):
    """An extension server could not be started from its configuration."""

    def __init__(self, config: ExtensionConfig, cause: BaseException):
        self.config = config
        self.cause = cause
        super().__init__(
            f"Failed to start the MCP server from configuration `{config}` `{cause}`"
        )


class ClientError(ExtensionError):
    """A client call to an extension server failed."""

    def __init__(self, cause: BaseException | str):
        self.cause = cause
        super().__init__(f"Failed a client call to an MCP server: {cause}")


class ContextLimitError(ExtensionError):
    """The conversation history could not be truncated to fit the context."""

    def __init__(self) -> None:
        super().__init__(
            "User Message exceeded context-limit. "
            "History could not be truncated to accommodate."
        )


class TransportError(ExtensionError):
    """The transport layer failed."""

    def __init__(self, cause: BaseException | str):
        self.cause = cause
        super().__init__(f"Transport error: {cause}")


class InvalidEnvVarError(ExtensionError):
    """An extension tried to override a protected environment variable."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Environment variable `{key}` is not allowed to be overridden.")


class SetupError(ExtensionError):
    """Free-form failure while setting an extension up."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Error during extension setup: {message}")


class TaskJoinError(ExtensionError):
    """A background task failed or was cancelled before it could be joined."""

    def __init__(self, cause: BaseException | str):
        self.cause = cause
        super().__init__(f"Join error occurred during task execution: {cause}")


class ExtensionIOError(ExtensionError):
    """Input/output failure while working with an extension."""

    def __init__(self, cause: BaseException | str):
        self.cause = cause
        super().__init__(f"IO error: {cause}")


__all__ = [
    "ClientError",
    "ContextLimitError",
    "ExtensionError",
    "ExtensionIOError",
    "InitializationError",
    "InvalidEnvVarError",
    "SetupError",
    "TaskJoinError",
    "TransportError",
]
