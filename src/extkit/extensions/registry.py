"""Key-indexed registry of configured extensions."""

from __future__ import annotations

import logging

from extkit.config.schema import ExtensionEntry, ExtkitConfig
from extkit.extensions.activation import validate_extension
from extkit.extensions.config import ExtensionConfig
from extkit.extensions.errors import InvalidEnvVarError
from extkit.extensions.keys import name_to_key

logger = logging.getLogger(__name__)


class ExtensionRegistry:
    """Holds extensions by their normalized key.

    Two extensions whose names normalize to the same key are the same
    extension: adding the second replaces the first.
    """

    def __init__(self) -> None:
        self._extensions: dict[str, ExtensionConfig] = {}
        self._disabled: set[str] = set()

    @classmethod
    def from_config(cls, config: ExtkitConfig) -> ExtensionRegistry:
        """Create a registry from loaded configuration."""
        registry = cls()
        for entry in config.extensions.values():
            registry.add(entry.config, enabled=entry.enabled)
        return registry

    def to_config(self) -> ExtkitConfig:
        """Export the registry as configuration."""
        return ExtkitConfig(
            extensions={
                key: ExtensionEntry(enabled=key not in self._disabled, config=ext)
                for key, ext in self._extensions.items()
            }
        )

    def add(self, config: ExtensionConfig, enabled: bool = True) -> str:
        """Register an extension, replacing any with the same key.

        Args:
            config: Extension configuration
            enabled: Whether the extension starts enabled

        Returns:
            The extension's key
        """
        key = config.key()
        existing = self._extensions.get(key)
        if existing is not None:
            logger.info("Replacing extension %s with %s", existing, config)
        self._extensions[key] = config
        if enabled:
            self._disabled.discard(key)
        else:
            self._disabled.add(key)
        return key

    def get(self, name: str) -> ExtensionConfig | None:
        """Look an extension up by name or key."""
        return self._extensions.get(name_to_key(name))

    def remove(self, name: str) -> ExtensionConfig | None:
        """Remove an extension by name or key.

        Returns:
            The removed extension, or None if it was not registered
        """
        key = name_to_key(name)
        self._disabled.discard(key)
        return self._extensions.pop(key, None)

    def set_enabled(self, name: str, enabled: bool) -> None:
        """Enable or disable a registered extension.

        Raises:
            KeyError: If no extension has this name
        """
        key = name_to_key(name)
        if key not in self._extensions:
            raise KeyError(name)
        if enabled:
            self._disabled.discard(key)
        else:
            self._disabled.add(key)

    def is_enabled(self, name: str) -> bool:
        key = name_to_key(name)
        return key in self._extensions and key not in self._disabled

    def enabled_extensions(self) -> list[ExtensionConfig]:
        """Extensions that are currently enabled, in registration order."""
        return [ext for key, ext in self._extensions.items() if key not in self._disabled]

    def validate_all(self) -> dict[str, InvalidEnvVarError]:
        """Strictly validate the environments of all extensions.

        Returns:
            Errors keyed by extension key; empty when everything is valid
        """
        failures: dict[str, InvalidEnvVarError] = {}
        for key, ext in self._extensions.items():
            try:
                validate_extension(ext)
            except InvalidEnvVarError as e:
                logger.warning("Extension '%s' failed validation: %s", ext.name, e)
                failures[key] = e
        return failures

    @property
    def keys(self) -> list[str]:
        """All registered keys."""
        return list(self._extensions)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name_to_key(name) in self._extensions

    def __len__(self) -> int:
        return len(self._extensions)
