"""Pydantic models for extkit.yaml configuration."""

import logging

from pydantic import BaseModel, Field, field_validator

from extkit.extensions.config import ExtensionConfig, default_extension

logger = logging.getLogger(__name__)


class ExtensionEntry(BaseModel):
    """A configured extension and whether it is active."""

    enabled: bool = Field(default=True, description="Whether this extension is enabled")
    config: ExtensionConfig = Field(description="Extension transport configuration")


def _default_extensions() -> dict[str, ExtensionEntry]:
    extension = default_extension()
    return {extension.key(): ExtensionEntry(config=extension)}


class ExtkitConfig(BaseModel):
    """Root configuration schema for extkit."""

    extensions: dict[str, ExtensionEntry] = Field(
        default_factory=_default_extensions,
        description="Configured extensions keyed by normalized name",
    )

    @field_validator("extensions")
    @classmethod
    def _rekey_extensions(cls, value: dict[str, ExtensionEntry]) -> dict[str, ExtensionEntry]:
        rekeyed: dict[str, ExtensionEntry] = {}
        for entry in value.values():
            key = entry.config.key()
            if key in rekeyed:
                logger.warning(
                    "Extension '%s' collides with '%s' (key '%s'); keeping the later entry",
                    entry.config.name,
                    rekeyed[key].config.name,
                    key,
                )
            rekeyed[key] = entry
        return rekeyed
