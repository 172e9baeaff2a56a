"""Reading and writing extkit.yaml.

Env maps are filtered while the file is validated, so a loaded
configuration never carries a denylisted env var.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from extkit.config.schema import ExtkitConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".extkit" / "extkit.yaml"


class ConfigError(Exception):
    """The configuration file could not be read or is invalid."""


def _resolve(path: Optional[Union[str, Path]]) -> Path:
    if path is None:
        return DEFAULT_CONFIG_PATH
    return Path(path).expanduser()


def load_config(path: Optional[Union[str, Path]] = None) -> ExtkitConfig:
    """Load the extension configuration.

    A missing or empty file yields the defaults, i.e. only the built-in
    default extension.

    Args:
        path: Config file, defaults to ``~/.extkit/extkit.yaml``

    Returns:
        Validated configuration

    Raises:
        ConfigError: If the file cannot be read, is not YAML, is not a
            mapping at the top level, or fails validation
    """
    path = _resolve(path)

    if not path.exists():
        logger.debug("No config at %s, using defaults", path)
        return ExtkitConfig()

    try:
        raw = path.read_text()
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return ExtkitConfig()
    if not isinstance(data, dict):
        raise ConfigError(
            f"Config {path} must be a mapping at the top level, got {type(data).__name__}"
        )

    try:
        return ExtkitConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Configuration validation failed for {path}: {e}") from e


def save_config(config: ExtkitConfig, path: Optional[Union[str, Path]] = None) -> None:
    """Write the configuration as YAML, creating parent directories.

    Raises:
        ConfigError: If the file cannot be written
    """
    path = _resolve(path)
    data = config.model_dump(mode="json", by_alias=True)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(yaml.safe_dump(data, default_flow_style=False, sort_keys=False))
    except OSError as e:
        raise ConfigError(f"Cannot write config {path}: {e}") from e
