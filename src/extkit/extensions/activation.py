"""Environment resolution for extensions about to be launched.

This is the strict path: stored env maps are validated again and env key
references are resolved, so nothing reaches a transport unchecked.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from mcp.client.stdio import StdioServerParameters

from extkit.extensions.config import ENV_CARRYING_TYPES, ExtensionConfig, StdioExtension
from extkit.extensions.env import is_disallowed
from extkit.extensions.errors import InvalidEnvVarError, SetupError

logger = logging.getLogger(__name__)


def validate_extension(config: ExtensionConfig) -> None:
    """Check an extension's env vars and env keys against the denylist.

    Raises:
        InvalidEnvVarError: Naming the first disallowed variable found
    """
    if not isinstance(config, ENV_CARRYING_TYPES):
        return

    config.envs.validate()
    for key in config.env_keys:
        if is_disallowed(key):
            raise InvalidEnvVarError(key)


def resolve_environment(
    config: ExtensionConfig,
    secrets: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Build the environment an extension will be launched with.

    Args:
        config: Extension configuration
        secrets: Where ``env_keys`` are looked up (defaults to ``os.environ``)

    Returns:
        Explicit ``envs`` merged with resolved ``env_keys`` values; empty for
        variants that are not launched with an environment

    Raises:
        InvalidEnvVarError: If an env var or env key is on the denylist
        SetupError: If an env key has no value in ``secrets``
    """
    if not isinstance(config, ENV_CARRYING_TYPES):
        return {}

    validate_extension(config)
    env = config.envs.snapshot()

    if secrets is None:
        secrets = os.environ

    for key in config.env_keys:
        if key not in secrets:
            raise SetupError(f"Missing value for env key '{key}' of extension '{config.name}'")
        env[key] = secrets[key]

    logger.debug("Resolved %d env vars for extension '%s'", len(env), config.name)
    return env


def stdio_parameters(
    config: ExtensionConfig,
    secrets: Mapping[str, str] | None = None,
) -> StdioServerParameters:
    """Build the launch parameters for a stdio extension.

    Args:
        config: Extension configuration, must be a stdio extension
        secrets: Where ``env_keys`` are looked up (defaults to ``os.environ``)

    Returns:
        Parameters for an MCP stdio client

    Raises:
        SetupError: If the extension is not a stdio extension
        InvalidEnvVarError: If the environment contains a denylisted name
    """
    if not isinstance(config, StdioExtension):
        raise SetupError(f"{config} is not a stdio extension")

    env = resolve_environment(config, secrets)
    return StdioServerParameters(
        command=config.cmd,
        args=list(config.args),
        env=env if env else None,
    )
