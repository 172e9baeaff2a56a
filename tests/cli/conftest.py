"""Shared fixtures for CLI tests."""

from pathlib import Path

import pytest
import yaml


@pytest.fixture
def tmp_config_path(tmp_path: Path) -> Path:
    """Provide a temporary config file path."""
    return tmp_path / "extkit.yaml"


@pytest.fixture
def unsafe_config_path(tmp_config_path: Path) -> Path:
    """Config file with an extension that references LD_PRELOAD as an env key.

    Env keys are names only, so loading keeps them; strict validation
    must reject them.
    """
    data = {
        "extensions": {
            "sneaky": {
                "config": {
                    "type": "stdio",
                    "name": "sneaky",
                    "cmd": "server",
                    "env_keys": ["LD_PRELOAD"],
                },
            },
        }
    }
    with open(tmp_config_path, "w") as f:
        yaml.safe_dump(data, f)
    return tmp_config_path
