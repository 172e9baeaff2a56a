"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest
import yaml

from extkit.config.schema import ExtkitConfig


@pytest.fixture
def default_config() -> ExtkitConfig:
    """Provide a default configuration for tests."""
    return ExtkitConfig()


@pytest.fixture
def sample_config_path(tmp_path: Path) -> Path:
    """Write a config file with one extension of each launchable kind."""
    data = {
        "extensions": {
            "developer": {
                "enabled": True,
                "config": {"type": "builtin", "name": "developer", "display_name": "Developer"},
            },
            "github": {
                "enabled": True,
                "config": {
                    "type": "stdio",
                    "name": "GitHub",
                    "cmd": "github-mcp",
                    "args": ["--stdio"],
                    "envs": {"GITHUB_HOST": "github.com"},
                    "env_keys": ["GITHUB_TOKEN"],
                    "timeout": 300,
                },
            },
            "search": {
                "enabled": False,
                "config": {"type": "sse", "name": "search", "uri": "http://localhost:8080/sse"},
            },
        }
    }
    path = tmp_path / "extkit.yaml"
    with open(path, "w") as f:
        yaml.safe_dump(data, f)
    return path
