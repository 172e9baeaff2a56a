"""Tests for the extension registry."""

import logging

import pytest

from extkit.config.schema import ExtensionEntry, ExtkitConfig
from extkit.extensions.config import StdioExtension, builtin, default_extension, sse, stdio
from extkit.extensions.registry import ExtensionRegistry


def test_registry_init():
    registry = ExtensionRegistry()
    assert len(registry) == 0
    assert registry.keys == []
    assert registry.enabled_extensions() == []


def test_add_returns_key():
    registry = ExtensionRegistry()
    assert registry.add(stdio("My Tool", "tool", "d", 1)) == "my-tool"
    assert "my-tool" in registry
    assert "My Tool" in registry
    assert "MY_TOOL" in registry


def test_same_key_replaces(caplog):
    registry = ExtensionRegistry()
    registry.add(stdio("My Tool", "old", "d", 1))

    with caplog.at_level(logging.INFO, logger="extkit.extensions.registry"):
        registry.add(sse("my-tool", "https://example.com/sse", "d", 1))

    assert len(registry) == 1
    assert registry.get("My Tool").type == "sse"
    assert "Replacing extension" in caplog.text


def test_get_unknown():
    assert ExtensionRegistry().get("nope") is None


def test_remove():
    registry = ExtensionRegistry()
    ext = builtin("memory")
    registry.add(ext, enabled=False)

    assert registry.remove("Memory") is ext
    assert registry.remove("memory") is None
    assert "memory" not in registry


def test_enable_disable():
    registry = ExtensionRegistry()
    registry.add(builtin("a"))
    registry.add(builtin("b"), enabled=False)

    assert registry.is_enabled("a")
    assert not registry.is_enabled("b")
    assert [ext.name for ext in registry.enabled_extensions()] == ["a"]

    registry.set_enabled("b", True)
    registry.set_enabled("a", False)
    assert [ext.name for ext in registry.enabled_extensions()] == ["b"]


def test_set_enabled_unknown():
    with pytest.raises(KeyError):
        ExtensionRegistry().set_enabled("ghost", True)


def test_is_enabled_unknown():
    assert ExtensionRegistry().is_enabled("ghost") is False


def test_validate_all():
    registry = ExtensionRegistry()
    good = StdioExtension(name="good", cmd="x", envs={"A": "1"})
    bad = StdioExtension(name="bad", cmd="x")
    bad.envs.root["DYLD_INSERT_LIBRARIES"] = "/tmp/evil.dylib"
    registry.add(good)
    registry.add(bad)
    registry.add(builtin("memory"))

    failures = registry.validate_all()
    assert list(failures) == ["bad"]
    assert failures["bad"].key == "DYLD_INSERT_LIBRARIES"


def test_from_config_and_back():
    config = ExtkitConfig(
        extensions={
            "developer": ExtensionEntry(config=default_extension()),
            "search": ExtensionEntry(
                enabled=False, config=sse("search", "https://example.com/sse", "Search", 30)
            ),
        }
    )
    registry = ExtensionRegistry.from_config(config)

    assert registry.keys == ["developer", "search"]
    assert registry.is_enabled("developer")
    assert not registry.is_enabled("search")

    exported = registry.to_config()
    assert exported.extensions["search"].enabled is False
    assert exported.extensions["developer"].config == default_extension()
