"""CLI commands for inspecting configured extensions."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.table import Table

from extkit.config.loader import ConfigError, load_config
from extkit.extensions.registry import ExtensionRegistry

console = Console()


def _load_registry(config_path: str | None) -> ExtensionRegistry | None:
    path = Path(config_path) if config_path else None
    try:
        config = load_config(path)
    except ConfigError as e:
        console.print(f"[red]Failed to load config: {e}[/red]")
        return None
    return ExtensionRegistry.from_config(config)


def list_extensions(config_path: str | None = None) -> bool:
    """List all configured extensions.

    Returns:
        False if the configuration could not be loaded
    """
    registry = _load_registry(config_path)
    if registry is None:
        return False

    if not len(registry):
        console.print("[dim]No extensions configured.[/dim]")
        return True

    table = Table(title="Extensions")
    table.add_column("Key", style="cyan")
    table.add_column("Type")
    table.add_column("Summary")
    table.add_column("Status")

    for key in registry.keys:
        ext = registry.get(key)
        status = "[green]enabled[/green]" if registry.is_enabled(key) else "[red]disabled[/red]"
        table.add_row(key, ext.type, ext.render(), status)

    console.print(table)
    return True


def show_extension(name: str, config_path: str | None = None) -> bool:
    """Show detailed info about an extension.

    Returns:
        False if the extension could not be found
    """
    registry = _load_registry(config_path)
    if registry is None:
        return False

    ext = registry.get(name)
    if ext is None:
        console.print(f"[red]Extension '{name}' not found.[/red]")
        return False

    console.print(f"\n[bold cyan]{ext.name}[/bold cyan] ({ext.type})")
    console.print(f"  Key: {ext.key()}")
    console.print(f"  Summary: {ext.render()}")
    console.print(f"  Enabled: {registry.is_enabled(name)}")

    description = getattr(ext, "description", None)
    if description:
        console.print(f"  {description}")
    timeout = getattr(ext, "timeout", None)
    console.print(f"  Timeout: {timeout if timeout is not None else 'default'}")

    envs = getattr(ext, "envs", None)
    if envs is not None and len(envs):
        # Values may be secrets
        console.print(f"  Env vars: {', '.join(sorted(envs.snapshot()))}")
    env_keys = getattr(ext, "env_keys", None)
    if env_keys:
        console.print(f"  Env keys: {', '.join(env_keys)}")

    return True


def validate_extensions(config_path: str | None = None) -> bool:
    """Strictly validate every configured extension.

    Returns:
        True if every extension passed
    """
    registry = _load_registry(config_path)
    if registry is None:
        return False

    failures = registry.validate_all()
    for key, error in failures.items():
        console.print(f"[red]✗ {key}: {error}[/red]")

    if failures:
        return False

    console.print(f"[green]✓ {len(registry)} extension(s) valid[/green]")
    return True
