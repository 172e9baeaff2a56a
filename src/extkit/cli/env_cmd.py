"""CLI commands for environment variable checks."""

from __future__ import annotations

from rich.console import Console

from extkit.extensions.env import DISALLOWED_ENV_KEYS, is_disallowed

console = Console()


def check_names(names: list[str]) -> bool:
    """Print a verdict per name.

    Returns:
        True if every name may be overridden
    """
    allowed = True
    for name in names:
        if is_disallowed(name):
            console.print(f"[red]✗ {name} is not allowed to be overridden[/red]")
            allowed = False
        else:
            console.print(f"[green]✓ {name}[/green]")
    return allowed


def print_denylist() -> None:
    """Print the denylisted variable names, one per line."""
    for name in sorted(DISALLOWED_ENV_KEYS, key=str.upper):
        console.print(name)
