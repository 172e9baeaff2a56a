"""Main CLI application using Typer."""

import typer
from rich.console import Console

from extkit import __version__

app = typer.Typer(
    name="extkit",
    help="extkit - Extension configuration and environment safety for agents",
    no_args_is_help=True,
)

console = Console()


@app.command()
def version():
    """Show extkit version."""
    console.print(f"extkit version {__version__}")


# Extension commands
ext_app = typer.Typer(help="Inspect configured extensions")
app.add_typer(ext_app, name="ext")


@ext_app.command("list")
def ext_list(
    config_path: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file (default: ~/.extkit/extkit.yaml)",
    ),
):
    """List all configured extensions."""
    from extkit.cli.ext_cmd import list_extensions

    if not list_extensions(config_path=config_path):
        raise typer.Exit(code=1)


@ext_app.command("show")
def ext_show(
    name: str = typer.Argument(..., help="Extension name or key"),
    config_path: str = typer.Option(None, "--config", "-c", help="Path to config file"),
):
    """Show detailed information about an extension."""
    from extkit.cli.ext_cmd import show_extension

    if not show_extension(name, config_path=config_path):
        raise typer.Exit(code=1)


@ext_app.command("validate")
def ext_validate(
    config_path: str = typer.Option(None, "--config", "-c", help="Path to config file"),
):
    """Check every extension's environment against the denylist.

    Denylisted env vars in the config file are already dropped (with a
    warning) while it loads, so this reports denylisted env keys and any
    env vars added after loading.
    """
    from extkit.cli.ext_cmd import validate_extensions

    if not validate_extensions(config_path=config_path):
        raise typer.Exit(code=1)


# Environment commands
env_app = typer.Typer(help="Check environment variable names")
app.add_typer(env_app, name="env")


@env_app.command("check")
def env_check(
    names: list[str] = typer.Argument(..., help="Variable names to check"),
):
    """Report which variable names may not be overridden."""
    from extkit.cli.env_cmd import check_names

    if not check_names(names):
        raise typer.Exit(code=1)


@env_app.command("denylist")
def env_denylist():
    """Print the protected variable names."""
    from extkit.cli.env_cmd import print_denylist

    print_denylist()


if __name__ == "__main__":
    app()
