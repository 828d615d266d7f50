"""Config command implementation.

Creates and locates the configuration file.
"""

from typing import Annotated

import typer

from pkgwhisper.core.config import AppConfig, ConfigError, save_config
from pkgwhisper.core.paths import get_config_path
from pkgwhisper.utils.formatting import console, print_error, print_success, print_warning

app = typer.Typer(help="Manage pkgwhisper configuration.")


@app.command("path")
def show_path(ctx: typer.Context) -> None:
    """Print the configuration file path."""
    path = (ctx.obj or {}).get("config_path") or get_config_path()
    console.print(str(path), soft_wrap=True)


@app.command("init")
def init_config(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a default configuration file."""
    path = (ctx.obj or {}).get("config_path") or get_config_path()

    if path.exists() and not force:
        print_warning(f"Config already exists: {path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_config(AppConfig(), path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
