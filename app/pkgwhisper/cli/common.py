"""Helpers shared by CLI commands."""

from pathlib import Path

import typer

from pkgwhisper.core.config import AppConfig, ConfigError, load_config
from pkgwhisper.core.errors import InstallerError, InstallerExecutionError
from pkgwhisper.models.events import (
    ExecutingInstallerEvent,
    InitializationEvent,
    InstallationSuccessfulEvent,
    InstallerEvent,
)
from pkgwhisper.utils.formatting import print_error, print_info, print_success


def require_config(ctx: typer.Context) -> AppConfig:
    """Load the configuration or exit with a helpful error message."""
    config_path: Path | None = (ctx.obj or {}).get("config_path")
    try:
        return load_config(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def show_event(event: InstallerEvent) -> None:
    """Print a lifecycle event to the console."""
    if isinstance(event, InitializationEvent):
        print_info(f"Preparing {event.package_id} ...")
    elif isinstance(event, ExecutingInstallerEvent):
        print_info(f"Running installer for {event.package_id} ...")
    elif isinstance(event, InstallationSuccessfulEvent):
        print_success(f"{event.package_id} installed.")


def report_failure(error: InstallerError) -> None:
    """Print an installer error, including the log file when one was written."""
    print_error(str(error))
    if isinstance(error, InstallerExecutionError) and error.log_path is not None:
        print_info(f"Installer log: {error.log_path}")
