"""Install command implementation.

Installs a package described by a manifest file.
"""

from pathlib import Path
from typing import Annotated

import typer

from pkgwhisper.cli.common import report_failure, require_config, show_event
from pkgwhisper.core.errors import InstallerError
from pkgwhisper.core.events import EventHub
from pkgwhisper.core.factory import create_install_service
from pkgwhisper.core.inventory import InventoryError
from pkgwhisper.core.manifest import ManifestError, load_package_manifest
from pkgwhisper.models.options import InstallOptions
from pkgwhisper.models.package import InteractivityLevel
from pkgwhisper.utils.formatting import print_error


def install_package(
    ctx: typer.Context,
    manifest: Annotated[
        Path,
        typer.Argument(help="Path to the package manifest (TOML)."),
    ],
    interactivity: Annotated[
        InteractivityLevel | None,
        typer.Option(
            "--interactivity",
            "-i",
            help="Installer UI level. Falls back when unsupported.",
            case_sensitive=False,
        ),
    ] = None,
) -> None:
    """Install a package by running its native installer."""
    config = require_config(ctx)

    try:
        package = load_package_manifest(manifest)
    except ManifestError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    events = EventHub()
    events.subscribe(show_event)

    try:
        service = create_install_service(config, events)
        service.install(package, InstallOptions(interactivity=interactivity or config.interactivity))
    except InventoryError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    except InstallerError as e:
        report_failure(e)
        raise typer.Exit(code=1) from e
