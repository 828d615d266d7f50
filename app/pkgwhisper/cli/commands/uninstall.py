"""Uninstall command implementation."""

from typing import Annotated

import typer

from pkgwhisper.cli.common import report_failure, require_config, show_event
from pkgwhisper.core.errors import InstallerError
from pkgwhisper.core.events import EventHub
from pkgwhisper.core.factory import create_install_service
from pkgwhisper.core.inventory import InventoryError
from pkgwhisper.models.events import ExecutingInstallerEvent, InstallerEvent
from pkgwhisper.models.options import UninstallOptions
from pkgwhisper.models.package import InteractivityLevel
from pkgwhisper.utils.formatting import print_error, print_success


def uninstall_package(
    ctx: typer.Context,
    package_id: Annotated[
        str,
        typer.Argument(help="Package id or display name to uninstall."),
    ],
    interactivity: Annotated[
        InteractivityLevel | None,
        typer.Option(
            "--interactivity",
            "-i",
            help="Uninstaller UI level. Falls back when unsupported.",
            case_sensitive=False,
        ),
    ] = None,
) -> None:
    """Uninstall the single installed package matching PACKAGE_ID.

    Nothing is removed when no package or several packages match.
    """
    config = require_config(ctx)

    published: list[InstallerEvent] = []
    events = EventHub()
    events.subscribe(show_event)
    events.subscribe(published.append)

    try:
        service = create_install_service(config, events)
        service.uninstall(
            UninstallOptions(
                package_id=package_id,
                interactivity=interactivity or config.interactivity,
            )
        )
    except InventoryError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    except InstallerError as e:
        report_failure(e)
        raise typer.Exit(code=1) from e

    # Skipped uninstalls (no match or several) never reach the executing step.
    if any(isinstance(event, ExecutingInstallerEvent) for event in published):
        print_success(f"{package_id} uninstalled.")
