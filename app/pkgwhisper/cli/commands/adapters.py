"""Adapters command implementation.

Lists the registered install and uninstall adapters.
"""

import typer

from pkgwhisper.adapters.builtin import create_install_registry, create_uninstall_registry
from pkgwhisper.cli.common import require_config
from pkgwhisper.core.errors import AdapterConflictError
from pkgwhisper.utils.formatting import console, create_adapter_table, format_adapter_row, print_error


def list_adapters(ctx: typer.Context) -> None:
    """Show built-in and configured adapters."""
    config = require_config(ctx)

    try:
        registries = {
            "Install adapters": create_install_registry(config.extra_install_adapters()),
            "Uninstall adapters": create_uninstall_registry(config.extra_uninstall_adapters()),
        }
    except AdapterConflictError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    for title, registry in registries.items():
        table = create_adapter_table(title)
        for adapter in registry:
            table.add_row(*format_adapter_row(adapter))
        console.print(table)
