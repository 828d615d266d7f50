"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

from pkgwhisper.adapters.base import InstallerAdapter

THEME = Theme(
    {
        "info": "#0ec1c8",
        "success": "#03b971",
        "warning": "#f5b332",
        "error": "bold #f53263",
        "muted": "#b2bec3",
        "header": "bold #69B9A1",
    }
)


def _detect_color_system() -> str | None:
    """Use truecolor for interactive terminals, let Rich auto-detect otherwise."""
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances
console = Console(theme=THEME, color_system=_detect_color_system())
err_console = Console(theme=THEME, stderr=True, color_system=_detect_color_system())


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Route log records to stderr through Rich.

    Args:
        verbose: Show debug messages.
        quiet: Only show warnings and errors.
    """
    level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=verbose, markup=False)],
        force=True,
    )


def create_adapter_table(title: str) -> Table:
    """Create a pre-configured table for displaying adapters."""
    table = Table(title=title, show_header=True, header_style="header")
    table.add_column("Method", no_wrap=True)
    table.add_column("Silent", style="muted")
    table.add_column("Passive", style="muted")
    table.add_column("Interactive", style="muted")
    table.add_column("Log", style="muted")
    table.add_column("Exit codes", style="info", justify="right")
    return table


def format_adapter_row(adapter: InstallerAdapter) -> tuple[str, str, str, str, str, str]:
    """Format an adapter as a table row.

    Unsupported levels are shown as a dash; interactive is always supported.
    """

    def show(template: str | None) -> str:
        return "-" if template is None else template or "(none)"

    return (
        adapter.install_method.value,
        show(adapter.silent_args),
        show(adapter.passive_args),
        adapter.interactive_args or "(none)",
        show(adapter.log_args),
        str(len(adapter.exit_codes)),
    )


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(message)}[/]", soft_wrap=True)


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}", soft_wrap=True)


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}", soft_wrap=True)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(message)}[/]", soft_wrap=True)
