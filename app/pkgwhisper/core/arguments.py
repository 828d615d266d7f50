"""Installer command-line assembly.

Combines adapter defaults with package-specific overrides for the
effective interactivity level, then appends logging arguments when a
logging template is available.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from pkgwhisper.adapters.base import PreparedAdapter
from pkgwhisper.models.package import InstallerArgs, InteractivityLevel

logger = logging.getLogger(__name__)

# Placeholder in logging templates replaced with the quoted log file path
LOG_PATH_PLACEHOLDER = "{path}"


@dataclass(frozen=True, slots=True)
class InstallerCommand:
    """Arguments to launch an installer with.

    Attributes:
        arguments: Space-separated argument string.
        log_path: Log file the installer was told to write, or None if no
            logging arguments were applied.
    """

    arguments: str
    log_path: Path | None = None


def _join(*parts: str | None) -> str:
    return " ".join(p.strip() for p in parts if p and p.strip())


def _package_args_for(package_args: InstallerArgs | None, level: InteractivityLevel) -> str | None:
    if package_args is None:
        return None
    if level == InteractivityLevel.SILENT:
        return package_args.silent
    if level == InteractivityLevel.PASSIVE:
        return package_args.passive
    return package_args.interactive


def select_arguments(
    level: InteractivityLevel,
    package_args: InstallerArgs | None,
    adapter: PreparedAdapter,
) -> str:
    """Build the install/uninstall arguments for an interactivity level.

    Adapter tokens always precede package override tokens.

    Args:
        level: Effective interactivity level.
        package_args: Package-specific argument overrides, if any.
        adapter: Adapter prepared for this run.

    Returns:
        Trimmed argument string, possibly empty.
    """
    return _join(adapter.args_for(level), _package_args_for(package_args, level))


def logging_arguments(
    package_args: InstallerArgs | None,
    adapter: PreparedAdapter,
    log_path: Path,
) -> str | None:
    """Render the logging arguments, if any template applies.

    The package's logging template takes precedence over the adapter's.

    Returns:
        Logging arguments with the quoted log path substituted, or None
        when neither side declares a logging template.
    """
    template = package_args.log if package_args is not None and package_args.log is not None else adapter.log_args
    if template is None:
        return None
    return template.replace(LOG_PATH_PLACEHOLDER, f'"{log_path}"').strip()


def build_arguments(
    level: InteractivityLevel,
    package_args: InstallerArgs | None,
    adapter: PreparedAdapter,
    log_path: Path,
) -> InstallerCommand:
    """Build the full command line for an installer run.

    Args:
        level: Effective interactivity level.
        package_args: Package-specific argument overrides, if any.
        adapter: Adapter prepared for this run.
        log_path: Where the installer should write its log, if it can.

    Returns:
        InstallerCommand with the argument string, and the log path only
        when logging arguments were applied.
    """
    arguments = select_arguments(level, package_args, adapter)
    log_args = logging_arguments(package_args, adapter, log_path)

    if log_args is None:
        return InstallerCommand(arguments=arguments)

    logger.info("Writing installer log files to %s", log_path)
    return InstallerCommand(arguments=_join(arguments, log_args), log_path=log_path)
