"""Interactivity level negotiation.

Maps a requested interactivity level to one the package/adapter pair
actually supports. Interactive is assumed to be supported by every
installer and is the final fallback.
"""

import logging

from pkgwhisper.adapters.base import PreparedAdapter
from pkgwhisper.models.package import InstallerArgs, InteractivityLevel

logger = logging.getLogger(__name__)


def supports_silent(package_args: InstallerArgs | None, adapter: PreparedAdapter) -> bool:
    """Check if either the package or the adapter provides silent arguments."""
    return (package_args is not None and package_args.silent is not None) or adapter.silent_args is not None


def supports_passive(package_args: InstallerArgs | None, adapter: PreparedAdapter) -> bool:
    """Check if either the package or the adapter provides passive arguments."""
    return (package_args is not None and package_args.passive is not None) or adapter.passive_args is not None


def resolve_interactivity(
    requested: InteractivityLevel,
    package_args: InstallerArgs | None,
    adapter: PreparedAdapter,
) -> InteractivityLevel:
    """Resolve the effective interactivity level for a run.

    Silent falls back to Passive, Passive falls back to Silent, and both
    fall back to Interactive when neither is available. Degradation is
    never an error; it is logged at info level when switching between
    Silent and Passive, and at warning level when ending up Interactive.

    Args:
        requested: Level requested by the caller.
        package_args: Package-specific argument overrides, if any.
        adapter: Adapter prepared for this run.

    Returns:
        The effective interactivity level.
    """
    silent = supports_silent(package_args, adapter)
    passive = supports_passive(package_args, adapter)

    if requested == InteractivityLevel.SILENT and not silent:
        if passive:
            logger.info("Silent install is not supported by installer. Switching to Passive")
            return InteractivityLevel.PASSIVE

        logger.warning("Silent or Passive install is not supported by installer. Switching to Interactive")
        return InteractivityLevel.INTERACTIVE

    if requested == InteractivityLevel.PASSIVE and not passive:
        if silent:
            logger.info("Passive install is not supported by installer. Switching to Silent")
            return InteractivityLevel.SILENT

        logger.warning("Silent or Passive install is not supported by installer. Switching to Interactive")
        return InteractivityLevel.INTERACTIVE

    return requested
