"""Lifecycle events published during install operations."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class InstallerEvent:
    """Base class for lifecycle events.

    Attributes:
        package_id: Package the operation concerns.
    """

    package_id: str


@dataclass(frozen=True, slots=True)
class InitializationEvent(InstallerEvent):
    """Published when an installation begins."""


@dataclass(frozen=True, slots=True)
class ExecutingInstallerEvent(InstallerEvent):
    """Published right before the installer process is started."""


@dataclass(frozen=True, slots=True)
class InstallationSuccessfulEvent(InstallerEvent):
    """Published when an installation completes successfully."""
